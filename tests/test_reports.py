# File: tests/test_reports.py
import json

import pytest

from build_scout.config import AnalyzerConfig
from build_scout.engine import Engine
from build_scout.report import render_html, render_json


@pytest.fixture()
def analysis(tmp_path, make_build, make_snapshot, page_source):
    engine = Engine(AnalyzerConfig(baseline_path=tmp_path / "none.json"))
    current = engine.extract(
        make_build({"index.js": page_source("<b>home</b>"), "about.js": page_source("about")})
    )
    baseline = make_snapshot(
        {
            "index.js": ("stale", "/", 10, "1ce46445"),
            "about.js": (current.pages["about.js"].hash, "/about"),
            "legacy.js": ("gone", "/legacy"),
        }
    )
    return engine.compare(baseline, current)


def test_render_json(tmp_path, analysis):
    out = render_json(analysis, tmp_path / "reports" / "changes.json")
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["report"]["changedPages"] == ["index.js"]
    assert data["report"]["deletedPages"] == ["legacy.js"]
    assert data["routesToTest"] == ["/"]
    assert data["impact"] == "low"
    assert data["framework"] == "nuxt2"


def test_render_html_default_template(tmp_path, analysis):
    out = render_html(analysis, None, tmp_path / "reports" / "changes.html")
    html = out.read_text(encoding="utf-8")
    assert "BuildScout change report" in html
    assert analysis.report.summary in html
    assert "legacy.js" in html
    assert "1ce46445" in html


def test_render_html_custom_template(tmp_path, analysis):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "report.html.j2").write_text(
        "<p>{{ impact }}|{{ routes|join(',') }}|{{ summary }}</p>", encoding="utf-8"
    )
    out = render_html(analysis, templates, tmp_path / "custom.html")
    assert out.read_text(encoding="utf-8").startswith("<p>low|/|Detected 1 changed, 1 deleted pages.")
