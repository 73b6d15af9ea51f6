# File: tests/test_engine.py
import json

from build_scout.comparator import ImpactLevel
from build_scout.config import AnalyzerConfig
from build_scout.engine import Engine
from build_scout.storage import load_snapshot, save_snapshot


def make_engine(tmp_path, **overrides) -> Engine:
    return Engine(AnalyzerConfig(baseline_path=tmp_path / "state" / "baseline.json", **overrides))


def test_first_run_tests_everything(tmp_path, make_build, page_source):
    build = make_build({"index.js": page_source("home"), "about.js": page_source("about")})
    engine = make_engine(tmp_path)

    result = engine.run(build)

    assert result.baseline is None
    assert result.report.has_global_changes is True
    assert result.impact is ImpactLevel.HIGH
    assert sorted(result.routes_to_test()) == ["/", "/about"]
    assert result.component_changes == []


def test_save_and_compare_again(tmp_path, make_build, page_source):
    build = make_build({"index.js": page_source("home"), "about.js": page_source("about")})
    engine = make_engine(tmp_path, save_baseline=True)
    engine.run(build)
    assert load_snapshot(tmp_path / "state" / "baseline.json") is not None

    (build / "server" / "pages" / "about.js").write_text(
        page_source("about v2", cid="0badcafe"), encoding="utf-8"
    )
    result = engine.run(build)

    assert result.report.changed_pages == ["about.js"]
    assert result.routes_to_test() == ["/about"]
    assert result.impact is ImpactLevel.LOW
    assert result.component_changes == ["about.js"]
    assert result.change_types.has_content_changes is True


def test_unchanged_build(tmp_path, make_build, page_source):
    build = make_build({"index.js": page_source("home")})
    engine = make_engine(tmp_path)
    save_snapshot(engine.extract(build), tmp_path / "state" / "baseline.json")

    result = engine.run(build)

    assert result.report.summary.startswith("No changes detected")
    assert result.routes_to_test() == []


def test_save_baseline_override(tmp_path, make_build):
    build = make_build({"index.js": "x"})
    engine = make_engine(tmp_path, save_baseline=True)
    engine.run(build, save_baseline=False)
    assert not (tmp_path / "state" / "baseline.json").exists()


def test_framework_mismatch_ignores_baseline(tmp_path, make_build, make_snapshot):
    build = make_build({"index.js": "x"})
    engine = make_engine(tmp_path)
    other = make_snapshot({"index.js": ("whatever", "/")}, framework="next13")

    result = engine.compare(other, engine.extract(build))

    assert result.baseline is None
    assert result.report.has_global_changes is True
    assert result.report.new_pages == ["index.js"]


def test_global_change_routes_cover_whole_build(tmp_path, make_build, make_snapshot):
    pages = {f"p{i}.js": str(i) for i in range(7)}
    pages["index.js"] = "root"
    engine = make_engine(tmp_path)
    current = engine.extract(make_build(pages))
    baseline = make_snapshot({"index.js": (current.pages["index.js"].hash, "/")})

    result = engine.compare(baseline, current)

    assert result.report.has_global_changes is True
    assert "/" not in result.report.affected_routes
    assert "/" in result.routes_to_test()
    assert len(result.routes_to_test()) == 8


def test_to_dict_is_json_serialisable(tmp_path, make_build):
    result = make_engine(tmp_path).run(make_build({"index.js": "x"}))
    data = json.loads(json.dumps(result.to_dict()))
    assert data["impact"] == "high"
    assert data["hasBaseline"] is False
    assert data["report"]["newPages"] == ["index.js"]
    assert data["changeTypes"] == {
        "hasLayoutChanges": False,
        "hasContentChanges": False,
        "hasStyleChanges": True,
    }
