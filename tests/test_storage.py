# File: tests/test_storage.py
import json

import pytest
from pydantic import ValidationError

from build_scout.extractor.models import BuildSnapshot
from build_scout.storage import load_snapshot, save_snapshot


def test_missing_file_means_no_baseline(tmp_path):
    assert load_snapshot(tmp_path / "baseline.json") is None


def test_save_and_load(tmp_path, make_snapshot):
    snap = make_snapshot({"index.js": ("h1", "/", 10, "1ce46445"), "about.js": ("h2", "/about")})
    path = save_snapshot(snap, tmp_path / "nested" / "baseline.json")

    assert path.exists()
    assert load_snapshot(path) == snap


def test_saved_document_uses_persisted_keys(tmp_path, make_snapshot):
    snap = make_snapshot({"index.js": ("h1", "/", 10, "1ce46445")})
    data = json.loads(save_snapshot(snap, tmp_path / "b.json").read_text(encoding="utf-8"))
    assert data == {
        "framework": "nuxt2",
        "timestamp": 0,
        "pages": {"index.js": {"hash": "h1", "componentId": "1ce46445", "route": "/", "size": 10}},
    }


def test_load_document_written_elsewhere(tmp_path):
    path = tmp_path / "baseline.json"
    path.write_text(
        json.dumps(
            {
                "framework": "nuxt2",
                "timestamp": 1700000000000,
                "pages": {
                    "about.js": {"hash": "aaa", "route": "/about", "size": 100},
                    "index.js": {"hash": "bbb", "componentId": "0badcafe", "route": "/", "size": 5},
                },
            }
        ),
        encoding="utf-8",
    )

    snap = load_snapshot(path)

    assert isinstance(snap, BuildSnapshot)
    assert snap.pages["about.js"].component_id is None
    assert snap.pages["index.js"].component_id == "0badcafe"
    assert snap.timestamp == 1700000000000


def test_load_invalid_json(tmp_path):
    path = tmp_path / "baseline.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_snapshot(path)


def test_load_wrong_shape(tmp_path):
    path = tmp_path / "baseline.json"
    path.write_text(json.dumps({"pages": {"a.js": {"hash": "x"}}}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_snapshot(path)
