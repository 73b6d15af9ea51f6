# File: tests/conftest.py
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union

import pytest

from build_scout.extractor.models import BuildSnapshot, PageFingerprint
from build_scout.logger import configure


PAGE_TEMPLATE = (
    'exports.ids = [{n}];\n'
    'var component = Object(componentNormalizer["a"])(script, render, staticRenderFns, '
    'false, null, "{cid}", null);\n'
    'module.exports = "{body}";\n'
)


@pytest.fixture(autouse=True)
def fresh_logging():
    """
    Bind the project logger to the streams of the current test.
    """
    configure(level="DEBUG")
    yield


@pytest.fixture()
def page_source() -> Callable[..., str]:
    """
    Compiled page text with an embedded component id.
    """

    def _source(body: str, cid: str = "1ce46445", n: int = 1) -> str:
        return PAGE_TEMPLATE.format(n=n, cid=cid, body=body)

    return _source


@pytest.fixture()
def make_build(tmp_path) -> Callable[..., Path]:
    """
    Factory for a fake Nuxt 2 build directory.
    Pages are given as {file name: file text}.
    """

    def _make(pages: Dict[str, str], name: str = "dist", manifest: bool = True) -> Path:
        root = tmp_path / name
        pages_dir = root / "server" / "pages"
        pages_dir.mkdir(parents=True, exist_ok=True)
        if manifest:
            (root / "client.manifest.json").write_text('{"all": [], "modules": {}}', encoding="utf-8")
        for file_name, text in pages.items():
            (pages_dir / file_name).write_text(text, encoding="utf-8")
        return root

    return _make


_PageEntry = Union[PageFingerprint, Tuple]


@pytest.fixture()
def make_snapshot() -> Callable[..., BuildSnapshot]:
    """
    Build a snapshot from {name: (hash, route[, size[, component_id]])}.
    """

    def _make(pages: Dict[str, _PageEntry], framework: str = "nuxt2") -> BuildSnapshot:
        built: Dict[str, PageFingerprint] = {}
        for name, entry in pages.items():
            if isinstance(entry, PageFingerprint):
                built[name] = entry
                continue
            hash_, route, *rest = entry
            size = rest[0] if rest else 100
            cid: Optional[str] = rest[1] if len(rest) > 1 else None
            built[name] = PageFingerprint(hash=hash_, route=route, size=size, component_id=cid)
        return BuildSnapshot(framework=framework, pages=built, timestamp=0)

    return _make
