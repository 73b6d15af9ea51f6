# build_scout/extractor/extractor.py
"""
Metadata extractor: turns a build output directory into a :class:`BuildSnapshot`.

Layout expected (names configurable through :class:`ExtractorSettings`)::

    <build_dir>/client.manifest.json
    <build_dir>/server/pages/*.js
"""
from __future__ import annotations

import hashlib
import re
from pathlib import Path
from typing import Dict, Optional, Union

from build_scout.config import ExtractorSettings
from build_scout.errors import NotRecognizedBuildFormat, PageReadError
from build_scout.extractor.models import BuildSnapshot, PageFingerprint
from build_scout.logger import get_logger

__all__ = (
    "extract_build_metadata",
    "fingerprint_page",
    "extract_component_id",
    "file_to_route",
    "COMPONENT_ID_RE",
)

log = get_logger("extractor")

# vue-loader emits e.g. `componentNormalizer(..., "1ce46445", ...)` in server bundles
COMPONENT_ID_RE = re.compile(r'componentNormalizer.*?"([a-f0-9]{8})"')


def extract_component_id(content: str) -> Optional[str]:
    """Return the 8-hex component id embedded in compiled page code, or None."""
    match = COMPONENT_ID_RE.search(content)
    return match.group(1) if match else None


def file_to_route(filename: str, *, index_page: str = "index.js", extension: str = ".js") -> str:
    """Map a page file name to its URL path: ``index.js`` → ``/``, ``about.js`` → ``/about``."""
    if filename == index_page:
        return "/"
    stem = filename[: -len(extension)] if filename.endswith(extension) else filename
    return f"/{stem}"


def fingerprint_page(path: Path, settings: ExtractorSettings) -> PageFingerprint:
    """Read one page file and build its fingerprint."""
    try:
        raw = path.read_bytes()
        content = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PageReadError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise PageReadError(path, exc.strerror or str(exc)) from exc

    return PageFingerprint(
        hash=hashlib.md5(raw).hexdigest(),  # noqa: S324
        component_id=extract_component_id(content),
        route=file_to_route(
            path.name, index_page=settings.index_page, extension=settings.page_extension
        ),
        size=len(raw),
    )


def extract_build_metadata(
    build_dir: Union[str, Path],
    *,
    settings: Optional[ExtractorSettings] = None,
) -> BuildSnapshot:
    """Scan *build_dir* and return a snapshot of every server-rendered page.

    Raises:
        NotRecognizedBuildFormat: manifest file or pages directory is missing.
        PageReadError: a page file could not be read.
    """
    settings = settings or ExtractorSettings()
    root = Path(build_dir)
    manifest_path = root / settings.manifest_name
    pages_dir = root.joinpath(*settings.pages_dir.split("/"))

    if not manifest_path.is_file():
        raise NotRecognizedBuildFormat(root, manifest_path)
    if not pages_dir.is_dir():
        raise NotRecognizedBuildFormat(root, pages_dir)

    pages: Dict[str, PageFingerprint] = {}
    for path in sorted(pages_dir.iterdir()):
        if not path.name.endswith(settings.page_extension) or not path.is_file():
            continue
        fingerprint = fingerprint_page(path, settings)
        pages[path.name] = fingerprint
        log.debug(
            "%s -> %s (%d bytes, component %s)",
            path.name,
            fingerprint.route,
            fingerprint.size,
            fingerprint.component_id or "-",
        )

    log.info("Extracted %d pages from %s", len(pages), root)
    return BuildSnapshot(framework=settings.framework, pages=pages)
