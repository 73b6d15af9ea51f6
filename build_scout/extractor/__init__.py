# build_scout/extractor/__init__.py
"""build_scout.extractor: page fingerprints and build snapshots."""

from build_scout.extractor.extractor import (
    extract_build_metadata,
    extract_component_id,
    file_to_route,
    fingerprint_page,
)
from build_scout.extractor.models import BuildSnapshot, PageFingerprint

__all__ = [
    "BuildSnapshot",
    "PageFingerprint",
    "extract_build_metadata",
    "extract_component_id",
    "file_to_route",
    "fingerprint_page",
]
