# build_scout/extractor/models.py
"""
Data models for build snapshots.

JSON keys follow the persisted baseline format (``componentId`` in camelCase),
attribute names stay snake_case.
"""
from __future__ import annotations

import time
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


def _now_ms() -> int:
    return int(time.time() * 1000)


class PageFingerprint(BaseModel):
    """Fingerprint of one compiled server page: digest, size, route, component id."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hash: str
    component_id: Optional[str] = Field(None, alias="componentId")
    route: str
    size: int = Field(..., ge=0)


class BuildSnapshot(BaseModel):
    """All page fingerprints of one build plus the build format tag."""

    model_config = ConfigDict(frozen=True)

    framework: str
    pages: Dict[str, PageFingerprint] = Field(default_factory=dict)
    timestamp: int = Field(default_factory=_now_ms)

    def routes(self) -> list[str]:
        return [page.route for page in self.pages.values()]

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)

    def to_json(self, *, pretty: bool = False) -> str:
        """JSON representation in the persisted baseline format."""
        return self.model_dump_json(by_alias=True, indent=2 if pretty else None)


__all__ = ["PageFingerprint", "BuildSnapshot"]
