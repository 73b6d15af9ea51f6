# build_scout/errors.py
"""Exceptions raised by the metadata extractor."""
from __future__ import annotations

from pathlib import Path
from typing import Union


class NotRecognizedBuildFormat(ValueError):
    """Raised when a directory does not match the supported build layout."""

    def __init__(self, build_dir: Union[str, Path], missing: Union[str, Path]) -> None:
        self.build_dir = Path(build_dir)
        self.missing = Path(missing)
        super().__init__(f"Not a Nuxt 2 build directory: {self.build_dir} (missing {self.missing})")


class PageReadError(OSError):
    """A page file could not be read or decoded; ``filename`` holds its path."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        super().__init__(f"Cannot read page file: {reason}")
        self.filename = str(path)
        self.reason = reason

    def __str__(self) -> str:
        return f"Cannot read page file {self.filename}: {self.reason}"


__all__ = ["NotRecognizedBuildFormat", "PageReadError"]
