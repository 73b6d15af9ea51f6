# File: build_scout/comparator.py
"""build_scout.comparator: сравнение двух снапшотов сборки.

The diff is a pure function of its two inputs. Progress messages go to an
optional ``sink`` (anything with logger-style ``info``/``warning``); without one
nothing is emitted.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from build_scout.extractor.models import BuildSnapshot

__all__ = [
    "ChangeReport",
    "ChangeSink",
    "ChangeTypes",
    "ImpactLevel",
    "GLOBAL_CHANGE_THRESHOLD",
    "NO_CHANGES_MESSAGE",
    "analyze_change_impact",
    "compare_builds",
    "compare_component_ids",
    "detect_change_types",
    "detect_global_changes",
    "generate_summary",
]

GLOBAL_CHANGE_THRESHOLD = 5
NO_CHANGES_MESSAGE = "No changes detected - skipping visual regression tests"


class ChangeSink(Protocol):
    """Receiver for diagnostic messages; :class:`logging.Logger` fits."""

    def info(self, msg: str, *args: Any) -> None: ...

    def warning(self, msg: str, *args: Any) -> None: ...


class _NullSink:
    def info(self, msg: str, *args: Any) -> None:
        pass

    def warning(self, msg: str, *args: Any) -> None:
        pass


_NULL_SINK = _NullSink()


class ImpactLevel(str, Enum):
    """Ordinal impact of a change report."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True, slots=True)
class ChangeReport:
    """Результат сравнения: классифицированные страницы, маршруты и сводка."""

    changed_pages: List[str] = field(default_factory=list)
    new_pages: List[str] = field(default_factory=list)
    deleted_pages: List[str] = field(default_factory=list)
    affected_routes: List[str] = field(default_factory=list)
    has_global_changes: bool = False
    summary: str = ""

    @property
    def total_changes(self) -> int:
        """Changed plus new pages; deletions have nothing left to test."""
        return len(self.changed_pages) + len(self.new_pages)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "changedPages": list(self.changed_pages),
            "newPages": list(self.new_pages),
            "deletedPages": list(self.deleted_pages),
            "affectedRoutes": list(self.affected_routes),
            "hasGlobalChanges": self.has_global_changes,
            "summary": self.summary,
        }

    def json(self, *, pretty: bool = False) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


@dataclass(frozen=True, slots=True)
class ChangeTypes:
    """Coarse layout/content/style breakdown, see :func:`detect_change_types`."""

    has_layout_changes: bool
    has_content_changes: bool
    has_style_changes: bool

    def to_dict(self) -> Dict[str, bool]:
        return {
            "hasLayoutChanges": self.has_layout_changes,
            "hasContentChanges": self.has_content_changes,
            "hasStyleChanges": self.has_style_changes,
        }


def detect_global_changes(
    changed: int,
    new: int,
    *,
    threshold: int = GLOBAL_CHANGE_THRESHOLD,
    sink: Optional[ChangeSink] = None,
) -> bool:
    """True when more than *threshold* pages changed or appeared at once.

    Many simultaneous page changes usually come from a shared layout or asset,
    so the caller should fall back to testing every route.
    """
    total = changed + new
    if total > threshold:
        (sink or _NULL_SINK).warning("%d pages changed - possible global change detected", total)
        return True
    return False


def generate_summary(
    changed_pages: List[str],
    new_pages: List[str],
    deleted_pages: List[str],
    affected_routes: List[str],
    has_global_changes: bool,
) -> str:
    """Render the one-line human summary of a diff."""
    parts: List[str] = []
    if changed_pages:
        parts.append(f"{len(changed_pages)} changed")
    if new_pages:
        parts.append(f"{len(new_pages)} new")
    if deleted_pages:
        parts.append(f"{len(deleted_pages)} deleted")

    if not parts:
        return NO_CHANGES_MESSAGE

    change_text = ", ".join(parts)
    if has_global_changes:
        return (
            f"Detected {change_text} pages. "
            "Global changes suspected - will test all routes for safety."
        )

    route_count = len(affected_routes)
    noun = "route" if route_count == 1 else "routes"
    return (
        f"Detected {change_text} pages. "
        f"Will test {route_count} affected {noun}: {', '.join(affected_routes)}"
    )


def compare_builds(
    baseline: Optional[BuildSnapshot],
    current: BuildSnapshot,
    *,
    threshold: int = GLOBAL_CHANGE_THRESHOLD,
    sink: Optional[ChangeSink] = None,
) -> ChangeReport:
    """Классифицирует страницы текущей сборки относительно baseline.

    Without a baseline every page is new and the report escalates to a global
    change. Otherwise ``affected_routes`` lists routes of changed pages first,
    then of new pages; deleted pages contribute no route. Duplicate routes are
    kept as they come.
    """
    out = sink or _NULL_SINK

    if baseline is None:
        all_pages = list(current.pages)
        return ChangeReport(
            new_pages=all_pages,
            affected_routes=[current.pages[name].route for name in all_pages],
            has_global_changes=True,
            summary=f"No baseline found. Will test all {len(all_pages)} pages.",
        )

    changed: List[str] = []
    new: List[str] = []
    deleted: List[str] = []
    routes: List[str] = []

    for name, page in current.pages.items():
        before = baseline.pages.get(name)
        if before is None or before.hash == page.hash:
            continue
        changed.append(name)
        routes.append(page.route)
        out.info("%s changed (%+d bytes)", name, page.size - before.size)

    for name, page in current.pages.items():
        if name not in baseline.pages:
            new.append(name)
            routes.append(page.route)
            out.info("%s is new", name)

    for name in baseline.pages:
        if name not in current.pages:
            deleted.append(name)
            out.info("%s was deleted", name)

    is_global = detect_global_changes(len(changed), len(new), threshold=threshold, sink=sink)
    return ChangeReport(
        changed_pages=changed,
        new_pages=new,
        deleted_pages=deleted,
        affected_routes=routes,
        has_global_changes=is_global,
        summary=generate_summary(changed, new, deleted, routes, is_global),
    )


# --------------------------------------------------------------------------- #
# Auxiliary analyses                                                          #
# --------------------------------------------------------------------------- #


def compare_component_ids(
    baseline: BuildSnapshot,
    current: BuildSnapshot,
    *,
    sink: Optional[ChangeSink] = None,
) -> List[str]:
    """Pages whose component id is known in both builds and differs."""
    out = sink or _NULL_SINK
    changed: List[str] = []
    for name, page in current.pages.items():
        before = baseline.pages.get(name)
        if before is None or not page.component_id or not before.component_id:
            continue
        if page.component_id != before.component_id:
            changed.append(name)
            out.info(
                "%s: component ID changed %s -> %s", name, before.component_id, page.component_id
            )
    return changed


def analyze_change_impact(
    report: ChangeReport,
    *,
    medium_threshold: int = 3,
    high_threshold: int = 10,
) -> ImpactLevel:
    """Global escalation or more than 10 routes is high, more than 3 is medium."""
    total_affected = len(report.affected_routes)
    if report.has_global_changes or total_affected > high_threshold:
        return ImpactLevel.HIGH
    if total_affected > medium_threshold:
        return ImpactLevel.MEDIUM
    return ImpactLevel.LOW


def detect_change_types(report: ChangeReport) -> ChangeTypes:
    # Placeholder: derived from counts only, no content analysis yet.
    return ChangeTypes(
        has_layout_changes=bool(report.changed_pages),
        has_content_changes=bool(report.changed_pages),
        has_style_changes=report.has_global_changes,
    )
