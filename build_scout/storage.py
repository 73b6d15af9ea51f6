# File: build_scout/storage.py
"""build_scout.storage: чтение и запись JSON-снапшотов (baseline)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from build_scout.extractor.models import BuildSnapshot
from build_scout.logger import get_logger

__all__ = ["load_snapshot", "save_snapshot"]

log = get_logger("storage")


def load_snapshot(path: Union[str, Path]) -> Optional[BuildSnapshot]:
    """Загружает снапшот из JSON; отсутствующий файл означает «нет baseline».

    Raises:
        ValueError: файл не является корректным JSON.
        pydantic.ValidationError: JSON не соответствует формату снапшота.
    """
    p = Path(path).expanduser()
    if not p.is_file():
        log.info("No baseline snapshot at %s", p)
        return None
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {p}: {exc}") from exc
    snapshot = BuildSnapshot.model_validate(data)
    log.info("Loaded baseline snapshot %s (%d pages)", p, len(snapshot.pages))
    return snapshot


def save_snapshot(snapshot: BuildSnapshot, path: Union[str, Path]) -> Path:
    """Сохраняет снапшот в JSON (UTF-8, отступ 2) и возвращает Path файла."""
    output = Path(path).expanduser()
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(snapshot.to_json(pretty=True), encoding="utf-8")
    log.info("Saved snapshot with %d pages to %s", len(snapshot.pages), output)
    return output
