# === FILE: build_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации BuildScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ExtractorSettings(BaseModel):
    """Ожидаемая раскладка каталога сборки (Nuxt 2, серверный бандл)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    manifest_name: str = Field("client.manifest.json", min_length=1, description="Клиентский манифест сборки.")
    pages_dir: str = Field("server/pages", min_length=1, description="Каталог серверных страниц.")
    page_extension: str = Field(".js", min_length=2, description="Расширение файлов страниц.")
    index_page: str = Field("index.js", min_length=1, description="Файл корневого маршрута '/'.")
    framework: str = Field("nuxt2", min_length=1, description="Метка формата сборки в снапшоте.")

    @field_validator("page_extension", mode="before")
    def _leading_dot(cls, v: Any) -> Any:
        if isinstance(v, str) and v and not v.startswith("."):
            return f".{v}"
        return v


class ComparatorSettings(BaseModel):
    """Пороги эскалации и оценки влияния изменений."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    global_change_threshold: int = Field(5, ge=0, description="Больше N изменённых страниц — глобальное изменение.")
    medium_impact_threshold: int = Field(3, ge=0, description="Больше N маршрутов — влияние medium.")
    high_impact_threshold: int = Field(10, ge=0, description="Больше N маршрутов — влияние high.")

    @model_validator(mode="after")
    def _check_impact_order(self) -> ComparatorSettings:
        if self.high_impact_threshold < self.medium_impact_threshold:
            raise ValueError("high_impact_threshold must not be lower than medium_impact_threshold")
        return self


class AnalyzerConfig(BaseModel):
    """Конфигурация одного запуска анализа сборки."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    build_dir: Path = Field(Path("dist"), description="Каталог с результатом сборки.")
    baseline_path: Path = Field(
        Path(".build_scout/baseline.json"), description="JSON-снапшот предыдущей сборки."
    )
    save_baseline: bool = Field(False, description="Сохранить текущий снапшот как новый baseline.")
    extractor: ExtractorSettings = Field(default_factory=ExtractorSettings)
    comparator: ComparatorSettings = Field(default_factory=ComparatorSettings)

    @field_validator("build_dir", "baseline_path", mode="before")
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> AnalyzerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект AnalyzerConfig.
    Без пути берёт configs/default.yaml, а если его нет — встроенные значения.
    Явно указанный, но отсутствующий файл даёт FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return AnalyzerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return AnalyzerConfig(**data)


__all__ = ["AnalyzerConfig", "ComparatorSettings", "ExtractorSettings", "load_config"]
