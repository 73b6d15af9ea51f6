# File: build_scout/engine.py
"""build_scout.engine: оркестрация извлечения снапшота, сравнения и анализа."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from build_scout.comparator import (
    ChangeReport,
    ChangeTypes,
    ImpactLevel,
    analyze_change_impact,
    compare_builds,
    compare_component_ids,
    detect_change_types,
)
from build_scout.config import AnalyzerConfig, load_config
from build_scout.extractor import BuildSnapshot, extract_build_metadata
from build_scout.logger import logger
from build_scout.storage import load_snapshot, save_snapshot

__all__ = ["AnalysisResult", "Engine"]


@dataclass(slots=True)
class AnalysisResult:
    """Всё, что нужно вызывающей стороне: снапшоты, отчёт и производные оценки."""

    snapshot: BuildSnapshot
    report: ChangeReport
    impact: ImpactLevel
    change_types: ChangeTypes
    baseline: Optional[BuildSnapshot] = None
    component_changes: List[str] = field(default_factory=list)

    def routes_to_test(self) -> List[str]:
        """Маршруты для визуальных тестов: все при глобальном изменении."""
        if self.report.has_global_changes:
            return self.snapshot.routes()
        return list(self.report.affected_routes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "framework": self.snapshot.framework,
            "timestamp": self.snapshot.timestamp,
            "hasBaseline": self.baseline is not None,
            "impact": self.impact.value,
            "changeTypes": self.change_types.to_dict(),
            "componentChanges": list(self.component_changes),
            "routesToTest": self.routes_to_test(),
            "report": self.report.to_dict(),
        }


class Engine:
    """Фасад для CLI и тестов: конфиг → снапшот → baseline → отчёт."""

    @staticmethod
    def load_config(path: Optional[Union[str, Path]]) -> AnalyzerConfig:
        """Загружает конфиг из YAML/JSON или использует значения по умолчанию."""
        return load_config(path)

    def __init__(self, config: Optional[AnalyzerConfig] = None) -> None:
        self.config = config or AnalyzerConfig()

    def extract(self, build_dir: Optional[Union[str, Path]] = None) -> BuildSnapshot:
        """Извлекает снапшот из каталога сборки (по умолчанию config.build_dir)."""
        target = Path(build_dir) if build_dir is not None else self.config.build_dir
        logger.info("Extracting build metadata from %s", target)
        return extract_build_metadata(target, settings=self.config.extractor)

    def load_baseline(self, path: Optional[Union[str, Path]] = None) -> Optional[BuildSnapshot]:
        return load_snapshot(path if path is not None else self.config.baseline_path)

    def compare(
        self,
        baseline: Optional[BuildSnapshot],
        current: BuildSnapshot,
    ) -> AnalysisResult:
        """Сравнивает снапшоты и добавляет оценку влияния и типов изменений.

        Baseline другого формата сборки считается отсутствующим: сравнение
        между фреймворками бессмысленно, поэтому тестируется всё.
        """
        if baseline is not None and baseline.framework != current.framework:
            logger.warning(
                "Baseline framework %r does not match current %r - ignoring baseline",
                baseline.framework,
                current.framework,
            )
            baseline = None

        settings = self.config.comparator
        report = compare_builds(
            baseline, current, threshold=settings.global_change_threshold, sink=logger
        )
        component_changes = (
            compare_component_ids(baseline, current, sink=logger) if baseline is not None else []
        )
        impact = analyze_change_impact(
            report,
            medium_threshold=settings.medium_impact_threshold,
            high_threshold=settings.high_impact_threshold,
        )
        logger.info("%s (impact: %s)", report.summary, impact.value)
        return AnalysisResult(
            snapshot=current,
            report=report,
            impact=impact,
            change_types=detect_change_types(report),
            baseline=baseline,
            component_changes=component_changes,
        )

    def run(
        self,
        build_dir: Optional[Union[str, Path]] = None,
        baseline_path: Optional[Union[str, Path]] = None,
        *,
        save_baseline: Optional[bool] = None,
    ) -> AnalysisResult:
        """Полный цикл: извлечь, загрузить baseline, сравнить, при необходимости сохранить."""
        current = self.extract(build_dir)
        target = Path(baseline_path) if baseline_path is not None else self.config.baseline_path
        result = self.compare(self.load_baseline(target), current)

        if self.config.save_baseline if save_baseline is None else save_baseline:
            save_snapshot(current, target)
        return result
