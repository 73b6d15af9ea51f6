# File: build_scout/report/__init__.py
"""build_scout.report: генерация отчётов (JSON и HTML) для CLI и тестов."""

from build_scout.report.html_report import render_html
from build_scout.report.json_report import render_json

__all__ = ["render_json", "render_html"]
