# File: build_scout/report/html_report.py
"""build_scout.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from build_scout.engine import AnalysisResult

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_NAME = "report.html.j2"


def render_html(
    result: AnalysisResult,
    template_dir: Optional[Union[Path, str]],
    output_path: Union[Path, str],
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        result: объект AnalysisResult.
        template_dir: директория с Jinja2-шаблонами (None — встроенный шаблон).
        output_path: путь к итоговому HTML-файлу.

    Returns:
        Path до сохранённого HTML-файла.
    """
    template_dir = Path(template_dir) if template_dir is not None else DEFAULT_TEMPLATE_DIR
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    report = result.report
    context: dict[str, Any] = {
        "framework": result.snapshot.framework,
        "has_baseline": result.baseline is not None,
        "summary": report.summary,
        "impact": result.impact.value,
        "has_global_changes": report.has_global_changes,
        "changed_pages": report.changed_pages,
        "new_pages": report.new_pages,
        "deleted_pages": report.deleted_pages,
        "routes": result.routes_to_test(),
        "component_changes": result.component_changes,
        "pages": result.snapshot.pages,
    }

    html_content = template.render(**context)
    output_path.write_text(html_content, encoding="utf-8")

    return output_path
