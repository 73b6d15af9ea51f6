# build_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта BuildScout.

Сериализация объекта AnalysisResult в файл.
"""
import json
from pathlib import Path

from build_scout.engine import AnalysisResult


def render_json(result: AnalysisResult, output_path: Path | str) -> Path:
    """
    Сохраняет результат анализа в формате JSON по указанному пути.

    :param result: объект AnalysisResult (снапшот, отчёт, оценка влияния)
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from build_scout.report.json_report import render_json
    report_path = render_json(result, 'reports/changes.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)

    return output
