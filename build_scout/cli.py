# === FILE: build_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа BuildScout через командную строку.

Команды:
  extract   Извлечь снапшот страниц из каталога сборки
  compare   Сравнить сборку с сохранённым baseline и вывести отчёт
  diff      Сравнить два сохранённых снапшота
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда compare опции:
  --baseline PATH     JSON-снапшот предыдущей сборки
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --save-baseline     Записать текущий снапшот на место baseline
  --pretty            Преформатировать JSON-вывод (отступ 2)

Пример:
  build-scout compare dist --baseline .build_scout/baseline.json --save-baseline --pretty
"""
import json
import sys
from pathlib import Path

import click

from build_scout import __version__
from build_scout.config import load_config
from build_scout.engine import Engine
from build_scout.logger import init_logging
from build_scout.report.html_report import render_html
from build_scout.report.json_report import render_json
from build_scout.storage import load_snapshot, save_snapshot

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='BuildScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд BuildScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('extract', context_settings=CONTEXT_SETTINGS)
@click.argument('build_dir', required=False, type=click.Path(path_type=Path))
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить снапшот в JSON-файл'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.pass_context
def extract(ctx, build_dir, output, pretty):
    """Извлечь снапшот страниц из каталога сборки."""
    engine = Engine(ctx.obj['config'])
    try:
        snapshot = engine.extract(build_dir)
    except (ValueError, OSError) as e:
        print_error(f'Ошибка при извлечении: {e}')

    if output:
        click.echo(f'Snapshot: {save_snapshot(snapshot, output)}')
        return
    click.echo(snapshot.to_json(pretty=pretty))


@cli.command('compare', context_settings=CONTEXT_SETTINGS)
@click.argument('build_dir', required=False, type=click.Path(path_type=Path))
@click.option(
    '--baseline', '-b', 'baseline_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='JSON-снапшот предыдущей сборки (override baseline_path)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (встроенный шаблон, если не указана)'
)
@click.option(
    '--save-baseline', 'save_baseline', is_flag=True,
    help='Записать текущий снапшот как новый baseline (override save_baseline)'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.pass_context
def compare(ctx, build_dir, baseline_path, json_output, html_output, template_dir, save_baseline, pretty):
    """Сравнить сборку с baseline и сгенерировать отчёты."""
    engine = Engine(ctx.obj['config'])
    try:
        result = engine.run(build_dir, baseline_path, save_baseline=save_baseline or None)
    except Exception as e:
        print_error(f'Ошибка при анализе сборки: {e}')

    if not json_output and not html_output:
        indent = 2 if pretty else None
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=indent))
        return

    click.echo(result.report.summary)

    if json_output:
        try:
            click.echo(f'JSON report: {render_json(result, json_output)}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            click.echo(f'HTML report: {render_html(result, template_dir, html_output)}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('diff', context_settings=CONTEXT_SETTINGS)
@click.argument('baseline_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('current_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.pass_context
def diff(ctx, baseline_file, current_file, pretty):
    """Сравнить два сохранённых снапшота без каталога сборки."""
    cfg = ctx.obj['config']
    try:
        baseline = load_snapshot(baseline_file)
        current = load_snapshot(current_file)
    except Exception as e:
        print_error(f'Ошибка чтения снапшота: {e}')

    result = Engine(cfg).compare(baseline, current)
    click.echo(result.report.json(pretty=pretty))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
