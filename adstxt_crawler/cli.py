# === FILE: adstxt_crawler/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера ads.txt через командную строку.

Команды:
  crawl     Обойти список доменов и сохранить найденные ads.txt
  parse     Разобрать сохранённый ads.txt и вывести JSON
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов, пишет и DEBUG (по умолчанию только stdout)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда crawl опции:
  --file, -f PATH     Файл со списком доменов (по одному на строку)
  --out-dir, -o DIR   Каталог для найденных файлов (создаётся при отсутствии)
  --chunk-size INT    Число доменов, обрабатываемых одновременно (default: 50)
  --timeout MS        Таймаут одного запроса в миллисекундах (default: 1000)
  --limit INT         Макс. число доменов для обхода

Дополнительно:
  --version, -v       Показать версию

Пример:
  adstxt-crawler crawl -f domains.txt -o out --chunk-size 100 --timeout 2000 --limit 10000
"""
import sys
import asyncio
import json
from pathlib import Path

import click

from adstxt_crawler import __version__
from adstxt_crawler.config import load_config
from adstxt_crawler.logger import DEFAULT_FORMAT, init_logging
from adstxt_crawler.parser.adstxt_parser import ParseError, parse_adstxt
from adstxt_crawler.scanner import start_crawl
from adstxt_crawler.utils import ensure_out_dir, read_domains

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])

def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)

@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='adstxt-crawler, version %(version)s')
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
    help='Лог-файл: дополнительно к stdout, с уровня DEBUG'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд adstxt-crawler CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path

@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--file', '-f', 'domains_file',
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Файл со списком доменов'
)
@click.option(
    '--out-dir', '-o', 'out_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Каталог для найденных ads.txt'
)
@click.option(
    '--chunk-size', 'chunk_size',
    type=click.IntRange(min=1),
    default=None,
    help='Число доменов, обрабатываемых одновременно [50]'
)
@click.option(
    '--timeout', 'timeout_ms',
    type=click.IntRange(min=0),
    default=None,
    help='Таймаут одного запроса, мс [1000]'
)
@click.option(
    '--limit', 'limit',
    type=click.IntRange(min=0),
    default=None,
    help='Макс. число доменов для обхода'
)
@click.pass_context
def crawl(ctx, domains_file, out_dir, chunk_size, timeout_ms, limit):
    """Обойти домены и сохранить найденные ads.txt."""
    try:
        cfg = load_config(
            ctx.obj['config_path'],
            out_dir=out_dir,
            chunk_size=chunk_size,
            timeout_ms=timeout_ms,
            limit=limit,
        )
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    try:
        ensure_out_dir(cfg.out_dir)
        domains = read_domains(domains_file, cfg.limit)
    except OSError as e:
        print_error(f'Ошибка подготовки входных данных: {e}')

    click.echo(f'Crawling {len(domains)} domains into {cfg.out_dir}')
    try:
        summary = asyncio.run(start_crawl(cfg, domains))
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    click.echo(f'processed: {summary.processed} / {summary.total}')
    click.echo(f'found: {summary.found}, not found: {summary.not_found}, failed: {summary.failed}')
    click.echo(f'elapsed: {summary.elapsed:.2f}s')

@cli.command('parse', context_settings=CONTEXT_SETTINGS)
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
def parse(path, pretty):
    """Разобрать сохранённый ads.txt и вывести записи и переменные в JSON."""
    try:
        ads = parse_adstxt(path.read_text(encoding='utf-8'))
    except (ParseError, UnicodeDecodeError) as e:
        print_error(f'Ошибка разбора {path}: {e}')

    indent = 2 if pretty else None
    click.echo(json.dumps(ads.to_dict(), ensure_ascii=False, indent=indent))

@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    try:
        cfg = load_config(ctx.obj['config_path'])
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    click.echo(cfg.model_dump_json(indent=2))

if __name__ == "__main__":
    cli()
