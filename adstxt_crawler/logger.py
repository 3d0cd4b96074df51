# === FILE: adstxt_crawler/logger.py ===
"""Логирование обхода для **adstxt-crawler**.

Консоль показывает ход батча на выбранном уровне: строки ``current: ...``
и финальное ``done!``. Лог-файл, если указан, пишет всё начиная с DEBUG,
поэтому в нём остаются и ошибки декодирования отдельных доменов, которые
в консоль при уровне INFO не попадают.

    from adstxt_crawler.logger import logger
    logger.info("start crawl ...")
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, Union

LOGGER_NAME: Final[str] = "adstxt_crawler"
DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(message)s"

_LevelT = Union[int, str]


def _console_handler(level: _LevelT, fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(path: Path, fmt: str) -> logging.FileHandler:
    # один запуск - один батч; файл дописывается, а не ротируется посреди обхода
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Перенастраивает логгер проекта, закрывая прежние обработчики.

    level
        Уровень для консоли (``"DEBUG"``, ``"INFO"``, ...).
    log_file
        Путь к лог-файлу; *None* - только консоль.
    log_format
        Строка формата :class:`logging.Formatter` для обоих обработчиков.
    """
    lg = logging.getLogger(LOGGER_NAME)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()

    lg.addHandler(_console_handler(level, log_format))
    if log_file is None:
        lg.setLevel(level)
    else:
        lg.addHandler(_file_handler(Path(log_file), log_format))
        lg.setLevel(logging.DEBUG)

    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["DEFAULT_FORMAT", "LOGGER_NAME", "init_logging", "logger"]
