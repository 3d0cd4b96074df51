# File: adstxt_crawler/utils.py
"""adstxt_crawler.utils: Утилиты для чтения списка доменов и подготовки выходного каталога."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

from adstxt_crawler.logger import logger

__all__: Sequence[str] = (
    "read_domains",
    "ensure_out_dir",
)


def read_domains(path: Union[str, Path], limit: Optional[int] = None) -> List[str]:
    """Читает список доменов (по одному на строку), пропуская пустые строки.

    При заданном limit возвращает только первые limit доменов.
    """
    p = Path(path).expanduser()
    if not p.is_file():
        logger.error("Domain list not found: %s", p)
        raise FileNotFoundError(f"Domain list file not found: {p}")
    domains: List[str] = []
    with p.open(encoding="utf-8") as f:
        for line in f:
            if limit is not None and len(domains) >= limit:
                break
            domain = line.strip()
            if domain:
                domains.append(domain)
    logger.debug("Loaded %d domains from %s", len(domains), p)
    return domains


def ensure_out_dir(path: Union[str, Path]) -> Path:
    """Раскрывает `~`, создаёт каталог при отсутствии и возвращает Path."""
    p = Path(path).expanduser()
    if p.exists() and not p.is_dir():
        logger.error("Output path is not a directory: %s", p)
        raise NotADirectoryError(f"Output path is not a directory: {p}")
    p.mkdir(parents=True, exist_ok=True)
    return p
