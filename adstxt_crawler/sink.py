# File: adstxt_crawler/sink.py
"""adstxt_crawler.sink: Сохранение найденных ads.txt в выходной каталог."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from adstxt_crawler.crawler.errors import StoreError


def store(out_dir: Union[str, Path], domain: str, content: str) -> Path:
    """Записывает content в out_dir/<domain>, перезаписывая существующий файл.

    Имя файла: строка домена без экранирования; вызывающий код отвечает за
    то, чтобы домен был допустимым именем файла.

    Raises:
        StoreError: если файл не удалось записать.
    """
    path = Path(out_dir) / domain
    if path.parent != Path(out_dir) or domain in ("", ".", ".."):
        raise StoreError(f"{domain!r}: not a plain file name")
    try:
        path.write_text(content, encoding="utf-8", newline="")
    except OSError as exc:
        raise StoreError(f"{domain}: cannot write {path}: {exc}") from exc
    return path


__all__ = ["store"]
