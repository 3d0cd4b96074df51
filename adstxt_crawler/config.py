# === FILE: adstxt_crawler/config.py ===
"""
Модуль для загрузки и валидации конфигурации краулера ads.txt.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field


class CrawlerConfig(BaseModel):
    """Неизменяемые параметры одного пакетного обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    chunk_size: int = Field(50, ge=1, description="Число доменов, обрабатываемых одновременно.")
    out_dir: Path = Field(..., description="Каталог для сохранения найденных ads.txt.")
    timeout_ms: int = Field(1000, ge=0, description="Таймаут на один запрос (миллисекунд).")
    limit: Optional[int] = Field(None, ge=0, description="Макс. число доменов из входного списка.")
    progress_every: int = Field(10000, ge=1, description="Шаг логирования прогресса (доменов).")

    @property
    def timeout(self) -> float:
        """Таймаут одного запроса в секундах."""
        return self.timeout_ms / 1000.0


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


def _read_file(path: Union[str, Path, None]) -> dict[str, Any]:
    if path is None:
        if not _DEFAULT_CFG.exists():
            return {}
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Читает YAML или JSON, накладывает overrides (значения None пропускаются)
    и возвращает проверенный объект CrawlerConfig.

    Без path берётся configs/default.yaml, если он существует.
    При отсутствии явно указанного файла бросает FileNotFoundError.
    """
    data = _read_file(path)
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**data)
