# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from adstxt_crawler.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("out_dir: out\nchunk_size: 10", ".yaml", None),
        (json.dumps({"out_dir": "out", "chunk_size": 10}), ".json", None),
        ("{}", ".json", ValidationError),
        ("out_dir: out\nchunk_size: 0", ".yaml", ValidationError),
        ("out_dir: out\ntimeout_ms: -1", ".yaml", ValidationError),
        ("out_dir: out\nunknown_key: 1", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken", ".json", ValueError),
        ("out_dir = 'out'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.out_dir == Path("out")
        assert cfg.chunk_size == 10
        assert cfg.timeout_ms == 1000


def test_defaults():
    cfg = CrawlerConfig(out_dir="out")
    assert cfg.chunk_size == 50
    assert cfg.timeout_ms == 1000
    assert cfg.timeout == 1.0
    assert cfg.limit is None
    assert cfg.progress_every == 10000


def test_config_is_frozen():
    cfg = CrawlerConfig(out_dir="out")
    with pytest.raises(ValidationError):
        cfg.chunk_size = 5


def test_overrides_win_and_none_is_ignored(tmp_path):
    cfg_path = write_file(tmp_path, "out_dir: out\nchunk_size: 10\ntimeout_ms: 300", ".yaml")
    cfg = load_config(cfg_path, chunk_size=25, timeout_ms=None, limit=7)
    assert cfg.chunk_size == 25
    assert cfg.timeout_ms == 300
    assert cfg.limit == 7


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValidationError):
        load_config(None)
    assert load_config(None, out_dir="x").out_dir == Path("x")


def test_load_config_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("out_dir: crawled\nchunk_size: 5", encoding="utf-8")
    cfg = load_config(None)
    assert cfg.out_dir == Path("crawled")
    assert cfg.chunk_size == 5


def test_explicit_config_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_invalid_override_raises_validation_error(tmp_path):
    cfg_path = write_file(tmp_path, "out_dir: out\n", ".yaml")
    with pytest.raises(ValidationError) as info:
        load_config(cfg_path, chunk_size=0)
    assert info.value.errors()[0]["loc"] == ("chunk_size",)
