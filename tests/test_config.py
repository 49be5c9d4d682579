"""Unit tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from hypa.config.global_config import HypaConfig, load_config
from hypa.constants import DEFAULT_TITLE
from hypa.errors import ConfigError


def write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "hypa.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_defaults_without_file() -> None:
    config = load_config(None)

    assert config == HypaConfig()
    assert config.title == DEFAULT_TITLE
    assert config.stylesheet is None
    assert config.log_level == "WARNING"


def test_values_are_loaded(tmp_path: Path) -> None:
    path = write_config(
        tmp_path,
        'title = "Reading list"\nstylesheet = "site.css"\nlog_level = "debug"\nlog_file = "hypa.log"\n',
    )

    config = load_config(path)

    assert config.title == "Reading list"
    assert config.stylesheet == Path("site.css")
    assert config.log_level == "DEBUG"
    assert config.log_file == Path("hypa.log")


def test_shipped_defaults_file_is_valid() -> None:
    config = load_config(Path(__file__).parent.parent / "config" / "defaults.toml")

    assert config.title == DEFAULT_TITLE


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.toml")


def test_invalid_toml_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(write_config(tmp_path, "title = \n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(write_config(tmp_path, 'colour = "blue"\n'))


def test_invalid_log_level_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(write_config(tmp_path, 'log_level = "LOUD"\n'))
