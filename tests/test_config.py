"""Tests for environment-driven server settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from f1viz.config import PACKAGE_STATIC_DIR, Settings


def test_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    settings = Settings.from_env({})
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.log_level == "INFO"
    assert settings.static_dir == PACKAGE_STATIC_DIR
    assert (settings.static_dir / "index.html").is_file()


def test_port_override() -> None:
    settings = Settings.from_env({"PORT": "8080", "F1VIZ_LOG_LEVEL": "debug"})
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"


def test_build_dir_in_working_directory(tmp_path, monkeypatch) -> None:
    (tmp_path / "build").mkdir()
    monkeypatch.chdir(tmp_path)
    settings = Settings.from_env({})
    assert settings.static_dir == (tmp_path / "build").resolve()


def test_static_dir_override(tmp_path) -> None:
    settings = Settings.from_env({"F1VIZ_STATIC_DIR": str(tmp_path)})
    assert settings.static_dir == Path(tmp_path)


@pytest.mark.parametrize("port", ["0", "70000", "abc"])
def test_invalid_port(port: str) -> None:
    with pytest.raises(ValidationError):
        Settings.from_env({"PORT": port})


@pytest.mark.parametrize("level", ["verbose", "", "trace"])
def test_invalid_log_level(level: str) -> None:
    with pytest.raises(ValidationError):
        Settings.from_env({"F1VIZ_LOG_LEVEL": level})


def test_log_level_is_case_insensitive() -> None:
    assert Settings(log_level="warning").log_level == "WARNING"
