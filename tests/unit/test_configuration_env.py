"""Unit tests for environment variable settings."""

from pathlib import Path

import pytest

from githubql_enums.configuration.env import Settings
from githubql_enums.utils.constants import DEFAULT_SNAPSHOT_PATH


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Without environment variables the defaults apply."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("SNAPSHOT_PATH", raising=False)
    settings = Settings()
    assert settings.DEBUG is False
    assert settings.SNAPSHOT_PATH == Path(DEFAULT_SNAPSHOT_PATH)


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Environment variables override the defaults."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("SNAPSHOT_PATH", "schema/enums.yaml")
    settings = Settings()
    assert settings.DEBUG is True
    assert settings.SNAPSHOT_PATH == Path("schema/enums.yaml")


def test_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Settings are read from a .env file in the working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("SNAPSHOT_PATH", raising=False)
    (tmp_path / ".env").write_text("SNAPSHOT_PATH=from-env-file.yaml\n", encoding="utf-8")
    assert Settings().SNAPSHOT_PATH == Path("from-env-file.yaml")
