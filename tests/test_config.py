from __future__ import annotations

import pytest

from movieshelf.config import AppSettings


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "MOVIESHELF_ENV",
        "MOVIESHELF_DATABASE_URL",
        "MOVIESHELF_QUERY_TIMEOUT",
        "MOVIESHELF_USE_MOCK",
        "MOVIESHELF_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings.from_env()

    assert settings == AppSettings()
    assert settings.query_timeout == 3.0
    assert settings.use_mock_models is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MOVIESHELF_ENV", "test")
    monkeypatch.setenv("MOVIESHELF_DATABASE_URL", "postgresql+asyncpg://localhost/movies")
    monkeypatch.setenv("MOVIESHELF_QUERY_TIMEOUT", "1.5")
    monkeypatch.setenv("MOVIESHELF_USE_MOCK", "yes")
    monkeypatch.setenv("MOVIESHELF_LOG_LEVEL", "debug")

    settings = AppSettings.from_env()

    assert settings.environment == "test"
    assert settings.database_url == "postgresql+asyncpg://localhost/movies"
    assert settings.query_timeout == 1.5
    assert settings.use_mock_models is True
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["", "0", "-1"])
def test_query_timeout_can_be_disabled(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("MOVIESHELF_QUERY_TIMEOUT", raw)
    assert AppSettings.from_env().query_timeout is None


@pytest.mark.parametrize("raw", ["0", "false", "No"])
def test_mock_flag_false_values(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("MOVIESHELF_USE_MOCK", raw)
    assert AppSettings.from_env().use_mock_models is False
