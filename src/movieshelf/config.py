"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", ""}


def _env_timeout(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return None
    value = float(raw)
    return value if value > 0 else None


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///movieshelf.db"
    query_timeout: float | None = 3.0
    use_mock_models: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("MOVIESHELF_ENV", cls.environment),
            database_url=os.getenv("MOVIESHELF_DATABASE_URL", cls.database_url),
            query_timeout=_env_timeout("MOVIESHELF_QUERY_TIMEOUT", cls.query_timeout),
            use_mock_models=_env_bool("MOVIESHELF_USE_MOCK", cls.use_mock_models),
            log_level=os.getenv("MOVIESHELF_LOG_LEVEL", cls.log_level).upper(),
        )


__all__ = ["AppSettings"]
