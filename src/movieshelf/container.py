"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine

from movieshelf.config import AppSettings
from movieshelf.persistence import Models, build_mock_models, build_models
from movieshelf.persistence.sql import create_store_engine, ensure_schema

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Owns the engine and the active models for the life of the process."""

    settings: AppSettings
    models: Models
    engine: AsyncEngine | None = None

    async def aclose(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def _ensure_sqlite_directory(database_url: str) -> None:
    if not database_url.startswith("sqlite"):
        return
    try:
        _, path = database_url.split(":///", maxsplit=1)
    except ValueError:
        return
    if not path or path == ":memory:":
        return
    db_path = Path(path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)


async def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()

    if resolved_settings.use_mock_models:
        logger.info("Using mock movie models")
        return ServiceContainer(settings=resolved_settings, models=build_mock_models())

    _ensure_sqlite_directory(resolved_settings.database_url)
    engine = create_store_engine(resolved_settings.database_url)
    await ensure_schema(engine)
    logger.info(
        "Using SQL movie models (timeout=%s)",
        resolved_settings.query_timeout,
    )
    models = build_models(engine, query_timeout=resolved_settings.query_timeout)
    return ServiceContainer(settings=resolved_settings, models=models, engine=engine)


__all__ = ["ServiceContainer", "build_container"]
