"""Shared CLI dependency helpers."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache

from movieshelf.config import AppSettings
from movieshelf.container import ServiceContainer, build_container


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return cached settings for CLI commands."""

    return AppSettings.from_env()


def reset_settings() -> None:
    """Clear the cached settings (useful for tests)."""

    get_settings.cache_clear()


@asynccontextmanager
async def open_container() -> AsyncIterator[ServiceContainer]:
    """Build a container for one command; the engine lives on that command's loop."""

    container = await build_container(get_settings())
    try:
        yield container
    finally:
        await container.aclose()
