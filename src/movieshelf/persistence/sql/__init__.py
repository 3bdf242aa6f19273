"""SQL persistence for movies."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from .models import MovieRecord, movies_table
from .repositories import SQLMovieModel
from .schema import ensure_schema


def create_store_engine(database_url: str) -> AsyncEngine:
    """Create the pooled async engine every model call draws connections from."""

    return create_async_engine(database_url, future=True)


__all__ = ["MovieRecord", "SQLMovieModel", "create_store_engine", "ensure_schema", "movies_table"]
