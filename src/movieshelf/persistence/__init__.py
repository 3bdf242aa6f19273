"""Movie models and the aggregator the rest of the application depends on."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from .errors import EditConflictError, ErrorKind, ModelError, RecordNotFoundError, error_kind
from .interfaces import Models, MovieModel
from .mock import MockMovieModel
from .sql import SQLMovieModel


def build_models(engine: AsyncEngine, *, query_timeout: float | None = None) -> Models:
    """Wire the store-backed movie model against ``engine``'s pool."""

    return Models(movies=SQLMovieModel(engine, timeout=query_timeout))


def build_mock_models() -> Models:
    """Wire the deterministic in-memory double."""

    return Models(movies=MockMovieModel())


__all__ = [
    "EditConflictError",
    "ErrorKind",
    "ModelError",
    "Models",
    "MovieModel",
    "RecordNotFoundError",
    "build_mock_models",
    "build_models",
    "error_kind",
]
