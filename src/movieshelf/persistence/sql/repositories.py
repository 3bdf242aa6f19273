"""SQLAlchemy-backed movie model."""

from __future__ import annotations

import asyncio
from typing import Any

from sqlalchemy import Row, delete, insert, select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncEngine

from movieshelf.domain import Movie, MovieId
from movieshelf.persistence.errors import EditConflictError, RecordNotFoundError
from movieshelf.persistence.interfaces import MovieModel
from movieshelf.utils.time import ensure_utc

from .models import movies_table

_c = movies_table.c


def _to_movie(row: Row[Any]) -> Movie:
    return Movie(
        id=MovieId(row.id),
        created_at=ensure_utc(row.created_at),
        title=row.title,
        year=row.year,
        runtime=row.runtime,
        genres=list(row.genres),
        version=row.version,
    )


def _writable_columns(movie: Movie) -> dict[str, Any]:
    return {
        "title": movie.title,
        "year": movie.year,
        "runtime": movie.runtime,
        "genres": list(movie.genres or ()),
    }


class SQLMovieModel(MovieModel):
    """Movie model over the ``movies`` table.

    Each call checks a connection out of the engine pool and returns it before
    completing. ``timeout`` (seconds) bounds every call; ``None`` leaves only
    the caller's own cancellation in charge.
    """

    def __init__(self, engine: AsyncEngine, *, timeout: float | None = None) -> None:
        self._engine = engine
        self._timeout = timeout

    def _deadline(self) -> asyncio.Timeout:
        return asyncio.timeout(self._timeout)

    async def insert(self, movie: Movie) -> None:
        stmt = (
            insert(movies_table)
            .values(**_writable_columns(movie))
            .returning(_c.id, _c.created_at, _c.version)
        )
        async with self._deadline():
            async with self._engine.begin() as conn:
                row = (await conn.execute(stmt)).one()
        movie.id = MovieId(row.id)
        movie.created_at = ensure_utc(row.created_at)
        movie.version = row.version

    async def get(self, movie_id: MovieId) -> Movie:
        if movie_id < 1:
            raise RecordNotFoundError
        stmt = select(movies_table).where(_c.id == movie_id)
        async with self._deadline():
            async with self._engine.connect() as conn:
                result = await conn.execute(stmt)
                try:
                    row = result.one()
                except NoResultFound as exc:
                    raise RecordNotFoundError from exc
        return _to_movie(row)

    async def update(self, movie: Movie) -> None:
        # Conditional write: a stale version matches no row.
        stmt = (
            update(movies_table)
            .where(_c.id == movie.id, _c.version == movie.version)
            .values(**_writable_columns(movie), version=_c.version + 1)
            .returning(_c.version)
        )
        async with self._deadline():
            async with self._engine.begin() as conn:
                result = await conn.execute(stmt)
                try:
                    new_version = result.scalar_one()
                except NoResultFound as exc:
                    raise EditConflictError from exc
        movie.version = new_version

    async def delete(self, movie_id: MovieId) -> None:
        if movie_id < 1:
            raise RecordNotFoundError
        stmt = delete(movies_table).where(_c.id == movie_id)
        async with self._deadline():
            async with self._engine.begin() as conn:
                result = await conn.execute(stmt)
                affected = result.rowcount
        if affected == 0:
            raise RecordNotFoundError


__all__ = ["SQLMovieModel"]
