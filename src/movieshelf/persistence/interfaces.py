"""Model abstractions shared by the store-backed and mock implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from movieshelf.domain import Movie, MovieId


class MovieModel(Protocol):
    """Single-record CRUD over movies.

    ``get`` and ``delete`` raise ``RecordNotFoundError`` for missing rows and
    for identifiers below 1. ``update`` raises ``EditConflictError`` when the
    caller's ``version`` is stale.
    """

    async def insert(self, movie: Movie) -> None: ...

    async def get(self, movie_id: MovieId) -> Movie: ...

    async def update(self, movie: Movie) -> None: ...

    async def delete(self, movie_id: MovieId) -> None: ...


@dataclass(frozen=True, slots=True)
class Models:
    """The one injection point for whichever model implementation is active."""

    movies: MovieModel


__all__ = ["Models", "MovieModel"]
