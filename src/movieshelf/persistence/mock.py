"""Deterministic movie model used to test callers without a database."""

from __future__ import annotations

from movieshelf.domain import Movie, MovieId
from movieshelf.utils.time import utc_now

from .errors import RecordNotFoundError
from .interfaces import MovieModel

MOCK_MOVIE_ID = MovieId(1)


class MockMovieModel(MovieModel):
    async def insert(self, movie: Movie) -> None:
        return None

    async def get(self, movie_id: MovieId) -> Movie:
        if movie_id != MOCK_MOVIE_ID:
            raise RecordNotFoundError
        return Movie(
            id=MOCK_MOVIE_ID,
            created_at=utc_now(),
            title="Test Mock",
            year=2023,
            runtime=105,
            genres=[""],
        )

    async def update(self, movie: Movie) -> None:
        return None

    async def delete(self, movie_id: MovieId) -> None:
        if movie_id != MOCK_MOVIE_ID:
            raise RecordNotFoundError


__all__ = ["MOCK_MOVIE_ID", "MockMovieModel"]
