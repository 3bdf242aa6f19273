"""Movie domain model and its field rules."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer

from movieshelf.utils.time import current_year
from movieshelf.validator import Validator, unique

from .base import MutableDomainModel
from .types import MovieId

MAX_TITLE_BYTES = 500
MIN_YEAR = 1888
MAX_GENRES = 5

_RUNTIME_RX = re.compile(r"(\d+) mins")


def _parse_runtime(value: Any) -> Any:
    if isinstance(value, str):
        match = _RUNTIME_RX.fullmatch(value.strip())
        if match is None:
            msg = "invalid runtime format"
            raise ValueError(msg)
        return int(match.group(1))
    return value


def _format_runtime(value: int) -> str:
    return f"{value} mins"


# Minutes internally, "<n> mins" on the wire.
Runtime = Annotated[
    int,
    BeforeValidator(_parse_runtime),
    PlainSerializer(_format_runtime, return_type=str, when_used="json"),
]


class Movie(MutableDomainModel):
    """A movie record.

    ``id``, ``created_at`` and ``version`` are owned by the store and are
    written back into the instance by ``insert``/``update``.
    """

    id: MovieId = MovieId(0)
    created_at: datetime | None = Field(default=None, exclude=True)
    title: str = ""
    year: int = 0
    runtime: Runtime = 0
    genres: list[str] | None = None
    version: int = 0

    def public_dict(self) -> dict[str, Any]:
        """JSON-ready representation that omits unset optional fields."""

        data = self.model_dump(mode="json")
        if not self.year:
            data.pop("year")
        if not self.runtime:
            data.pop("runtime")
        if not self.genres:
            data.pop("genres")
        return data


def validate_movie(v: Validator, movie: Movie) -> None:
    """Record every rule ``movie`` violates on ``v``.

    Callers must check ``v.valid`` before handing the movie to a model.
    """

    v.check(movie.title != "", "title", "must be provided")
    v.check(
        len(movie.title.encode("utf-8")) <= MAX_TITLE_BYTES,
        "title",
        f"must not be more than {MAX_TITLE_BYTES} bytes long",
    )

    v.check(movie.year != 0, "year", "must be provided")
    v.check(movie.year >= MIN_YEAR, "year", f"must be greater than {MIN_YEAR}")
    v.check(movie.year <= current_year(), "year", "must not be in the future")

    v.check(movie.runtime != 0, "runtime", "must be provided")
    v.check(movie.runtime > 0, "runtime", "must be a positive integer")

    genres = movie.genres
    v.check(genres is not None, "genres", "must be provided")
    v.check(len(genres or ()) >= 1, "genres", "must contain at least 1 genre")
    v.check(
        len(genres or ()) <= MAX_GENRES,
        "genres",
        f"must not contain more than {MAX_GENRES} genres",
    )
    v.check(unique(genres or ()), "genres", "must not contain duplicate values")


__all__ = ["MAX_GENRES", "MAX_TITLE_BYTES", "MIN_YEAR", "Movie", "Runtime", "validate_movie"]
