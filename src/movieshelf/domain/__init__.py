"""Domain models for movie records."""

from .base import MutableDomainModel
from .movie import MAX_GENRES, MAX_TITLE_BYTES, MIN_YEAR, Movie, Runtime, validate_movie
from .types import MovieId

__all__ = [
    "MAX_GENRES",
    "MAX_TITLE_BYTES",
    "MIN_YEAR",
    "Movie",
    "MovieId",
    "MutableDomainModel",
    "Runtime",
    "validate_movie",
]
