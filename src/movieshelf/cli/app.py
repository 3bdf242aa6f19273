"""Typer CLI driving the movie models."""

from __future__ import annotations

import asyncio
import json
import logging
import re
from collections.abc import Awaitable, Callable
from typing import NoReturn, TypeVar

import typer
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from movieshelf.domain import Movie, MovieId, validate_movie
from movieshelf.persistence import EditConflictError, ErrorKind, ModelError, Models
from movieshelf.validator import Validator, matches

from .deps import get_settings, open_container

T = TypeVar("T")

logger = logging.getLogger(__name__)

app = typer.Typer(help="Movieshelf command-line interface")

EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.RECORD_NOT_FOUND: 1,
    ErrorKind.EDIT_CONFLICT: 3,
    ErrorKind.STORE: 4,
}
EXIT_INVALID = 2

_MINUTES_RX = re.compile(r"-?\d+")


@app.callback()
def configure() -> None:
    """Manage movie records."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _run(operation: Callable[[Models], Awaitable[T]]) -> T:
    async def _inner() -> T:
        async with open_container() as container:
            return await operation(container.models)

    try:
        return asyncio.run(_inner())
    except ModelError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_CODES[exc.kind]) from exc
    except (SQLAlchemyError, TimeoutError) as exc:
        logger.error("Store operation failed: %s", exc)
        typer.echo("the store encountered a problem and could not process the command", err=True)
        raise typer.Exit(code=EXIT_CODES[ErrorKind.STORE]) from exc


def _report_invalid(v: Validator) -> NoReturn:
    for field, message in v.errors.items():
        typer.echo(f"{field}: {message}", err=True)
    raise typer.Exit(code=EXIT_INVALID)


def _parse_genres(raw: str) -> list[str]:
    return [genre.strip() for genre in raw.split(",") if genre.strip()]


def _runtime_option(raw: str) -> int | str:
    raw = raw.strip()
    return int(raw) if matches(raw, _MINUTES_RX) else raw


def _apply(movie: Movie, **changes: object) -> None:
    try:
        for name, value in changes.items():
            setattr(movie, name, value)
    except ValidationError as exc:
        raise typer.BadParameter(exc.errors()[0]["msg"]) from exc


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_settings()
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo("Query timeout:\t" + str(settings.query_timeout))
    typer.echo("Mock models:\t" + str(settings.use_mock_models))


@app.command("create-movie")
def create_movie(
    title: str,
    year: int = typer.Option(...),
    runtime: str = typer.Option(..., help="Minutes, e.g. 105 or '105 mins'"),
    genres: str = typer.Option(..., help="Comma separated genres"),
) -> None:
    """Validate and insert a movie."""

    movie = Movie()
    _apply(
        movie,
        title=title,
        year=year,
        runtime=_runtime_option(runtime),
        genres=_parse_genres(genres),
    )

    v = Validator()
    validate_movie(v, movie)
    if not v.valid:
        _report_invalid(v)

    async def _insert(models: Models) -> None:
        await models.movies.insert(movie)

    _run(_insert)
    typer.echo(f"Created movie {movie.id} (version {movie.version})")


@app.command("show-movie")
def show_movie(movie_id: int) -> None:
    """Print a movie as JSON."""

    movie = _run(lambda models: models.movies.get(MovieId(movie_id)))
    typer.echo(json.dumps(movie.public_dict(), indent=2))


@app.command("update-movie")
def update_movie(
    movie_id: int,
    title: str | None = typer.Option(None),
    year: int | None = typer.Option(None),
    runtime: str | None = typer.Option(None, help="Minutes, e.g. 105 or '105 mins'"),
    genres: str | None = typer.Option(None, help="Comma separated genres"),
    expected_version: int | None = typer.Option(
        None, help="Fail with a conflict unless the stored version matches"
    ),
) -> None:
    """Apply partial changes to a movie, guarded by its version."""

    changes: dict[str, object] = {}
    if title is not None:
        changes["title"] = title
    if year is not None:
        changes["year"] = year
    if runtime is not None:
        changes["runtime"] = _runtime_option(runtime)
    if genres is not None:
        changes["genres"] = _parse_genres(genres)

    async def _update(models: Models) -> tuple[Movie, Validator]:
        movie = await models.movies.get(MovieId(movie_id))
        if expected_version is not None and movie.version != expected_version:
            raise EditConflictError
        _apply(movie, **changes)
        v = Validator()
        validate_movie(v, movie)
        if v.valid:
            await models.movies.update(movie)
        return movie, v

    movie, v = _run(_update)
    if not v.valid:
        _report_invalid(v)
    typer.echo(f"Updated movie {movie.id} (version {movie.version})")


@app.command("delete-movie")
def delete_movie(movie_id: int) -> None:
    """Delete a movie."""

    _run(lambda models: models.movies.delete(MovieId(movie_id)))
    typer.echo("movie successfully deleted")


__all__ = ["EXIT_CODES", "EXIT_INVALID", "app"]
