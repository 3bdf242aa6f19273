"""Run the CLI with `python -m movieshelf.cli`; also the `movieshelf` script."""

from __future__ import annotations

from .app import app


def main() -> None:  # pragma: no cover - thin wrapper
    app(prog_name="movieshelf")


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
