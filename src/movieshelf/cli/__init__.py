"""Command-line interface for movieshelf."""

from .app import app

__all__ = ["app"]
