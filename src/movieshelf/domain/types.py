"""Shared type aliases for the domain layer."""

from __future__ import annotations

from typing import NewType

MovieId = NewType("MovieId", int)

__all__ = ["MovieId"]
