"""Accumulating field validator.

A :class:`Validator` collects one human readable message per field so that
every violation of an entity can be reported at once. It never raises; callers
inspect :attr:`Validator.valid` and :attr:`Validator.errors` afterwards.
"""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterable, Mapping
from types import MappingProxyType


class Validator:
    def __init__(self) -> None:
        self._errors: dict[str, str] = {}

    @property
    def errors(self) -> Mapping[str, str]:
        return MappingProxyType(self._errors)

    @property
    def valid(self) -> bool:
        return not self._errors

    def add_error(self, field: str, message: str) -> None:
        """Record ``message`` for ``field`` unless the field already failed."""

        self._errors.setdefault(field, message)

    def check(self, ok: bool, field: str, message: str) -> None:
        if not ok:
            self.add_error(field, message)

    def __repr__(self) -> str:
        return f"Validator(errors={self._errors!r})"


def matches(value: str, pattern: re.Pattern[str]) -> bool:
    return pattern.fullmatch(value) is not None


def unique(values: Iterable[Hashable]) -> bool:
    """Return True when no two elements compare equal."""

    seen: set[Hashable] = set()
    for value in values:
        if value in seen:
            return False
        seen.add(value)
    return True


__all__ = ["Validator", "matches", "unique"]
