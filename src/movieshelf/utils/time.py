"""Time-related helpers."""

from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return a timezone-aware UTC timestamp."""

    return datetime.now(UTC)


def current_year() -> int:
    """Local calendar year, the upper bound for release years."""

    return datetime.now().astimezone().year


def ensure_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC.

    SQLite hands back naive timestamps for ``CURRENT_TIMESTAMP`` defaults,
    which are UTC already.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
