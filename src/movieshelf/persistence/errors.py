"""Error taxonomy surfaced by movie models."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Closed set of failure categories callers map to responses."""

    RECORD_NOT_FOUND = "record_not_found"
    EDIT_CONFLICT = "edit_conflict"
    STORE = "store"


class ModelError(RuntimeError):
    """Base class for classified model failures."""

    kind: ErrorKind = ErrorKind.STORE


class RecordNotFoundError(ModelError):
    """Raised when a record is missing or its identifier can never exist."""

    kind = ErrorKind.RECORD_NOT_FOUND

    def __init__(self, message: str = "record not found") -> None:
        super().__init__(message)


class EditConflictError(ModelError):
    """Raised when an update's version no longer matches the stored row."""

    kind = ErrorKind.EDIT_CONFLICT

    def __init__(
        self,
        message: str = "unable to update the record due to an edit conflict, please try again",
    ) -> None:
        super().__init__(message)


def error_kind(exc: BaseException) -> ErrorKind:
    """Classify ``exc``; anything unnamed is an opaque store failure."""

    if isinstance(exc, ModelError):
        return exc.kind
    return ErrorKind.STORE


__all__ = [
    "EditConflictError",
    "ErrorKind",
    "ModelError",
    "RecordNotFoundError",
    "error_kind",
]
