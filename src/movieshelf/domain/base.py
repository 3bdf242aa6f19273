"""Core base classes for domain models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MutableDomainModel(BaseModel):
    """Mutable domain model; stores write generated columns back in place."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)
