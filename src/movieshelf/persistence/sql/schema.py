"""Schema bootstrap for the movies store."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from .models import Base


async def ensure_schema(engine: AsyncEngine) -> None:
    """Create the ``movies`` table when it does not exist yet."""

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


__all__ = ["ensure_schema"]
