"""FastAPI dependency injection — registry bound to the request's DB session."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lanwake.database import get_db
from lanwake.services.registry import ComputerRegistry


async def get_registry(db: AsyncSession = Depends(get_db)) -> ComputerRegistry:
    """Per-request registry over the injected session."""
    return ComputerRegistry(db)
