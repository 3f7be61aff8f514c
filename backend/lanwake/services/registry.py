"""Computer registry — CRUD over the computers table."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from lanwake.models.computer import Computer
from lanwake.utils.wol import normalize_mac

logger = logging.getLogger(__name__)


class ComputerNotFound(LookupError):
    """No computer with the requested id."""


class ComputerRegistry:
    """Stores {id, name, mac} records in the database session it is given."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_computers(self) -> list[dict[str, Any]]:
        result = await self._db.execute(select(Computer).order_by(Computer.id))
        return [_computer_to_dict(c) for c in result.scalars().all()]

    async def get_computer(self, computer_id: int) -> dict[str, Any] | None:
        comp = await self._db.get(Computer, computer_id)
        return _computer_to_dict(comp) if comp else None

    async def create_computer(self, name: str, mac: str) -> dict[str, Any]:
        """Insert a computer. Raises ParseError for a malformed MAC."""
        comp = Computer(name=name, mac=normalize_mac(mac))
        self._db.add(comp)
        await self._db.commit()
        await self._db.refresh(comp)
        logger.info("Computer added: id=%d name=%r mac=%s", comp.id, comp.name, comp.mac)
        return _computer_to_dict(comp)

    async def delete_computer(self, computer_id: int) -> bool:
        """Delete a computer by id. Returns False if it did not exist."""
        result = await self._db.execute(delete(Computer).where(Computer.id == computer_id))
        await self._db.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Computer deleted: id=%d", computer_id)
        return deleted

    async def resolve(self, computer_id: int) -> str:
        """MAC address of computer #id."""
        comp = await self._db.get(Computer, computer_id)
        if comp is None:
            raise ComputerNotFound(f"Computer {computer_id} not found")
        return comp.mac


def _computer_to_dict(comp: Computer) -> dict[str, Any]:
    return {
        "id": comp.id,
        "name": comp.name,
        "mac": comp.mac,
    }
