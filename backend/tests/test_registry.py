"""Tests for ComputerRegistry — CRUD over an injected session."""

import pytest
import pytest_asyncio
from sqlalchemy import select

from lanwake.models.computer import Computer
from lanwake.services.registry import ComputerNotFound, ComputerRegistry
from lanwake.utils.wol import ParseError


@pytest_asyncio.fixture
async def registry(db_session):
    return ComputerRegistry(db_session)


@pytest.mark.asyncio
async def test_create_stores_canonical_mac(db_session, registry):
    comp = await registry.create_computer("Desktop", "aa-bb-cc-dd-ee-ff")

    assert comp["id"] >= 1
    assert comp["name"] == "Desktop"
    assert comp["mac"] == "AA:BB:CC:DD:EE:FF"

    result = await db_session.execute(select(Computer))
    rows = result.scalars().all()
    assert len(rows) == 1
    assert rows[0].mac == "AA:BB:CC:DD:EE:FF"


@pytest.mark.asyncio
async def test_create_rejects_malformed_mac(db_session, registry):
    with pytest.raises(ParseError):
        await registry.create_computer("Broken", "not-a-mac")

    result = await db_session.execute(select(Computer))
    assert result.scalars().all() == []


@pytest.mark.asyncio
async def test_list_ordered_by_id(registry):
    assert await registry.list_computers() == []

    first = await registry.create_computer("A", "00:00:00:00:00:01")
    second = await registry.create_computer("B", "00:00:00:00:00:02")

    listed = await registry.list_computers()
    assert [c["id"] for c in listed] == [first["id"], second["id"]]
    assert listed[1] == {"id": second["id"], "name": "B", "mac": "00:00:00:00:00:02"}


@pytest.mark.asyncio
async def test_get_computer(registry):
    comp = await registry.create_computer("NAS", "11:22:33:44:55:66")

    assert await registry.get_computer(comp["id"]) == comp
    assert await registry.get_computer(9999) is None


@pytest.mark.asyncio
async def test_delete_computer(registry):
    comp = await registry.create_computer("Old", "11:22:33:44:55:66")

    assert await registry.delete_computer(comp["id"]) is True
    assert await registry.list_computers() == []
    assert await registry.delete_computer(comp["id"]) is False


@pytest.mark.asyncio
async def test_ids_not_reused_after_delete(registry):
    first = await registry.create_computer("A", "00:00:00:00:00:01")
    await registry.delete_computer(first["id"])

    second = await registry.create_computer("B", "00:00:00:00:00:02")
    assert second["id"] > first["id"]


@pytest.mark.asyncio
async def test_resolve(registry):
    comp = await registry.create_computer("Gaming PC", "de:ad:be:ef:00:01")

    assert await registry.resolve(comp["id"]) == "DE:AD:BE:EF:00:01"


@pytest.mark.asyncio
async def test_resolve_unknown(registry):
    with pytest.raises(ComputerNotFound):
        await registry.resolve(42)
