"""Computer registry routes — list, add, delete, wake by id."""

from fastapi import APIRouter, Depends, HTTPException, status

from lanwake.api.deps import get_registry
from lanwake.api.routes.wol import wake
from lanwake.schemas.computer import ComputerCreate, ComputerOut, StatusResponse
from lanwake.schemas.wol import WolResponse
from lanwake.services.registry import ComputerNotFound, ComputerRegistry

router = APIRouter()


@router.get("", response_model=list[ComputerOut])
async def list_computers(registry: ComputerRegistry = Depends(get_registry)):
    """List all registered computers."""
    return await registry.list_computers()


@router.post("", response_model=ComputerOut, status_code=status.HTTP_201_CREATED)
async def add_computer(
    body: ComputerCreate,
    registry: ComputerRegistry = Depends(get_registry),
):
    """Register a computer (name + MAC)."""
    return await registry.create_computer(body.name, body.mac)


@router.get("/{computer_id}", response_model=ComputerOut)
async def get_computer(
    computer_id: int,
    registry: ComputerRegistry = Depends(get_registry),
):
    result = await registry.get_computer(computer_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Computer not found")
    return result


@router.delete("/{computer_id}", response_model=StatusResponse)
async def delete_computer(
    computer_id: int,
    registry: ComputerRegistry = Depends(get_registry),
):
    """Remove a computer from the registry."""
    if not await registry.delete_computer(computer_id):
        raise HTTPException(status_code=404, detail="Computer not found")
    return StatusResponse(status="Computer deleted")


@router.post("/{computer_id}/wol", response_model=WolResponse)
async def wake_computer(
    computer_id: int,
    registry: ComputerRegistry = Depends(get_registry),
):
    """Wake a registered computer by id."""
    try:
        mac = await registry.resolve(computer_id)
    except ComputerNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return wake(mac)
