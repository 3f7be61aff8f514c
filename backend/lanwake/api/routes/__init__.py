"""API route registration."""

from fastapi import APIRouter

from lanwake.api.routes import computers, health, wol

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(computers.router, prefix="/computers", tags=["computers"])
api_router.include_router(wol.router, prefix="/wol", tags=["wol"])
