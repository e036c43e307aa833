"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from y2kgrad.api import export, generate, health, state

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(generate.router)
api_router.include_router(state.router)
api_router.include_router(export.router)
