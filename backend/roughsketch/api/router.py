"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from roughsketch.api import animate, cache, generate, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(generate.router)
api_router.include_router(animate.router)
api_router.include_router(cache.router)
