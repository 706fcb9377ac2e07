"""GET /api/cache/stats, POST /api/cache/clear."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from roughsketch.dependencies import get_engine
from roughsketch.engine.generator import Engine
from roughsketch.models.responses import CacheStatsResponse

router = APIRouter(prefix="/cache")


@router.get("/stats", response_model=CacheStatsResponse)
async def cache_stats(engine: Engine = Depends(get_engine)) -> CacheStatsResponse:
    return CacheStatsResponse.from_stats(engine.stats())


@router.post("/clear", response_model=CacheStatsResponse)
async def cache_clear(engine: Engine = Depends(get_engine)) -> CacheStatsResponse:
    engine.clear()
    return CacheStatsResponse.from_stats(engine.stats())
