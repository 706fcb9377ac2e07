"""POST /api/animate: precomputed animation frames for one shape."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from roughsketch.dependencies import get_engine
from roughsketch.engine.animation import AnimationConfig, AnimationFrameCache
from roughsketch.engine.generator import Engine
from roughsketch.models.requests import AnimateRequest
from roughsketch.models.responses import AnimateResponse
from roughsketch.svg.path_data import operations_to_path_data

router = APIRouter()


@router.post("/animate", response_model=AnimateResponse)
async def animate(req: AnimateRequest, engine: Engine = Depends(get_engine)) -> AnimateResponse:
    t0 = time.perf_counter()
    size = (req.width, req.height)
    config = AnimationConfig(steps=req.steps, speed=req.speed, variance=req.variance)

    commands = engine.render_commands(req.shape.to_descriptor(), req.options, size)
    if not commands:
        return AnimateResponse(steps=config.steps, duration=config.speed.duration)

    frames = AnimationFrameCache.precompute(commands, size, config, base_seed=req.seed)
    elapsed = (time.perf_counter() - t0) * 1000
    return AnimateResponse(
        steps=frames.step_count,
        duration=config.speed.duration,
        frames=[[operations_to_path_data(c.ops) for c in frame] for frame in frames],
        processing_time_ms=round(elapsed, 1),
    )
