"""POST /api/generate: one shape → drawing layers + SVG."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from roughsketch.dependencies import get_engine
from roughsketch.engine.generator import Engine
from roughsketch.engine.render import build_commands
from roughsketch.models.requests import GenerateRequest
from roughsketch.models.responses import (
    CacheStatsResponse,
    DrawingModel,
    GenerateResponse,
)
from roughsketch.svg.serializer import serialize_commands

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest, engine: Engine = Depends(get_engine)) -> GenerateResponse:
    t0 = time.perf_counter()
    size = (req.width, req.height)
    descriptor = req.shape.to_descriptor()

    # One layer per fill_spacing_pattern multiplier; the SVG renders exactly these
    layers = engine.generate_layers(descriptor, req.options, size)
    if not layers:
        logger.info("No drawing for %s", descriptor.tag)
        return GenerateResponse(cache=CacheStatsResponse.from_stats(engine.stats()))

    commands = [c for drawing in layers for c in build_commands(drawing, engine.config)]
    elapsed = (time.perf_counter() - t0) * 1000
    return GenerateResponse(
        layers=[DrawingModel.from_drawing(d) for d in layers],
        svg=serialize_commands(commands, req.width, req.height),
        processing_time_ms=round(elapsed, 1),
        cache=CacheStatsResponse.from_stats(engine.stats()),
    )
