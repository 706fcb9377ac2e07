"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from roughsketch.engine.options import FillStyle
from roughsketch.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        fill_styles=[style.value for style in FillStyle],
    )
