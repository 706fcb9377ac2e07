"""API response models."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from pydantic import BaseModel, Field

from roughsketch.engine.cache import CacheStats
from roughsketch.engine.operations import (
    BezierCurveTo,
    Drawing,
    LineTo,
    Move,
    Operation,
    OperationSet,
    QuadraticCurveTo,
)

_OP_NAMES: dict[type, str] = {
    Move: "move",
    LineTo: "lineTo",
    QuadraticCurveTo: "quadraticCurveTo",
    BezierCurveTo: "bezierCurveTo",
}


def operation_to_dict(op: Operation) -> dict[str, Any]:
    return {"op": _OP_NAMES.get(type(op), "close"), **asdict(op)}


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    fill_styles: list[str] = Field(default_factory=list)


class CacheStatsResponse(BaseModel):
    entries: int = 0
    hits: int = 0
    misses: int = 0
    hit_rate: float = 0.0

    @classmethod
    def from_stats(cls, stats: CacheStats) -> CacheStatsResponse:
        return cls(**stats.as_dict())


class OperationSetModel(BaseModel):
    kind: str
    ops: list[dict[str, Any]] = Field(default_factory=list)
    path: str | None = None
    size: tuple[float, float] | None = None

    @classmethod
    def from_set(cls, op_set: OperationSet) -> OperationSetModel:
        return cls(
            kind=op_set.kind.value,
            ops=[operation_to_dict(op) for op in op_set.ops],
            path=op_set.path,
            size=op_set.size,
        )


class DrawingModel(BaseModel):
    shape: str
    sets: list[OperationSetModel] = Field(default_factory=list)

    @classmethod
    def from_drawing(cls, drawing: Drawing) -> DrawingModel:
        return cls(shape=drawing.shape, sets=[OperationSetModel.from_set(s) for s in drawing.sets])


class GenerateResponse(BaseModel):
    layers: list[DrawingModel] = Field(
        default_factory=list,
        description="One drawing per fill spacing layer, in paint order; empty when nothing is drawn",
    )
    svg: str = ""
    processing_time_ms: float = 0.0
    cache: CacheStatsResponse = Field(default_factory=CacheStatsResponse)


class AnimateResponse(BaseModel):
    steps: int = 0
    duration: float = Field(default=0.0, description="Seconds between steps")
    frames: list[list[str]] = Field(
        default_factory=list,
        description="Per step, the SVG path data of every render command",
    )
    processing_time_ms: float = 0.0
