"""RenderOptions: the immutable bundle of style knobs for one drawing."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from roughsketch.engine.brush import BrushProfile


class FillStyle(str, enum.Enum):
    HACHURE = "hachure"
    SOLID = "solid"
    ZIGZAG = "zigzag"
    CROSS_HATCH = "cross-hatch"
    DOTS = "dots"
    SUNBURST = "sunburst"
    STARBURST = "starburst"
    DASHED = "dashed"
    ZIGZAG_LINE = "zigzag-line"
    SCRIBBLE = "scribble"


class FillStrokeAlignment(str, enum.Enum):
    """Where an SVG pattern fill's strokes sit relative to the path outline."""

    CENTER = "center"
    INSIDE = "inside"
    OUTSIDE = "outside"


class RenderOptions(BaseModel):
    # Wobble
    roughness: float = 1.0
    bowing: float = 1.0
    max_randomness_offset: float = 2.0

    # Colors are opaque strings for the renderer; None = transparent
    stroke: str | None = "#000000"
    fill: str | None = None
    stroke_opacity: float = 1.0
    fill_opacity: float = 1.0

    stroke_width: float = 1.0

    # Fill pattern
    fill_style: FillStyle = FillStyle.HACHURE
    fill_weight: float = -1.0  # < 0 means stroke_width / 2
    fill_angle: float = -41.0  # degrees
    fill_spacing: float = 8.0  # multiples of the effective fill weight
    fill_spacing_pattern: tuple[float, ...] | None = None

    # Curves
    curve_tightness: float = 0.0
    curve_step_count: float = 9.0

    # Dashed / zigzag-line (< 0 means "use the hachure gap")
    dash_offset: float = -1.0
    dash_gap: float = -1.0
    zigzag_offset: float = -1.0

    # Scribble
    scribble_origin: float = 0.0  # degrees
    scribble_tightness: int = 10
    scribble_curvature: float = 0.0
    scribble_use_brush_stroke: bool = False
    scribble_tightness_pattern: tuple[int, ...] | None = None

    # SVG-only overrides
    svg_stroke_width: float | None = None
    svg_fill_weight: float | None = None
    svg_fill_stroke_alignment: FillStrokeAlignment = FillStrokeAlignment.CENTER

    brush_profile: BrushProfile = Field(default_factory=BrushProfile)

    # Pins the per-drawing randomness; None uses the engine's base seed
    seed: int | None = None

    model_config = {"frozen": True}

    @field_validator("stroke_opacity", "fill_opacity")
    @classmethod
    def _clamp_opacity(cls, v: float) -> float:
        return max(0.0, min(1.0, v))

    @field_validator("curve_step_count")
    @classmethod
    def _clamp_step_count(cls, v: float) -> float:
        return max(1.0, v)

    @field_validator("scribble_tightness")
    @classmethod
    def _clamp_tightness(cls, v: int) -> int:
        return max(1, min(100, v))

    @field_validator("scribble_curvature")
    @classmethod
    def _clamp_curvature(cls, v: float) -> float:
        return max(0.0, min(50.0, v))

    @field_validator("scribble_tightness_pattern")
    @classmethod
    def _clamp_tightness_pattern(cls, v: tuple[int, ...] | None) -> tuple[int, ...] | None:
        if v is None:
            return None
        return tuple(max(1, min(100, t)) for t in v)

    @property
    def effective_fill_weight(self) -> float:
        if self.fill_weight < 0:
            return self.stroke_width / 2
        return self.fill_weight

    @property
    def computed_hachure_gap(self) -> float:
        """Distance between hachure scan lines, in px."""
        return self.fill_spacing * self.effective_fill_weight

    @property
    def effective_svg_stroke_width(self) -> float:
        if self.svg_stroke_width is not None:
            return self.svg_stroke_width
        return self.stroke_width

    @property
    def effective_svg_fill_weight(self) -> float:
        if self.svg_fill_weight is not None:
            return self.svg_fill_weight
        return self.effective_fill_weight

    def cache_key(self) -> tuple[Any, ...]:
        """Every field, in declaration order. Pattern tuples hash by content."""
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def with_changes(self, **changes: Any) -> RenderOptions:
        return self.model_validate({**self.model_dump(), **changes})
