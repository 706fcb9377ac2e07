"""Brush profiles: tip shape, thickness over length, cap and join.

A profile that only uses the circular tip with uniform thickness can be
drawn with a plain stroke. Anything else goes through stroke_to_fill.
"""

from __future__ import annotations

import enum
import math

import numpy as np
from pydantic import BaseModel, Field, field_validator


class BrushCap(str, enum.Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class BrushJoin(str, enum.Enum):
    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


class BrushTip(BaseModel):
    """Elliptical nib. roundness 1 = circle, lower values flatten it."""

    roundness: float = 1.0
    angle: float = 0.0  # radians
    direction_sensitive: bool = False

    model_config = {"frozen": True}

    @field_validator("roundness")
    @classmethod
    def _clamp_roundness(cls, v: float) -> float:
        return max(0.01, min(1.0, v))

    def effective_width(self, base_width: float, stroke_angle: float) -> float:
        """Width of the nib's footprint perpendicular to the stroke direction."""
        if not self.direction_sensitive or self.roundness >= 1.0:
            return base_width
        a = base_width / 2
        b = a * self.roundness
        rel = stroke_angle - self.angle
        denom = math.sqrt((b * math.cos(rel)) ** 2 + (a * math.sin(rel)) ** 2)
        if denom < 0.001:
            return base_width
        return 2 * a * b / denom

    @classmethod
    def circular(cls) -> BrushTip:
        return cls(roundness=1.0, angle=0.0, direction_sensitive=False)

    @classmethod
    def calligraphic(cls) -> BrushTip:
        return cls(roundness=0.3, angle=math.pi / 4, direction_sensitive=True)

    @classmethod
    def flat(cls) -> BrushTip:
        return cls(roundness=0.2, angle=0.0, direction_sensitive=True)


class ThicknessKind(str, enum.Enum):
    UNIFORM = "uniform"
    TAPER_IN = "taperIn"
    TAPER_OUT = "taperOut"
    TAPER_BOTH = "taperBoth"
    PRESSURE = "pressure"
    CUSTOM = "custom"


class ThicknessProfile(BaseModel):
    """Width multiplier as a function of normalized arc length t in [0, 1].

    taper ``start``/``end`` are ramp lengths, so taper_out(0.25) ramps down
    over the last quarter of the stroke.
    """

    kind: ThicknessKind = ThicknessKind.UNIFORM
    start: float = 0.0
    end: float = 0.0
    samples: tuple[float, ...] = ()

    model_config = {"frozen": True}

    @classmethod
    def uniform(cls) -> ThicknessProfile:
        return cls()

    @classmethod
    def taper_in(cls, start: float) -> ThicknessProfile:
        return cls(kind=ThicknessKind.TAPER_IN, start=start)

    @classmethod
    def taper_out(cls, end: float) -> ThicknessProfile:
        return cls(kind=ThicknessKind.TAPER_OUT, end=end)

    @classmethod
    def taper_both(cls, start: float, end: float) -> ThicknessProfile:
        return cls(kind=ThicknessKind.TAPER_BOTH, start=start, end=end)

    @classmethod
    def pressure(cls, samples: list[float] | tuple[float, ...]) -> ThicknessProfile:
        return cls(kind=ThicknessKind.PRESSURE, samples=tuple(samples))

    @classmethod
    def custom(cls, samples: list[float] | tuple[float, ...]) -> ThicknessProfile:
        return cls(kind=ThicknessKind.CUSTOM, samples=tuple(samples))

    # Presets
    @classmethod
    def natural_pen(cls) -> ThicknessProfile:
        return cls.taper_both(0.15, 0.15)

    @classmethod
    def brush_start(cls) -> ThicknessProfile:
        return cls.taper_in(0.25)

    @classmethod
    def brush_end(cls) -> ThicknessProfile:
        return cls.taper_out(0.25)

    @classmethod
    def pen_pressure(cls) -> ThicknessProfile:
        return cls.pressure([0.2, 0.6, 0.9, 1.0, 0.95, 0.8, 0.5, 0.2])

    @property
    def is_uniform(self) -> bool:
        return self.kind == ThicknessKind.UNIFORM

    def multiplier(self, t: float) -> float:
        t = max(0.0, min(1.0, t))
        if self.kind == ThicknessKind.UNIFORM:
            return 1.0
        if self.kind == ThicknessKind.TAPER_IN:
            return _ramp_in(t, self.start)
        if self.kind == ThicknessKind.TAPER_OUT:
            return _ramp_out(t, self.end)
        if self.kind == ThicknessKind.TAPER_BOTH:
            return min(_ramp_in(t, self.start), _ramp_out(t, self.end))
        return _interpolate(self.samples, t)


def _ramp_in(t: float, start: float) -> float:
    if start <= 0 or t >= start:
        return 1.0
    return t / start


def _ramp_out(t: float, end: float) -> float:
    if end <= 0 or t <= 1 - end:
        return 1.0
    return (1 - t) / end


def _interpolate(samples: tuple[float, ...], t: float) -> float:
    if not samples:
        return 1.0
    if len(samples) == 1:
        return float(samples[0])
    xs = np.linspace(0.0, 1.0, len(samples))
    return float(np.interp(t, xs, samples))


class BrushProfile(BaseModel):
    tip: BrushTip = Field(default_factory=BrushTip.circular)
    thickness: ThicknessProfile = Field(default_factory=ThicknessProfile.uniform)
    cap: BrushCap = BrushCap.ROUND
    join: BrushJoin = BrushJoin.ROUND

    model_config = {"frozen": True}

    @property
    def requires_custom_rendering(self) -> bool:
        if self.tip.direction_sensitive and self.tip.roundness < 0.99:
            return True
        return not self.thickness.is_uniform

    @classmethod
    def default(cls) -> BrushProfile:
        return cls()

    @classmethod
    def calligraphic(cls) -> BrushProfile:
        return cls(
            tip=BrushTip.calligraphic(),
            thickness=ThicknessProfile.natural_pen(),
            cap=BrushCap.ROUND,
            join=BrushJoin.ROUND,
        )

    @classmethod
    def marker(cls) -> BrushProfile:
        return cls(
            tip=BrushTip.flat(),
            thickness=ThicknessProfile.uniform(),
            cap=BrushCap.BUTT,
            join=BrushJoin.BEVEL,
        )

    @classmethod
    def pen(cls) -> BrushProfile:
        return cls(
            tip=BrushTip.circular(),
            thickness=ThicknessProfile.pen_pressure(),
            cap=BrushCap.ROUND,
            join=BrushJoin.ROUND,
        )
