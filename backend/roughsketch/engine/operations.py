"""Draw operations, operation sets and drawings: the engine's output types.

All of these are immutable values. A Drawing is produced once per
generation call and may be cached and shared freely.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions

Point = tuple[float, float]


@dataclass(frozen=True)
class Move:
    x: float
    y: float

    def points(self) -> list[Point]:
        return [(self.x, self.y)]


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    def points(self) -> list[Point]:
        return [(self.x, self.y)]


@dataclass(frozen=True)
class QuadraticCurveTo:
    cx: float
    cy: float
    x: float
    y: float

    def points(self) -> list[Point]:
        # End point first, control second
        return [(self.x, self.y), (self.cx, self.cy)]


@dataclass(frozen=True)
class BezierCurveTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float

    def points(self) -> list[Point]:
        return [(self.x, self.y), (self.c1x, self.c1y), (self.c2x, self.c2y)]


@dataclass(frozen=True)
class Close:
    def points(self) -> list[Point]:
        return []


Operation = Union[Move, LineTo, QuadraticCurveTo, BezierCurveTo, Close]


def rebuild(op: Operation, points: list[Point]) -> Operation:
    """Return a copy of op with its points replaced (same order as op.points())."""
    if isinstance(op, (Move, LineTo)):
        (x, y), = points
        return type(op)(x, y)
    if isinstance(op, QuadraticCurveTo):
        (x, y), (cx, cy) = points
        return QuadraticCurveTo(cx, cy, x, y)
    if isinstance(op, BezierCurveTo):
        (x, y), (c1x, c1y), (c2x, c2y) = points
        return BezierCurveTo(c1x, c1y, c2x, c2y, x, y)
    return op


class OpSetKind(str, enum.Enum):
    STROKE_PATH = "path"
    FILL_SKETCH = "fillSketch"
    FILL_SOLID_PATH = "fillPath"
    SVG_FILL_SOLID = "path2DFill"
    SVG_FILL_PATTERN = "path2DPattern"


@dataclass(frozen=True)
class OperationSet:
    kind: OpSetKind
    ops: tuple[Operation, ...] = ()
    # Raw SVG path data for sets that originate from an SvgPath/TextPath
    path: str | None = None
    # Intrinsic (width, height) of the pattern region for SVG pattern fills
    size: tuple[float, float] | None = None

    @property
    def is_empty(self) -> bool:
        return not self.ops and self.path is None


@dataclass(frozen=True)
class Drawing:
    shape: str
    sets: tuple[OperationSet, ...]
    options: RenderOptions

    @property
    def is_svg(self) -> bool:
        return self.shape in ("path", "text")
