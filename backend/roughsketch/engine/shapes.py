"""Shape descriptors: what to draw, independent of style.

Every numeric parameter is optional; a descriptor missing a required value
generates no drawing rather than raising.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Any, ClassVar, Union

Point = tuple[float, float]


@dataclass(frozen=True)
class _Shape:
    tag: ClassVar[str] = ""

    def cache_params(self) -> tuple[Any, ...]:
        return (self.tag, *astuple(self))


@dataclass(frozen=True)
class Line(_Shape):
    tag: ClassVar[str] = "line"
    x1: float | None = None
    y1: float | None = None
    x2: float | None = None
    y2: float | None = None


@dataclass(frozen=True)
class Rectangle(_Shape):
    tag: ClassVar[str] = "rectangle"
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None


@dataclass(frozen=True)
class RoundedRectangle(_Shape):
    tag: ClassVar[str] = "roundedRectangle"
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    radius: float | None = None


@dataclass(frozen=True)
class Ellipse(_Shape):
    tag: ClassVar[str] = "ellipse"
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None


@dataclass(frozen=True)
class Circle(_Shape):
    tag: ClassVar[str] = "circle"
    x: float | None = None
    y: float | None = None
    diameter: float | None = None


@dataclass(frozen=True)
class Polygon(_Shape):
    tag: ClassVar[str] = "polygon"
    points: tuple[Point, ...] = ()


@dataclass(frozen=True)
class Arc(_Shape):
    """Partial ellipse centred on (x, y); angles in radians."""

    tag: ClassVar[str] = "arc"
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    start: float | None = None
    stop: float | None = None
    closed: bool = False


@dataclass(frozen=True)
class Curve(_Shape):
    tag: ClassVar[str] = "curve"
    points: tuple[Point, ...] = ()


@dataclass(frozen=True)
class LinearPath(_Shape):
    tag: ClassVar[str] = "linearPath"
    points: tuple[Point, ...] = ()
    close: bool = False


@dataclass(frozen=True)
class SvgPath(_Shape):
    tag: ClassVar[str] = "path"
    d: str | None = None


@dataclass(frozen=True)
class TextPath(_Shape):
    tag: ClassVar[str] = "text"
    text: str | None = None
    font_family: str = "DejaVu Sans"
    font_size: float = 24.0


@dataclass(frozen=True)
class FullRectangle(_Shape):
    """Fills the canvas, inset from every edge."""

    tag: ClassVar[str] = "fullRectangle"


@dataclass(frozen=True)
class FullCircle(_Shape):
    """Largest circle centred on the canvas, inset from its shorter side."""

    tag: ClassVar[str] = "fullCircle"


ShapeDescriptor = Union[
    Line,
    Rectangle,
    RoundedRectangle,
    Ellipse,
    Circle,
    Polygon,
    Arc,
    Curve,
    LinearPath,
    SvgPath,
    TextPath,
    FullRectangle,
    FullCircle,
]
