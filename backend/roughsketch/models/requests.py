"""API request models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from roughsketch.engine import shapes
from roughsketch.engine.animation import AnimationSpeed, AnimationVariance
from roughsketch.engine.options import RenderOptions

PointModel = tuple[float, float]


class LineShape(BaseModel):
    kind: Literal["line"]
    x1: float | None = None
    y1: float | None = None
    x2: float | None = None
    y2: float | None = None

    def to_descriptor(self) -> shapes.Line:
        return shapes.Line(self.x1, self.y1, self.x2, self.y2)


class RectangleShape(BaseModel):
    kind: Literal["rectangle"]
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None

    def to_descriptor(self) -> shapes.Rectangle:
        return shapes.Rectangle(self.x, self.y, self.width, self.height)


class RoundedRectangleShape(BaseModel):
    kind: Literal["roundedRectangle"]
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    radius: float | None = None

    def to_descriptor(self) -> shapes.RoundedRectangle:
        return shapes.RoundedRectangle(self.x, self.y, self.width, self.height, self.radius)


class EllipseShape(BaseModel):
    kind: Literal["ellipse"]
    x: float | None = Field(default=None, description="Centre x")
    y: float | None = Field(default=None, description="Centre y")
    width: float | None = None
    height: float | None = None

    def to_descriptor(self) -> shapes.Ellipse:
        return shapes.Ellipse(self.x, self.y, self.width, self.height)


class CircleShape(BaseModel):
    kind: Literal["circle"]
    x: float | None = None
    y: float | None = None
    diameter: float | None = None

    def to_descriptor(self) -> shapes.Circle:
        return shapes.Circle(self.x, self.y, self.diameter)


class PolygonShape(BaseModel):
    kind: Literal["polygon"]
    points: list[PointModel] = Field(default_factory=list)

    def to_descriptor(self) -> shapes.Polygon:
        return shapes.Polygon(tuple(self.points))


class ArcShape(BaseModel):
    kind: Literal["arc"]
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    start: float | None = Field(default=None, description="Start angle in radians")
    stop: float | None = Field(default=None, description="Stop angle in radians")
    closed: bool = False

    def to_descriptor(self) -> shapes.Arc:
        return shapes.Arc(self.x, self.y, self.width, self.height, self.start, self.stop, self.closed)


class CurveShape(BaseModel):
    kind: Literal["curve"]
    points: list[PointModel] = Field(default_factory=list)

    def to_descriptor(self) -> shapes.Curve:
        return shapes.Curve(tuple(self.points))


class LinearPathShape(BaseModel):
    kind: Literal["linearPath"]
    points: list[PointModel] = Field(default_factory=list)
    close: bool = False

    def to_descriptor(self) -> shapes.LinearPath:
        return shapes.LinearPath(tuple(self.points), self.close)


class PathShape(BaseModel):
    kind: Literal["path"]
    d: str | None = Field(default=None, description="SVG path data")

    def to_descriptor(self) -> shapes.SvgPath:
        return shapes.SvgPath(self.d)


class TextShape(BaseModel):
    kind: Literal["text"]
    text: str | None = None
    font_family: str = "DejaVu Sans"
    font_size: float = 24.0

    def to_descriptor(self) -> shapes.TextPath:
        return shapes.TextPath(self.text, self.font_family, self.font_size)


class FullRectangleShape(BaseModel):
    kind: Literal["fullRectangle"]

    def to_descriptor(self) -> shapes.FullRectangle:
        return shapes.FullRectangle()


class FullCircleShape(BaseModel):
    kind: Literal["fullCircle"]

    def to_descriptor(self) -> shapes.FullCircle:
        return shapes.FullCircle()


ShapePayload = Annotated[
    Union[
        LineShape,
        RectangleShape,
        RoundedRectangleShape,
        EllipseShape,
        CircleShape,
        PolygonShape,
        ArcShape,
        CurveShape,
        LinearPathShape,
        PathShape,
        TextShape,
        FullRectangleShape,
        FullCircleShape,
    ],
    Field(discriminator="kind"),
]


class GenerateRequest(BaseModel):
    shape: ShapePayload
    options: RenderOptions = Field(default_factory=RenderOptions)
    width: float = Field(default=300.0, description="Canvas width")
    height: float = Field(default=300.0, description="Canvas height")


class AnimateRequest(GenerateRequest):
    steps: int = Field(default=4, description="Variation steps before looping (min 2)")
    speed: AnimationSpeed = AnimationSpeed.MEDIUM
    variance: AnimationVariance = AnimationVariance.MEDIUM
    seed: int = Field(default=0, description="Base seed for per-step variance")
