"""roughsketch engine: hand-drawn geometry generation.

Only the value types are re-exported here; the generator, caches and
renderer live in their own modules.
"""

from roughsketch.engine.brush import BrushCap, BrushJoin, BrushProfile, BrushTip, ThicknessProfile
from roughsketch.engine.operations import (
    BezierCurveTo,
    Close,
    Drawing,
    LineTo,
    Move,
    OperationSet,
    OpSetKind,
    QuadraticCurveTo,
)
from roughsketch.engine.options import FillStrokeAlignment, FillStyle, RenderOptions

__all__ = [
    "BezierCurveTo",
    "BrushCap",
    "BrushJoin",
    "BrushProfile",
    "BrushTip",
    "Close",
    "Drawing",
    "FillStrokeAlignment",
    "FillStyle",
    "LineTo",
    "Move",
    "OpSetKind",
    "OperationSet",
    "QuadraticCurveTo",
    "RenderOptions",
    "ThicknessProfile",
]
