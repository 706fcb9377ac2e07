"""Drawing → renderer-ready commands.

One OperationSet yields at most one RenderCommand: geometry plus a stroke
or fill paint, cap and join, and an optional clip path. Sets whose colour
is transparent (None) produce nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from roughsketch.engine.brush import BrushCap, BrushJoin
from roughsketch.engine.config import EngineConfig
from roughsketch.engine.operations import Drawing, Operation, OperationSet, OpSetKind
from roughsketch.engine.options import FillStrokeAlignment, FillStyle
from roughsketch.engine.stroke_to_fill import stroke_to_fill
from roughsketch.svg.path_data import parse_path_data


@dataclass(frozen=True)
class Stroke:
    color: str
    width: float
    opacity: float = 1.0


@dataclass(frozen=True)
class Fill:
    color: str
    opacity: float = 1.0


Paint = Union[Stroke, Fill]


@dataclass(frozen=True)
class RenderCommand:
    ops: tuple[Operation, ...]
    style: Paint
    cap: BrushCap = BrushCap.ROUND
    join: BrushJoin = BrushJoin.ROUND
    clip_ops: tuple[Operation, ...] | None = None
    # True: draw only outside clip_ops
    inverse_clip: bool = False


def build_commands(drawing: Drawing, config: EngineConfig | None = None) -> list[RenderCommand]:
    config = config or EngineConfig()
    commands: list[RenderCommand] = []
    for op_set in drawing.sets:
        command = _command(op_set, drawing, config)
        if command is not None:
            commands.append(command)
    return commands


def _command(op_set: OperationSet, drawing: Drawing, config: EngineConfig) -> RenderCommand | None:
    options = drawing.options
    profile = options.brush_profile
    cap, join = profile.cap, profile.join

    if op_set.kind == OpSetKind.STROKE_PATH:
        if options.stroke is None:
            return None
        width = options.effective_svg_stroke_width if drawing.is_svg else options.stroke_width
        if profile.requires_custom_rendering:
            outline = stroke_to_fill(op_set.ops, width, profile, config)
            return RenderCommand(outline, Fill(options.stroke, options.stroke_opacity), cap, join)
        return RenderCommand(op_set.ops, Stroke(options.stroke, width, options.stroke_opacity), cap, join)

    if options.fill is None:
        return None

    if op_set.kind == OpSetKind.FILL_SKETCH:
        weight = options.effective_svg_fill_weight if drawing.is_svg else options.effective_fill_weight
        if options.fill_style == FillStyle.SCRIBBLE and options.scribble_use_brush_stroke:
            outline = stroke_to_fill(op_set.ops, weight, profile, config)
            return RenderCommand(outline, Fill(options.fill, options.fill_opacity), cap, join)
        return RenderCommand(op_set.ops, Stroke(options.fill, weight, options.fill_opacity), cap, join)

    if op_set.kind == OpSetKind.FILL_SOLID_PATH:
        return RenderCommand(op_set.ops, Fill(options.fill, options.fill_opacity), cap, join)

    outline = tuple(parse_path_data(op_set.path or ""))
    if not outline:
        return None

    if op_set.kind == OpSetKind.SVG_FILL_SOLID:
        return RenderCommand(outline, Fill(options.fill, options.fill_opacity), cap, join)

    # SVG_FILL_PATTERN: the outline stroked in the fill colour
    weight = options.effective_svg_fill_weight
    alignment = options.svg_fill_stroke_alignment
    if alignment == FillStrokeAlignment.CENTER:
        return RenderCommand(outline, Stroke(options.fill, weight, options.fill_opacity), cap, join)
    # Half of a clipped stroke is hidden, so double it to keep the visible weight
    return RenderCommand(
        outline,
        Stroke(options.fill, weight * 2, options.fill_opacity),
        cap,
        join,
        clip_ops=outline,
        inverse_clip=alignment == FillStrokeAlignment.OUTSIDE,
    )
