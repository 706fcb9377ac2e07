"""Scribble filler: adapts region shapes to the ray-cast scribble generator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roughsketch.engine.config import EngineConfig
from roughsketch.engine.fillers.base import Filler, ellipse_edge, is_degenerate, sketch_set
from roughsketch.engine.operations import Close, LineTo, Move, Operation, OperationSet
from roughsketch.engine.scribble import scribble_fill

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions
    from roughsketch.engine.randomness import Randomizer
    from roughsketch.utils.geometry import Point


def polygon_commands(points: list[Point]) -> list[Operation]:
    ops: list[Operation] = [Move(*points[0])]
    ops.extend(LineTo(*p) for p in points[1:])
    ops.append(Close())
    return ops


class ScribbleFiller(Filler):
    """All scribble segments merged into one FILL_SKETCH set, one subpath each."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def fill_commands(self, commands: list[Operation], options: RenderOptions) -> OperationSet | None:
        ops: list[Operation] = []
        for op_set in scribble_fill(commands, options, self.config):
            ops.extend(op_set.ops)
        return sketch_set(ops)

    def fill_polygon(
        self, points: list[Point], options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        if is_degenerate(points):
            return None
        return self.fill_commands(polygon_commands(points), options)

    def fill_ellipse(
        self, cx: float, cy: float, rx: float, ry: float, options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        if rx <= 0 or ry <= 0:
            return None
        return self.fill_commands(polygon_commands(ellipse_edge(cx, cy, rx, ry, options, rng)), options)
