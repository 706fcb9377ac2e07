"""Solid: a single jittered closed region filled by the renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roughsketch.engine.fillers.base import Filler, is_degenerate, pie_polygon
from roughsketch.engine.operations import Close, LineTo, Move, Operation, OperationSet, OpSetKind
from roughsketch.engine.strokes import ellipse_points, normalize_arc, solid_fill_path_ops

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions
    from roughsketch.engine.randomness import Randomizer
    from roughsketch.utils.geometry import Point


class SolidFiller(Filler):
    def fill_polygon(
        self, points: list[Point], options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        if is_degenerate(points):
            return None
        return OperationSet(OpSetKind.FILL_SOLID_PATH, tuple(solid_fill_path_ops(points, options, rng)))

    def fill_ellipse(
        self, cx: float, cy: float, rx: float, ry: float, options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        if rx <= 0 or ry <= 0:
            return None
        outline = ellipse_points(cx, cy, rx, ry, options, rng)
        ops: list[Operation] = [Move(*outline[0])]
        ops.extend(LineTo(*p) for p in outline[1:])
        ops.append(Close())
        return OperationSet(OpSetKind.FILL_SOLID_PATH, tuple(ops))

    def fill_arc(
        self,
        cx: float,
        cy: float,
        rx: float,
        ry: float,
        start: float,
        stop: float,
        options: RenderOptions,
        rng: Randomizer,
    ) -> OperationSet | None:
        start, stop = normalize_arc(start, stop)
        return self.fill_polygon(pie_polygon(cx, cy, rx, ry, start, stop, options), options, rng)
