"""Dots: small jittered circles spaced one gap apart along horizontal scan lines."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from roughsketch.engine.fillers.base import Filler, hachure_gap, hachure_lines, line_length, sketch_set
from roughsketch.engine.operations import Operation, OperationSet
from roughsketch.engine.strokes import ellipse_ops

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions
    from roughsketch.engine.randomness import Randomizer
    from roughsketch.utils.geometry import Point


class DotsFiller(Filler):
    def fill_polygon(
        self, points: list[Point], options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        lines = hachure_lines(points, options, angle=0)
        gap = hachure_gap(options)
        radius = options.effective_fill_weight
        # Dots are tiny; a 4-step outline is plenty
        dot_options = options.with_changes(curve_step_count=4)

        ops: list[Operation] = []
        for start, end in lines:
            length = line_length((start, end))
            count = math.ceil(length / gap) - 1
            if count < 1:
                continue
            angle = math.atan2(end[1] - start[1], end[0] - start[0])
            for i in range(count):
                d = gap * (i + 1)
                cx = start[0] + d * math.cos(angle) + rng.offset_in_range(-gap / 4, gap / 4, options)
                cy = start[1] + d * math.sin(angle) + rng.offset_in_range(-gap / 4, gap / 4, options)
                ops += ellipse_ops(cx, cy, radius, radius, dot_options, rng)
        return sketch_set(ops)
