"""Dashed: hachure segments broken into centred dash/gap runs."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from roughsketch.engine.fillers.base import Filler, hachure_gap, hachure_lines, line_length, sketch_set
from roughsketch.engine.operations import Operation, OperationSet
from roughsketch.engine.strokes import double_line_ops

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions
    from roughsketch.engine.randomness import Randomizer
    from roughsketch.utils.geometry import Point


class DashedFiller(Filler):
    def fill_polygon(
        self, points: list[Point], options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        gap = hachure_gap(options)
        dash = options.dash_offset if options.dash_offset >= 0 else gap
        space = options.dash_gap if options.dash_gap >= 0 else gap
        period = max(dash + space, 0.1)

        ops: list[Operation] = []
        for start, end in hachure_lines(points, options):
            length = line_length((start, end))
            count = math.floor(length / period)
            if count < 1:
                ops += double_line_ops(start[0], start[1], end[0], end[1], options, rng)
                continue
            if start[0] > end[0]:
                start, end = end, start
            angle = math.atan2(end[1] - start[1], end[0] - start[0])
            cos_a, sin_a = math.cos(angle), math.sin(angle)
            offset = (length - count * period + space) / 2
            for i in range(count):
                a = i * period + offset
                b = a + dash
                ops += double_line_ops(
                    start[0] + a * cos_a,
                    start[1] + a * sin_a,
                    start[0] + b * cos_a,
                    start[1] + b * sin_a,
                    options,
                    rng,
                )
        return sketch_set(ops)
