"""Zigzag-line: each hachure segment redrawn as a run of triangular zigs."""

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


def zigzag_offset(options: RenderOptions) -> float:
    if options.zigzag_offset >= 0:
        return options.zigzag_offset
    return hachure_gap(options)


class ZigzagLineFiller(Filler):
    def fill_polygon(
        self, points: list[Point], options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        zig = max(zigzag_offset(options), 0.1)
        gap = max(hachure_gap(options), options.stroke_width * 4)
        # Scan lines spread out to leave room for the zig amplitude
        lines = hachure_lines(points, options, gap=gap + zig)
        amplitude = math.sqrt(2 * zig * zig)

        ops: list[Operation] = []
        for start, end in lines:
            length = line_length((start, end))
            count = max(1, round(length / (2 * zig)))
            if start[0] > end[0]:
                start, end = end, start
            angle = math.atan2(end[1] - start[1], end[0] - start[0])
            cos_a, sin_a = math.cos(angle), math.sin(angle)
            peak_dx = amplitude * math.cos(angle + math.pi / 4)
            peak_dy = amplitude * math.sin(angle + math.pi / 4)
            for i in range(count):
                t1 = 2 * i * zig
                t2 = min((2 * i + 2) * zig, length)
                mid = t1 + zig
                x1, y1 = start[0] + t1 * cos_a, start[1] + t1 * sin_a
                px, py = start[0] + mid * cos_a + peak_dx, start[1] + mid * sin_a + peak_dy
                x2, y2 = start[0] + t2 * cos_a, start[1] + t2 * sin_a
                ops += double_line_ops(x1, y1, px, py, options, rng)
                ops += double_line_ops(px, py, x2, y2, options, rng)
        return sketch_set(ops)
