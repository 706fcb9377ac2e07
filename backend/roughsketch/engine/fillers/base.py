"""Filler base class and the shared hachure scan.

The scan rotates the polygon by -fill_angle about its centroid, sweeps
horizontal lines across it, pairs up the edge crossings of each line with
the even-odd rule and rotates the resulting segments back.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from roughsketch.engine.operations import Operation, OperationSet, OpSetKind
from roughsketch.engine.strokes import double_line_ops
from roughsketch.utils.geometry import (
    Point,
    distance,
    polygon_area,
    polygon_centroid,
    rotate_lines,
    rotate_points,
)

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions
    from roughsketch.engine.randomness import Randomizer

FillLine = tuple[Point, Point]

# Edge polygon resolution for ellipse fills
ELLIPSE_EDGE_STEPS = 72


def hachure_gap(options: RenderOptions) -> float:
    gap = options.computed_hachure_gap
    if gap < 0:
        gap = options.stroke_width * 4
    return max(gap, 0.1)


def is_degenerate(points: list[Point]) -> bool:
    return len(points) < 3 or polygon_area(points) < 1e-9


def hachure_lines(
    points: list[Point],
    options: RenderOptions,
    angle: float | None = None,
    gap: float | None = None,
) -> list[FillLine]:
    """Scan-line segments covering the polygon at ``angle`` degrees."""
    if is_degenerate(points):
        return []
    angle = options.fill_angle if angle is None else angle
    gap = hachure_gap(options) if gap is None else max(gap, 0.1)
    pattern = options.fill_spacing_pattern or (1.0,)

    center = polygon_centroid(points)
    rotated = rotate_points(points, center, -angle)
    starts = rotated
    ends = np.roll(rotated, -1, axis=0)
    y_lo = np.minimum(starts[:, 1], ends[:, 1])
    y_hi = np.maximum(starts[:, 1], ends[:, 1])
    dy = ends[:, 1] - starts[:, 1]
    # Horizontal edges never cross a scan line under the half-open rule
    sloped = dy != 0
    safe_dy = np.where(sloped, dy, 1.0)

    ymin = float(np.min(rotated[:, 1]))
    ymax = float(np.max(rotated[:, 1]))
    lines: list[FillLine] = []
    y = ymin + gap / 2
    i = 0
    while y < ymax:
        crossing = sloped & (y_lo <= y) & (y < y_hi)
        if np.any(crossing):
            t = (y - starts[crossing, 1]) / safe_dy[crossing]
            xs = np.sort(starts[crossing, 0] + t * (ends[crossing, 0] - starts[crossing, 0]))
            for k in range(0, len(xs) - 1, 2):
                if xs[k + 1] - xs[k] > 1e-9:
                    lines.append(((float(xs[k]), y), (float(xs[k + 1]), y)))
        y += gap * max(pattern[i % len(pattern)], 0.01)
        i += 1
    return rotate_lines(lines, center, angle)


def render_lines(
    lines: list[FillLine], options: RenderOptions, rng: Randomizer, connect: bool = False
) -> list[Operation]:
    """Doubled line per segment; connect also joins each end to the next start."""
    ops: list[Operation] = []
    last_end: Point | None = None
    for start, end in lines:
        ops += double_line_ops(start[0], start[1], end[0], end[1], options, rng)
        if connect and last_end is not None:
            ops += double_line_ops(last_end[0], last_end[1], start[0], start[1], options, rng)
        last_end = end
    return ops


def line_length(line: FillLine) -> float:
    return distance(line[0], line[1])


def ellipse_edge(
    cx: float, cy: float, rx: float, ry: float, options: RenderOptions, rng: Randomizer
) -> list[Point]:
    """Polygon approximation of an ellipse with ±5% radius jitter."""
    rx += rng.offset(rx * 0.05, options)
    ry += rng.offset(ry * 0.05, options)
    step = 2 * math.pi / ELLIPSE_EDGE_STEPS
    return [
        (cx + rx * math.cos(i * step), cy + ry * math.sin(i * step)) for i in range(ELLIPSE_EDGE_STEPS)
    ]


def pie_polygon(
    cx: float, cy: float, rx: float, ry: float, start: float, stop: float, options: RenderOptions
) -> list[Point]:
    """Centre followed by arc points stepping (stop - start) / curve_step_count."""
    points: list[Point] = [(cx, cy)]
    if stop <= start:
        return points
    increment = (stop - start) / options.curve_step_count
    angle = start
    while angle <= stop:
        points.append((cx + rx * math.cos(angle), cy + ry * math.sin(angle)))
        angle += increment
    points.append((cx + rx * math.cos(stop), cy + ry * math.sin(stop)))
    return points


class Filler:
    """Stateless fill pattern generator.

    Subclasses implement fill_polygon; the ellipse and arc variants default
    to scanning the shape's edge polygon.
    """

    def fill_polygon(
        self, points: list[Point], options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        raise NotImplementedError

    def fill_ellipse(
        self, cx: float, cy: float, rx: float, ry: float, options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        if rx <= 0 or ry <= 0:
            return None
        return self.fill_polygon(ellipse_edge(cx, cy, rx, ry, options, rng), options, rng)

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
        return self.fill_polygon(pie_polygon(cx, cy, rx, ry, start, stop, options), options, rng)


def sketch_set(ops: list[Operation]) -> OperationSet | None:
    if not ops:
        return None
    return OperationSet(OpSetKind.FILL_SKETCH, tuple(ops))

