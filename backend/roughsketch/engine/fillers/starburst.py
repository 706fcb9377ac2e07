"""Starburst / sunburst: doubled rays from the centre out to the boundary."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from roughsketch.engine.config import EngineConfig
from roughsketch.engine.fillers.base import FillLine, Filler, hachure_gap, is_degenerate, sketch_set
from roughsketch.engine.operations import Operation, OperationSet
from roughsketch.engine.scribble import dedupe_points
from roughsketch.engine.strokes import double_line_ops, normalize_arc
from roughsketch.utils.geometry import (
    ellipse_perimeter,
    polygon_bounds,
    polygon_centroid,
    segment_intersection,
)

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions
    from roughsketch.engine.randomness import Randomizer
    from roughsketch.utils.geometry import Point


def _ray_gap(options: RenderOptions) -> float:
    return max(hachure_gap(options), 1.0)


def _draw_rays(lines: list[FillLine], options: RenderOptions, rng: Randomizer) -> list[Operation]:
    ops: list[Operation] = []
    for start, end in lines:
        ops += double_line_ops(start[0], start[1], end[0], end[1], options, rng)
    return ops


class StarburstFiller(Filler):
    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def fill_polygon(
        self, points: list[Point], options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        if is_degenerate(points):
            return None
        xmin, ymin, xmax, ymax = polygon_bounds(points)
        cx, cy = polygon_centroid(points)
        radius = max(math.hypot(cx - x, cy - y) for x in (xmin, xmax) for y in (ymin, ymax))
        count = max(1, int(2 * math.pi * radius / _ray_gap(options)))

        edges = list(zip(points, points[1:] + points[:1]))
        hits: list[Point] = []
        for i in range(count):
            angle = i * 2 * math.pi / count
            end = (cx + radius * math.cos(angle), cy + radius * math.sin(angle))
            for a, b in edges:
                p = segment_intersection((cx, cy), end, a, b)
                if p is not None and xmin <= p[0] <= xmax and ymin <= p[1] <= ymax:
                    hits.append(p)
        hits = dedupe_points(hits, self.config.dedupe_tolerance)
        return sketch_set(_draw_rays([((cx, cy), p) for p in hits], options, rng))

    def fill_ellipse(
        self, cx: float, cy: float, rx: float, ry: float, options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        if rx <= 0 or ry <= 0:
            return None
        count = max(1, int(ellipse_perimeter(rx, ry) / _ray_gap(options)))
        lines = [
            ((cx, cy), (cx + rx * math.cos(a), cy + ry * math.sin(a)))
            for a in (i * 2 * math.pi / count for i in range(count))
        ]
        return sketch_set(_draw_rays(lines, options, rng))

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
        if rx <= 0 or ry <= 0 or stop <= start:
            return None
        arc_length = (stop - start) * (rx + ry) / 2
        count = max(1, int(arc_length / _ray_gap(options)))
        lines = []
        for i in range(count + 1):
            angle = start + (stop - start) * i / count
            lines.append(((cx, cy), (cx + rx * math.cos(angle), cy + ry * math.sin(angle))))
        return sketch_set(_draw_rays(lines, options, rng))
