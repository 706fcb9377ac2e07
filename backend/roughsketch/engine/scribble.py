"""Scribble fill: one continuous zig-zag across a region.

Parallel rays at ``scribble_origin`` degrees are cast across the region's
bounding box at evenly spaced positions along the perpendicular traversal
axis. Each ray's outermost boundary crossings give a left and a right
edge; the scribble visits them alternately, inset slightly from the
boundary. A jump much longer than the local ray spacing (a concave gap or
a hole) starts a new segment.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from roughsketch.engine.config import EngineConfig
from roughsketch.engine.flatten import flatten_cubic, flatten_quadratic
from roughsketch.engine.operations import (
    BezierCurveTo,
    Close,
    LineTo,
    Move,
    Operation,
    OperationSet,
    OpSetKind,
    QuadraticCurveTo,
)
from roughsketch.svg.path_data import path_bounds
from roughsketch.utils.geometry import (
    Point,
    cubic_point,
    distance,
    quadratic_point,
    segment_intersection,
)

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions

logger = logging.getLogger(__name__)


def dedupe_points(points: list[Point], tolerance: float = 0.5) -> list[Point]:
    """Drop points closer than tolerance to an earlier kept point.

    Kept points are bucketed into a grid of tolerance-sized cells, so each
    lookup only inspects the 3x3 neighbourhood of its own cell.
    """
    if tolerance <= 0:
        return list(points)
    grid: dict[tuple[int, int], list[Point]] = {}
    kept: list[Point] = []
    for p in points:
        gx = math.floor(p[0] / tolerance)
        gy = math.floor(p[1] / tolerance)
        duplicate = False
        for nx in (gx - 1, gx, gx + 1):
            for ny in (gy - 1, gy, gy + 1):
                for q in grid.get((nx, ny), ()):
                    if distance(p, q) < tolerance:
                        duplicate = True
                        break
                if duplicate:
                    break
            if duplicate:
                break
        if not duplicate:
            grid.setdefault((gx, gy), []).append(p)
            kept.append(p)
    return kept


def _project(point: Point, origin: Point, angle: float) -> float:
    return (point[0] - origin[0]) * math.cos(angle) + (point[1] - origin[1]) * math.sin(angle)


def _point_on_axis(center: Point, angle: float, dist: float) -> Point:
    return (center[0] + dist * math.cos(angle), center[1] + dist * math.sin(angle))


def _vertex_positions(
    options: RenderOptions, reduction: float, min_proj: float, length: float
) -> list[float]:
    pattern = options.scribble_tightness_pattern
    positions: list[float] = []
    if pattern:
        section = length / len(pattern)
        for k, tightness in enumerate(pattern):
            start = min_proj + k * section
            effective = max(1, int(tightness * reduction))
            positions.extend(start + i / (effective + 1) * section for i in range(1, effective + 1))
        return positions
    effective = max(2, int(options.scribble_tightness * reduction))
    return [min_proj + i / (effective + 1) * length for i in range(1, effective + 1)]


def _ray_intersections(
    commands: list[Operation], ray_start: Point, ray_end: Point, config: EngineConfig
) -> list[Point]:
    hits: list[Point] = []
    current: Point = (0.0, 0.0)
    start: Point = (0.0, 0.0)

    def cross(a: Point, b: Point) -> None:
        p = segment_intersection(ray_start, ray_end, a, b)
        if p is not None:
            hits.append(p)

    for op in commands:
        if isinstance(op, Move):
            current = start = (op.x, op.y)
        elif isinstance(op, LineTo):
            cross(current, (op.x, op.y))
            current = (op.x, op.y)
        elif isinstance(op, QuadraticCurveTo):
            c, end = (op.cx, op.cy), (op.x, op.y)
            prev = current
            for t in flatten_quadratic(current, c, end, config.flatness_tolerance, config.max_flatten_depth):
                p = quadratic_point(current, c, end, t)
                cross(prev, p)
                prev = p
            current = end
        elif isinstance(op, BezierCurveTo):
            c1, c2, end = (op.c1x, op.c1y), (op.c2x, op.c2y), (op.x, op.y)
            prev = current
            for t in flatten_cubic(current, c1, c2, end, config.flatness_tolerance, config.max_flatten_depth):
                p = cubic_point(current, c1, c2, end, t)
                cross(prev, p)
                prev = p
            current = end
        elif isinstance(op, Close):
            cross(current, start)
            current = start
    return dedupe_points(hits, config.dedupe_tolerance)


def _segment_ops(points: list[Point], curvature: float) -> list[Operation]:
    ops: list[Operation] = [Move(*points[0])]
    if curvature <= 0 or len(points) < 3:
        ops.extend(LineTo(*p) for p in points[1:])
        return ops
    for i in range(1, len(points)):
        if i == len(points) - 1:
            ops.append(LineTo(*points[i]))
            continue
        prev, curr, nxt = points[i - 1], points[i], points[i + 1]
        to_prev = distance(prev, curr)
        to_next = distance(curr, nxt)
        entry_t = max(0.1, 1.0 - curvature) if to_prev > 0 else 1.0
        exit_t = min(0.9, curvature) if to_next > 0 else 0.0
        entry = (prev[0] + (curr[0] - prev[0]) * entry_t, prev[1] + (curr[1] - prev[1]) * entry_t)
        exit_ = (curr[0] + (nxt[0] - curr[0]) * exit_t, curr[1] + (nxt[1] - curr[1]) * exit_t)
        ops.append(LineTo(*entry))
        # The corner becomes the control point
        ops.append(QuadraticCurveTo(curr[0], curr[1], exit_[0], exit_[1]))
    return ops


def scribble_fill(
    commands: list[Operation],
    options: RenderOptions,
    config: EngineConfig | None = None,
) -> list[OperationSet]:
    """Scribble sets for the region bounded by commands, one per continuous segment."""
    config = config or EngineConfig()
    xmin, ymin, xmax, ymax = path_bounds(commands)
    width, height = xmax - xmin, ymax - ymin
    if width <= 0 or height <= 0:
        return []

    origin = math.radians(options.scribble_origin)
    normalized = options.scribble_curvature / 50.0
    curvature = normalized * 0.30
    reduction = 1.0 - normalized * 0.6
    traversal = origin + math.pi / 2

    center = ((xmin + xmax) / 2, (ymin + ymax) / 2)
    corners = [(xmin, ymin), (xmax, ymin), (xmax, ymax), (xmin, ymax)]
    projections = [_project(c, center, traversal) for c in corners]
    min_proj, max_proj = min(projections), max(projections)
    length = max_proj - min_proj
    if length <= 0:
        return []

    padding = min(width, height) * 0.02
    positions = _vertex_positions(options, reduction, min_proj, length)
    ray_length = max(width, height) * 3
    cos_o, sin_o = math.cos(origin), math.sin(origin)

    segments: list[list[Point]] = []
    current: list[Point] = []
    go_right = True
    last_spacing = length / (len(positions) + 1)
    for index, position in enumerate(positions):
        ray_origin = _point_on_axis(center, traversal, position - (min_proj + max_proj) / 2)
        ray_start = (ray_origin[0] - ray_length * cos_o, ray_origin[1] - ray_length * sin_o)
        ray_end = (ray_origin[0] + ray_length * cos_o, ray_origin[1] + ray_length * sin_o)
        hits = _ray_intersections(commands, ray_start, ray_end, config)
        if len(hits) < 2:
            if current:
                segments.append(current)
                current = []
            continue

        hits.sort(key=lambda p: _project(p, ray_origin, origin))
        left, right = hits[0], hits[-1]
        span = distance(left, right)
        if span <= 0:
            continue
        inset = min(padding, span * 0.35)
        dx = (right[0] - left[0]) / span
        dy = (right[1] - left[1]) / span
        if go_right:
            vertex = (right[0] - dx * inset, right[1] - dy * inset)
        else:
            vertex = (left[0] + dx * inset, left[1] + dy * inset)

        if index > 0:
            last_spacing = positions[index] - positions[index - 1]
        if current and distance(current[-1], vertex) > span + last_spacing * 1.5:
            segments.append(current)
            current = []
        current.append(vertex)
        go_right = not go_right
    if current:
        segments.append(current)

    sets = [
        OperationSet(OpSetKind.FILL_SKETCH, tuple(_segment_ops(seg, curvature)))
        for seg in segments
        if len(seg) >= 2
    ]
    logger.debug("scribble: %d rays, %d segments", len(positions), len(sets))
    return sets
