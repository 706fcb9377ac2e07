"""Per-shape stroke generators.

Every primitive is drawn as a "doubled line": two independently jittered
passes of a slightly bowed curve. All randomness comes from the
Randomizer handed in by the caller.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from roughsketch.engine.operations import (
    BezierCurveTo,
    Close,
    LineTo,
    Move,
    Operation,
    QuadraticCurveTo,
)

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions
    from roughsketch.engine.randomness import Randomizer

Point = tuple[float, float]

TWO_PI = 2 * math.pi


def line_ops(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    options: RenderOptions,
    rng: Randomizer,
    move: bool = True,
    overlay: bool = False,
) -> list[Operation]:
    """One bowed pass from (x1, y1) to (x2, y2). overlay uses half the jitter."""
    length_sq = (x1 - x2) ** 2 + (y1 - y2) ** 2
    max_offset = options.max_randomness_offset
    # Short segments get proportionally less wobble
    if max_offset * max_offset * 100 > length_sq:
        max_offset = math.sqrt(length_sq) / 10
    jitter = max_offset / 2 if overlay else max_offset

    diverge = 0.2 + 0.2 * rng.random()
    mid_x = options.bowing * options.max_randomness_offset * (y2 - y1) / 200
    mid_y = options.bowing * options.max_randomness_offset * (x1 - x2) / 200
    mid_x = rng.offset(mid_x, options)
    mid_y = rng.offset(mid_y, options)

    def off() -> float:
        return rng.offset(jitter, options)

    ops: list[Operation] = []
    if move:
        ops.append(Move(x1 + off(), y1 + off()))
    ops.append(
        BezierCurveTo(
            mid_x + x1 + (x2 - x1) * diverge + off(),
            mid_y + y1 + (y2 - y1) * diverge + off(),
            mid_x + x1 + 2 * (x2 - x1) * diverge + off(),
            mid_y + y1 + 2 * (y2 - y1) * diverge + off(),
            x2 + off(),
            y2 + off(),
        )
    )
    return ops


def double_line_ops(
    x1: float, y1: float, x2: float, y2: float, options: RenderOptions, rng: Randomizer
) -> list[Operation]:
    return line_ops(x1, y1, x2, y2, options, rng, move=True, overlay=False) + line_ops(
        x1, y1, x2, y2, options, rng, move=True, overlay=True
    )


def bezier_from_points(
    points: list[Point],
    options: RenderOptions,
    rng: Randomizer,
    close: Point | None = None,
) -> list[Operation]:
    """Catmull-Rom spline through points[1:-1]; the end points only steer tangents."""
    n = len(points)
    ops: list[Operation] = []
    if n > 3:
        s = 1 - options.curve_tightness
        ops.append(Move(points[1][0], points[1][1]))
        for i in range(1, n - 2):
            prev, cur, nxt, after = points[i - 1], points[i], points[i + 1], points[i + 2]
            ops.append(
                BezierCurveTo(
                    cur[0] + (s * nxt[0] - s * prev[0]) / 6,
                    cur[1] + (s * nxt[1] - s * prev[1]) / 6,
                    nxt[0] + (s * cur[0] - s * after[0]) / 6,
                    nxt[1] + (s * cur[1] - s * after[1]) / 6,
                    nxt[0],
                    nxt[1],
                )
            )
        if close is not None:
            max_off = options.max_randomness_offset
            ops.append(
                LineTo(close[0] + rng.offset(max_off, options), close[1] + rng.offset(max_off, options))
            )
    elif n == 3:
        ops.append(Move(points[1][0], points[1][1]))
        ops.append(
            BezierCurveTo(
                points[1][0], points[1][1], points[2][0], points[2][1], points[2][0], points[2][1]
            )
        )
    elif n == 2:
        ops.extend(double_line_ops(points[0][0], points[0][1], points[1][0], points[1][1], options, rng))
    return ops


def _curve_with_offset(
    points: list[Point], offset: float, options: RenderOptions, rng: Randomizer
) -> list[Operation]:
    def jitter(p: Point) -> Point:
        return (p[0] + rng.offset(offset, options), p[1] + rng.offset(offset, options))

    ps = [jitter(points[0]), jitter(points[0])]
    for i in range(1, len(points)):
        ps.append(jitter(points[i]))
        if i == len(points) - 1:
            ps.append(jitter(points[i]))
    return bezier_from_points(ps, options, rng)


def curve_ops(points: list[Point], options: RenderOptions, rng: Randomizer) -> list[Operation]:
    """Two passes of a smooth curve through every given point."""
    if not points:
        return []
    r = options.roughness
    return _curve_with_offset(points, 1 * (1 + 0.2 * r), options, rng) + _curve_with_offset(
        points, 1.5 * (1 + 0.22 * r), options, rng
    )


def _ellipse_with_params(
    increment: float,
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    offset: float,
    overlap: float,
    options: RenderOptions,
    rng: Randomizer,
) -> list[Operation]:
    rad_offset = rng.offset(0.5, options) - math.pi / 2

    def pt(scale: float, angle: float) -> Point:
        return (
            rng.offset(offset, options) + cx + scale * rx * math.cos(angle),
            rng.offset(offset, options) + cy + scale * ry * math.sin(angle),
        )

    points = [pt(0.9, rad_offset - increment)]
    angle = rad_offset
    while angle < TWO_PI + rad_offset - 0.01:
        points.append(pt(1.0, angle))
        angle += increment
    points.append(pt(1.0, rad_offset + TWO_PI + overlap * 0.5))
    points.append(pt(0.98, rad_offset + overlap))
    points.append(pt(0.9, rad_offset + overlap * 0.5))
    return bezier_from_points(points, options, rng)


def ellipse_ops(
    cx: float, cy: float, rx: float, ry: float, options: RenderOptions, rng: Randomizer
) -> list[Operation]:
    """Two closed passes sampled every 2π / curve_step_count."""
    increment = TWO_PI / options.curve_step_count
    rx += rng.offset(rx * 0.05, options)
    ry += rng.offset(ry * 0.05, options)
    overlap = increment * rng.offset_in_range(0.1, rng.offset_in_range(0.4, 1, options), options)
    first = _ellipse_with_params(increment, cx, cy, rx, ry, 1, overlap, options, rng)
    second = _ellipse_with_params(increment, cx, cy, rx, ry, 1.5, 0, options, rng)
    return first + second


def ellipse_points(
    cx: float, cy: float, rx: float, ry: float, options: RenderOptions, rng: Randomizer
) -> list[Point]:
    """Jittered outline points of an ellipse, one per curve step."""
    increment = TWO_PI / options.curve_step_count
    rx += rng.offset(rx * 0.05, options)
    ry += rng.offset(ry * 0.05, options)
    points: list[Point] = []
    angle = 0.0
    while angle < TWO_PI - 1e-9:
        points.append(
            (
                cx + rx * math.cos(angle) + rng.offset(1, options),
                cy + ry * math.sin(angle) + rng.offset(1, options),
            )
        )
        angle += increment
    return points


def normalize_arc(start: float, stop: float) -> tuple[float, float]:
    """Shift start into [0, 2π) and cap the span at a full turn."""
    while start < 0:
        start += TWO_PI
        stop += TWO_PI
    if stop - start > TWO_PI:
        start, stop = 0.0, TWO_PI
    return start, stop


def _arc_with_params(
    arc_inc: float,
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    start: float,
    stop: float,
    offset: float,
    options: RenderOptions,
    rng: Randomizer,
) -> list[Operation]:
    rad_offset = start + rng.offset(0.1, options)
    points: list[Point] = [
        (
            rng.offset(offset, options) + cx + 0.9 * rx * math.cos(rad_offset - arc_inc),
            rng.offset(offset, options) + cy + 0.9 * ry * math.sin(rad_offset - arc_inc),
        )
    ]
    angle = rad_offset
    while angle <= stop:
        points.append(
            (
                rng.offset(offset, options) + cx + rx * math.cos(angle),
                rng.offset(offset, options) + cy + ry * math.sin(angle),
            )
        )
        angle += arc_inc
    end = (cx + rx * math.cos(stop), cy + ry * math.sin(stop))
    points.append(end)
    points.append(end)
    return bezier_from_points(points, options, rng)


def arc_ops(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    start: float,
    stop: float,
    closed: bool,
    options: RenderOptions,
    rng: Randomizer,
    rough_closure: bool = True,
) -> list[Operation]:
    rx += rng.offset(rx * 0.01, options)
    ry += rng.offset(ry * 0.01, options)
    start, stop = normalize_arc(start, stop)
    if stop <= start:
        return []
    increment = TWO_PI / options.curve_step_count
    arc_inc = min(increment / 2, (stop - start) / 2)
    ops = _arc_with_params(arc_inc, cx, cy, rx, ry, start, stop, 1, options, rng)
    ops += _arc_with_params(arc_inc, cx, cy, rx, ry, start, stop, 1.5, options, rng)
    if closed:
        sx, sy = cx + rx * math.cos(start), cy + ry * math.sin(start)
        ex, ey = cx + rx * math.cos(stop), cy + ry * math.sin(stop)
        if rough_closure:
            ops += double_line_ops(cx, cy, sx, sy, options, rng)
            ops += double_line_ops(cx, cy, ex, ey, options, rng)
        else:
            ops.append(LineTo(cx, cy))
            ops.append(LineTo(sx, sy))
    return ops


def arc_points(
    cx: float, cy: float, rx: float, ry: float, start: float, stop: float, steps: float
) -> list[Point]:
    """Un-jittered points along an arc, stepping (stop - start) / steps."""
    start, stop = normalize_arc(start, stop)
    if stop <= start or steps <= 0:
        return []
    inc = (stop - start) / steps
    points: list[Point] = []
    angle = start
    while angle <= stop + 1e-9:
        points.append((cx + rx * math.cos(angle), cy + ry * math.sin(angle)))
        angle += inc
    return points


def linear_path_ops(
    points: list[Point], close: bool, options: RenderOptions, rng: Randomizer
) -> list[Operation]:
    n = len(points)
    if n > 2:
        ops: list[Operation] = []
        for i in range(n - 1):
            ops += double_line_ops(
                points[i][0], points[i][1], points[i + 1][0], points[i + 1][1], options, rng
            )
        if close:
            ops += double_line_ops(points[-1][0], points[-1][1], points[0][0], points[0][1], options, rng)
        return ops
    if n == 2:
        return double_line_ops(points[0][0], points[0][1], points[1][0], points[1][1], options, rng)
    return []


def polygon_ops(points: list[Point], options: RenderOptions, rng: Randomizer) -> list[Operation]:
    return linear_path_ops(points, True, options, rng)


def rectangle_points(x: float, y: float, width: float, height: float) -> list[Point]:
    return [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]


def rectangle_ops(
    x: float, y: float, width: float, height: float, options: RenderOptions, rng: Randomizer
) -> list[Operation]:
    return polygon_ops(rectangle_points(x, y, width, height), options, rng)


def solid_fill_path_ops(points: list[Point], options: RenderOptions, rng: Randomizer) -> list[Operation]:
    """A single closed polygon with each vertex jittered, used as a fill region."""
    if not points:
        return []
    max_off = options.max_randomness_offset
    ops: list[Operation] = [
        Move(points[0][0] + rng.offset(max_off, options), points[0][1] + rng.offset(max_off, options))
    ]
    for px, py in points[1:]:
        ops.append(LineTo(px + rng.offset(max_off, options), py + rng.offset(max_off, options)))
    ops.append(Close())
    return ops


def corner_arc_ops(
    cx: float,
    cy: float,
    r: float,
    start_angle: float,
    end_angle: float,
    options: RenderOptions,
    rng: Randomizer,
) -> list[Operation]:
    steps = max(2, int(options.curve_step_count / 4))
    increment = (end_angle - start_angle) / steps
    points: list[Point] = []
    angle = start_angle
    while angle <= end_angle + 0.001:
        points.append(
            (
                cx + r * math.cos(angle) + rng.offset(1, options),
                cy + r * math.sin(angle) + rng.offset(1, options),
            )
        )
        angle += increment
    last = (cx + r * math.cos(end_angle), cy + r * math.sin(end_angle))
    if not points or points[-1] != last:
        points.append(last)
    if len(points) < 2:
        return []
    return bezier_from_points(points, options, rng)


def rounded_rectangle_ops(
    x: float,
    y: float,
    width: float,
    height: float,
    radius: float,
    options: RenderOptions,
    rng: Randomizer,
) -> list[Operation]:
    r = min(radius, min(width, height) / 2)
    if r <= 0:
        return rectangle_ops(x, y, width, height, options, rng)
    right, bottom = x + width, y + height
    half_pi = math.pi / 2
    ops = double_line_ops(x + r, y, right - r, y, options, rng)
    ops += corner_arc_ops(right - r, y + r, r, -half_pi, 0, options, rng)
    ops += double_line_ops(right, y + r, right, bottom - r, options, rng)
    ops += corner_arc_ops(right - r, bottom - r, r, 0, half_pi, options, rng)
    ops += double_line_ops(right - r, bottom, x + r, bottom, options, rng)
    ops += corner_arc_ops(x + r, bottom - r, r, half_pi, math.pi, options, rng)
    ops += double_line_ops(x, bottom - r, x, y + r, options, rng)
    ops += corner_arc_ops(x + r, y + r, r, math.pi, 3 * half_pi, options, rng)
    return ops


def rounded_rectangle_polygon(
    x: float, y: float, width: float, height: float, radius: float, arc_steps: int = 8
) -> list[Point]:
    """Fill outline of a rounded rectangle, clockwise from the top-left corner."""
    r = min(radius, min(width, height) / 2)
    if r <= 0:
        return rectangle_points(x, y, width, height)
    corners = [
        (x + r, y + r, math.pi),
        (x + width - r, y + r, -math.pi / 2),
        (x + width - r, y + height - r, 0.0),
        (x + r, y + height - r, math.pi / 2),
    ]
    points: list[Point] = []
    for ccx, ccy, base in corners:
        for i in range(arc_steps + 1):
            angle = base + i * (math.pi / 2) / arc_steps
            points.append((ccx + r * math.cos(angle), ccy + r * math.sin(angle)))
    return points


def _curve_pass_offsets(options: RenderOptions) -> tuple[float, float]:
    r = options.roughness
    return 1 * (1 + 0.2 * r), 1.5 * (1 + 0.22 * r)


def svg_path_ops(commands: list[Operation], options: RenderOptions, rng: Randomizer) -> list[Operation]:
    """Replay absolute path commands as sketchy strokes.

    Lines become doubled lines, curves get two jittered passes, and Close
    draws a doubled line back to the subpath's first point.
    """
    ops: list[Operation] = []
    position: Point = (0.0, 0.0)
    first: Point | None = None
    off1, off2 = _curve_pass_offsets(options)

    def j(value: float, amount: float) -> float:
        return value + rng.offset(amount, options)

    for cmd in commands:
        if isinstance(cmd, Move):
            max_off = options.max_randomness_offset
            position = (j(cmd.x, max_off), j(cmd.y, max_off))
            first = position
            ops.append(Move(*position))
        elif isinstance(cmd, LineTo):
            ops += double_line_ops(position[0], position[1], cmd.x, cmd.y, options, rng)
            position = (cmd.x, cmd.y)
            if first is None:
                first = position
        elif isinstance(cmd, BezierCurveTo):
            x1, y1 = position
            for amount in (off1, off2):
                ops.append(Move(j(x1, amount), j(y1, amount)))
                end = (j(cmd.x, amount), j(cmd.y, amount))
                ops.append(
                    BezierCurveTo(
                        j(cmd.c1x, amount), j(cmd.c1y, amount), j(cmd.c2x, amount), j(cmd.c2y, amount), *end
                    )
                )
            position = (cmd.x, cmd.y)
            if first is None:
                first = position
        elif isinstance(cmd, QuadraticCurveTo):
            x1, y1 = position
            for amount in (off1, off2):
                ops.append(Move(j(x1, amount), j(y1, amount)))
                end = (j(cmd.x, amount), j(cmd.y, amount))
                ops.append(QuadraticCurveTo(j(cmd.cx, amount), j(cmd.cy, amount), *end))
            position = (cmd.x, cmd.y)
            if first is None:
                first = position
        elif isinstance(cmd, Close):
            if first is not None:
                if position != first:
                    ops += double_line_ops(position[0], position[1], first[0], first[1], options, rng)
                position = first
            first = None
    return ops
