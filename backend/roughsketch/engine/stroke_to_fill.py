"""Stroke → filled outline conversion for variable-width brush strokes.

The centreline is sampled (lines by length, curves by adaptive
flattening), each sample is offset by the brush half-width along its
normal into a left and a right rail, and the rails are stitched into one
closed outline with cap geometry at the ends and join geometry at
interior corners. Fill the result with the nonzero rule.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from roughsketch.engine.brush import BrushCap, BrushJoin, BrushProfile
from roughsketch.engine.config import EngineConfig
from roughsketch.engine.flatten import flatten_cubic, flatten_quadratic
from roughsketch.engine.operations import (
    BezierCurveTo,
    Close,
    LineTo,
    Move,
    Operation,
    QuadraticCurveTo,
)
from roughsketch.utils.geometry import (
    Point,
    cubic_point,
    cubic_tangent,
    distance,
    quadratic_point,
    quadratic_tangent,
)

logger = logging.getLogger(__name__)

# Direction changes below this (radians) are treated as smooth, no join
_JOIN_EPSILON = 1e-3


@dataclass
class _Samples:
    points: list[Point] = field(default_factory=list)
    tangents: list[float] = field(default_factory=list)
    # sample index -> outgoing tangent, for samples sitting on a corner
    joins: dict[int, float] = field(default_factory=dict)
    closed: bool = False

    def __len__(self) -> int:
        return len(self.points)


def split_subpaths(ops: list[Operation] | tuple[Operation, ...]) -> list[list[Operation]]:
    """Split an operation list at every Move. Leading non-Move ops are dropped."""
    subpaths: list[list[Operation]] = []
    current: list[Operation] = []
    for op in ops:
        if isinstance(op, Move):
            if current:
                subpaths.append(current)
            current = [op]
        elif current:
            current.append(op)
    if current:
        subpaths.append(current)
    return subpaths


def stroke_to_fill(
    ops: list[Operation] | tuple[Operation, ...],
    base_width: float,
    profile: BrushProfile,
    config: EngineConfig | None = None,
) -> tuple[Operation, ...]:
    """Convert a centreline path into the outline of its brush stroke."""
    config = config or EngineConfig()
    result: list[Operation] = []
    for subpath in split_subpaths(ops):
        samples = _sample_subpath(subpath, profile, config)
        if len(samples) < 2:
            continue
        result.extend(_outline(samples, base_width, profile, config))
    logger.debug("stroke_to_fill: %d ops in, %d outline ops out", len(ops), len(result))
    return tuple(result)


# ---------------------------------------------------------------------------
# Sampling
# ---------------------------------------------------------------------------


def _segment_params(
    op: Operation, current: Point, refine: bool, config: EngineConfig
) -> list[float]:
    """Local curve parameters to sample for one segment (t=1 included, t=0 not)."""
    if isinstance(op, LineTo):
        length = distance(current, (op.x, op.y))
        n = max(1, math.ceil(length / config.max_sample_spacing)) if refine else 1
        return [i / n for i in range(1, n + 1)]

    if isinstance(op, QuadraticCurveTo):
        c, end = (op.cx, op.cy), (op.x, op.y)
        params = flatten_quadratic(current, c, end, config.flatness_tolerance, config.max_flatten_depth)

        def at(t: float) -> Point:
            return quadratic_point(current, c, end, t)

    else:
        c1, c2, end = (op.c1x, op.c1y), (op.c2x, op.c2y), (op.x, op.y)
        params = flatten_cubic(current, c1, c2, end, config.flatness_tolerance, config.max_flatten_depth)

        def at(t: float) -> Point:
            return cubic_point(current, c1, c2, end, t)

    if not refine:
        return params
    # Varying width needs samples along flat stretches too
    refined: list[float] = []
    prev_t, prev_p = 0.0, current
    for t in params:
        p = at(t)
        n = max(1, math.ceil(distance(prev_p, p) / config.max_sample_spacing))
        refined.extend(prev_t + (t - prev_t) * i / n for i in range(1, n + 1))
        prev_t, prev_p = t, p
    return refined


def _segment_sample(op: Operation, current: Point, t: float) -> tuple[Point, float]:
    if isinstance(op, LineTo):
        end = (op.x, op.y)
        return (
            (current[0] + (end[0] - current[0]) * t, current[1] + (end[1] - current[1]) * t),
            math.atan2(end[1] - current[1], end[0] - current[0]),
        )
    if isinstance(op, QuadraticCurveTo):
        c, end = (op.cx, op.cy), (op.x, op.y)
        return quadratic_point(current, c, end, t), quadratic_tangent(current, c, end, t)
    c1, c2, end = (op.c1x, op.c1y), (op.c2x, op.c2y), (op.x, op.y)
    return cubic_point(current, c1, c2, end, t), cubic_tangent(current, c1, c2, end, t)


def _is_degenerate(op: Operation, current: Point) -> bool:
    return all(distance(current, p) < 1e-9 for p in op.points())


def _sample_subpath(subpath: list[Operation], profile: BrushProfile, config: EngineConfig) -> _Samples:
    move = subpath[0]
    start: Point = (move.x, move.y)  # type: ignore[union-attr]
    refine = not profile.thickness.is_uniform

    # Close becomes an explicit segment back to the start
    segments: list[Operation] = []
    current = start
    closed = False
    for op in subpath[1:]:
        if isinstance(op, Close):
            if distance(current, start) > 1e-9:
                segments.append(LineTo(*start))
            current = start
            closed = True
            break
        if isinstance(op, (LineTo, QuadraticCurveTo, BezierCurveTo)):
            if _is_degenerate(op, current):
                continue
            segments.append(op)
            current = (op.x, op.y)

    samples = _Samples(closed=closed and len(segments) > 1)
    if not segments:
        return samples

    current = start
    samples.points.append(start)
    samples.tangents.append(_segment_sample(segments[0], start, 0.0)[1])
    for seg in segments:
        start_tangent = _segment_sample(seg, current, 0.0)[1]
        last = len(samples) - 1
        if abs(_wrap(start_tangent - samples.tangents[last])) > _JOIN_EPSILON:
            if last == 0:
                samples.tangents[0] = start_tangent
            else:
                samples.joins[last] = start_tangent
        for t in _segment_params(seg, current, refine, config):
            point, tangent = _segment_sample(seg, current, t)
            samples.points.append(point)
            samples.tangents.append(tangent)
        current = (seg.x, seg.y)  # type: ignore[union-attr]

    if samples.closed:
        first_tangent = samples.tangents[0]
        last = len(samples) - 1
        if abs(_wrap(first_tangent - samples.tangents[last])) > _JOIN_EPSILON:
            samples.joins[last] = first_tangent
    return samples


def _wrap(angle: float) -> float:
    """Wrap an angle difference into (-π, π]."""
    return (angle + math.pi) % (2 * math.pi) - math.pi


# ---------------------------------------------------------------------------
# Outline construction
# ---------------------------------------------------------------------------


def _offset(p: Point, angle: float, amount: float) -> Point:
    return (p[0] + math.cos(angle) * amount, p[1] + math.sin(angle) * amount)


def _normalized_t(points: list[Point]) -> list[float]:
    cumulative = [0.0]
    for a, b in zip(points, points[1:]):
        cumulative.append(cumulative[-1] + distance(a, b))
    total = cumulative[-1]
    if total <= 0:
        return [0.0 for _ in points]
    return [c / total for c in cumulative]


def _join_points(
    p: Point,
    a_in: float,
    a_out: float,
    hw_in: float,
    hw_out: float,
    side: int,
    join: BrushJoin,
    config: EngineConfig,
) -> list[Point]:
    """Rail points around a corner at p. side=+1 is the left rail, -1 the right."""
    normal_in = a_in + side * math.pi / 2
    normal_out = a_out + side * math.pi / 2
    p1 = _offset(p, normal_in, hw_in)
    p2 = _offset(p, normal_out, hw_out)
    turn = math.sin(a_out - a_in)
    outer = side * turn < 0
    if not outer or join == BrushJoin.BEVEL:
        return [p1, p2]

    if join == BrushJoin.MITER:
        # Intersect p1 + s*d_in with p2 + u*d_out
        d_in = (math.cos(a_in), math.sin(a_in))
        d_out = (math.cos(a_out), math.sin(a_out))
        denom = d_in[0] * d_out[1] - d_in[1] * d_out[0]
        if abs(denom) < 1e-9:
            return [p1, p2]
        s = ((p2[0] - p1[0]) * d_out[1] - (p2[1] - p1[1]) * d_out[0]) / denom
        miter = (p1[0] + d_in[0] * s, p1[1] + d_in[1] * s)
        if distance(miter, p) > config.miter_limit * max(hw_in, hw_out, 1e-9):
            return [p1, p2]
        return [p1, miter, p2]

    sweep = _wrap(a_out - a_in)
    steps = max(1, math.ceil(abs(sweep) / (math.pi / config.round_segments_per_pi)))
    return [
        _offset(p, normal_in + sweep * k / steps, hw_in + (hw_out - hw_in) * k / steps)
        for k in range(steps + 1)
    ]


def _rails(
    samples: _Samples, base_width: float, profile: BrushProfile, config: EngineConfig
) -> tuple[list[Point], list[Point]]:
    tip = profile.tip
    ts = _normalized_t(samples.points)
    left: list[Point] = []
    right: list[Point] = []
    for i, (p, tangent, t) in enumerate(zip(samples.points, samples.tangents, ts)):
        width = base_width * profile.thickness.multiplier(t)
        hw = tip.effective_width(width, tangent) / 2
        if i in samples.joins:
            out_tangent = samples.joins[i]
            hw_out = tip.effective_width(width, out_tangent) / 2
            left.extend(_join_points(p, tangent, out_tangent, hw, hw_out, 1, profile.join, config))
            right.extend(_join_points(p, tangent, out_tangent, hw, hw_out, -1, profile.join, config))
        else:
            left.append(_offset(p, tangent + math.pi / 2, hw))
            right.append(_offset(p, tangent - math.pi / 2, hw))
    return left, right


def _cap_points(
    start: Point, end: Point, tangent: float, cap: BrushCap, forward: bool, config: EngineConfig
) -> list[Point]:
    """Points leading from start (exclusive) to end (inclusive) around a stroke end."""
    if cap == BrushCap.BUTT:
        return [end]
    half = distance(start, end) / 2
    if cap == BrushCap.SQUARE:
        direction = tangent if forward else tangent + math.pi
        return [_offset(start, direction, half), _offset(end, direction, half), end]
    center = ((start[0] + end[0]) / 2, (start[1] + end[1]) / 2)
    if half < 1e-9:
        return [end]
    begin = math.atan2(start[1] - center[1], start[0] - center[0])
    steps = config.round_segments_per_pi
    points = [_offset(center, begin - math.pi * k / steps, half) for k in range(1, steps)]
    points.append(end)
    return points


def _outline(
    samples: _Samples, base_width: float, profile: BrushProfile, config: EngineConfig
) -> list[Operation]:
    left, right = _rails(samples, base_width, profile, config)

    if samples.closed:
        # Two opposite rings; the band between them has winding ±1.
        # The closing join already produced the start offsets, skip sample 0.
        skip = 1 if (len(samples) - 1) in samples.joins else 0
        ring_left = left[skip:]
        ring_right = right[skip:]
        ops: list[Operation] = [Move(*ring_left[0])]
        ops.extend(LineTo(*p) for p in ring_left[1:])
        ops.append(Close())
        ops.append(Move(*ring_right[-1]))
        ops.extend(LineTo(*p) for p in reversed(ring_right[:-1]))
        ops.append(Close())
        return ops

    end_tangent = samples.tangents[-1]
    start_tangent = samples.tangents[0]
    ops = [Move(*left[0])]
    ops.extend(LineTo(*p) for p in left[1:])
    ops.extend(LineTo(*p) for p in _cap_points(left[-1], right[-1], end_tangent, profile.cap, True, config))
    ops.extend(LineTo(*p) for p in reversed(right[:-1]))
    ops.extend(LineTo(*p) for p in _cap_points(right[0], left[0], start_tangent, profile.cap, False, config))
    ops.append(Close())
    return ops
