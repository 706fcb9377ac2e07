"""Adaptive bézier flattening.

Curves are split at t=0.5 until their control points sit within
``tolerance`` of the chord, so nearly-straight curves yield one or two
pieces and tight bends yield many. Each function returns the curve
parameters of the emitted vertices in increasing order, excluding t=0 and
including t=1.
"""

from __future__ import annotations

from roughsketch.utils.geometry import Point, lerp, point_line_distance


def flatten_cubic(
    p0: Point,
    c1: Point,
    c2: Point,
    p1: Point,
    tolerance: float = 0.25,
    max_depth: int = 10,
) -> list[float]:
    params: list[float] = []
    _subdivide_cubic(p0, c1, c2, p1, 0.0, 1.0, tolerance, max_depth, params)
    return params


def _subdivide_cubic(
    p0: Point,
    c1: Point,
    c2: Point,
    p1: Point,
    t0: float,
    t1: float,
    tolerance: float,
    depth: int,
    out: list[float],
) -> None:
    flatness = max(point_line_distance(c1, p0, p1), point_line_distance(c2, p0, p1))
    if depth <= 0 or flatness <= tolerance:
        out.append(t1)
        return
    # de Casteljau split at the midpoint
    ab = lerp(p0, c1, 0.5)
    bc = lerp(c1, c2, 0.5)
    cd = lerp(c2, p1, 0.5)
    abc = lerp(ab, bc, 0.5)
    bcd = lerp(bc, cd, 0.5)
    mid = lerp(abc, bcd, 0.5)
    tm = (t0 + t1) / 2
    _subdivide_cubic(p0, ab, abc, mid, t0, tm, tolerance, depth - 1, out)
    _subdivide_cubic(mid, bcd, cd, p1, tm, t1, tolerance, depth - 1, out)


def flatten_quadratic(
    p0: Point,
    c: Point,
    p1: Point,
    tolerance: float = 0.25,
    max_depth: int = 10,
) -> list[float]:
    params: list[float] = []
    _subdivide_quadratic(p0, c, p1, 0.0, 1.0, tolerance, max_depth, params)
    return params


def _subdivide_quadratic(
    p0: Point,
    c: Point,
    p1: Point,
    t0: float,
    t1: float,
    tolerance: float,
    depth: int,
    out: list[float],
) -> None:
    # The curve strays at most half as far from the chord as its control point
    flatness = point_line_distance(c, p0, p1) / 2
    if depth <= 0 or flatness <= tolerance:
        out.append(t1)
        return
    ab = lerp(p0, c, 0.5)
    bc = lerp(c, p1, 0.5)
    mid = lerp(ab, bc, 0.5)
    tm = (t0 + t1) / 2
    _subdivide_quadratic(p0, ab, mid, t0, tm, tolerance, depth - 1, out)
    _subdivide_quadratic(mid, bc, p1, tm, t1, tolerance, depth - 1, out)
