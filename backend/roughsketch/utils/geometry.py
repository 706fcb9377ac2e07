"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon

Point = tuple[float, float]


def as_array(points: list[Point] | NDArray[np.float64]) -> NDArray[np.float64]:
    """Coerce a point list into an Nx2 float array."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def polygon_area(points: list[Point]) -> float:
    """Unsigned area of the polygon ring (shapely handles self-intersections)."""
    if len(points) < 3:
        return 0.0
    return float(Polygon(points).area)


def polygon_bounds(points: list[Point]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    arr = as_array(points)
    if len(arr) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(arr[:, 0])),
        float(np.min(arr[:, 1])),
        float(np.max(arr[:, 0])),
        float(np.max(arr[:, 1])),
    )


def polygon_centroid(points: list[Point]) -> Point:
    """Area centroid of a polygon; vertex mean when the ring has no area."""
    arr = as_array(points)
    if len(arr) == 0:
        return (0.0, 0.0)
    if len(arr) >= 3:
        poly = Polygon(arr)
        if poly.area > 1e-9:
            c = poly.centroid
            return (float(c.x), float(c.y))
    return (float(np.mean(arr[:, 0])), float(np.mean(arr[:, 1])))


def rotate_points(
    points: list[Point] | NDArray[np.float64],
    center: Point,
    degrees: float,
) -> NDArray[np.float64]:
    """Rotate points about center by the given angle (degrees, screen orientation)."""
    arr = as_array(points)
    if len(arr) == 0:
        return arr
    rad = math.radians(degrees)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    cx, cy = center
    dx = arr[:, 0] - cx
    dy = arr[:, 1] - cy
    out = np.empty_like(arr)
    out[:, 0] = cx + dx * cos_a - dy * sin_a
    out[:, 1] = cy + dx * sin_a + dy * cos_a
    return out


def rotate_lines(
    lines: list[tuple[Point, Point]],
    center: Point,
    degrees: float,
) -> list[tuple[Point, Point]]:
    """Rotate each (start, end) pair about center."""
    if not lines:
        return []
    flat = [p for line in lines for p in line]
    rotated = rotate_points(flat, center, degrees)
    return [
        ((float(rotated[i, 0]), float(rotated[i, 1])), (float(rotated[i + 1, 0]), float(rotated[i + 1, 1])))
        for i in range(0, len(rotated), 2)
    ]


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def lerp(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def segment_intersection(p1: Point, p2: Point, p3: Point, p4: Point) -> Point | None:
    """Intersection of segments p1-p2 and p3-p4, or None when parallel or disjoint."""
    d1x, d1y = p2[0] - p1[0], p2[1] - p1[1]
    d2x, d2y = p4[0] - p3[0], p4[1] - p3[1]
    cross = d1x * d2y - d1y * d2x
    if abs(cross) < 1e-10:
        return None
    d3x, d3y = p1[0] - p3[0], p1[1] - p3[1]
    t1 = (d2x * d3y - d2y * d3x) / cross
    t2 = (d1x * d3y - d1y * d3x) / cross
    if t1 < 0 or t1 > 1 or t2 < 0 or t2 > 1:
        return None
    return (p1[0] + t1 * d1x, p1[1] + t1 * d1y)


def quadratic_point(p0: Point, c: Point, p1: Point, t: float) -> Point:
    mt = 1 - t
    return (
        mt * mt * p0[0] + 2 * mt * t * c[0] + t * t * p1[0],
        mt * mt * p0[1] + 2 * mt * t * c[1] + t * t * p1[1],
    )


def quadratic_tangent(p0: Point, c: Point, p1: Point, t: float) -> float:
    """Tangent angle (radians) of a quadratic bézier at t."""
    mt = 1 - t
    dx = 2 * mt * (c[0] - p0[0]) + 2 * t * (p1[0] - c[0])
    dy = 2 * mt * (c[1] - p0[1]) + 2 * t * (p1[1] - c[1])
    if abs(dx) < 1e-12 and abs(dy) < 1e-12:
        return math.atan2(p1[1] - p0[1], p1[0] - p0[0])
    return math.atan2(dy, dx)


def cubic_point(p0: Point, c1: Point, c2: Point, p1: Point, t: float) -> Point:
    mt = 1 - t
    a = mt * mt * mt
    b = 3 * mt * mt * t
    c = 3 * mt * t * t
    d = t * t * t
    return (
        a * p0[0] + b * c1[0] + c * c2[0] + d * p1[0],
        a * p0[1] + b * c1[1] + c * c2[1] + d * p1[1],
    )


def cubic_tangent(p0: Point, c1: Point, c2: Point, p1: Point, t: float) -> float:
    """Tangent angle (radians) of a cubic bézier at t."""
    mt = 1 - t
    dx = 3 * mt * mt * (c1[0] - p0[0]) + 6 * mt * t * (c2[0] - c1[0]) + 3 * t * t * (p1[0] - c2[0])
    dy = 3 * mt * mt * (c1[1] - p0[1]) + 6 * mt * t * (c2[1] - c1[1]) + 3 * t * t * (p1[1] - c2[1])
    if abs(dx) < 1e-12 and abs(dy) < 1e-12:
        return math.atan2(p1[1] - p0[1], p1[0] - p0[0])
    return math.atan2(dy, dx)


def point_line_distance(p: Point, a: Point, b: Point) -> float:
    """Perpendicular distance from p to the infinite line through a and b."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    length = math.hypot(dx, dy)
    if length < 1e-12:
        return distance(p, a)
    return abs(dy * p[0] - dx * p[1] + b[0] * a[1] - b[1] * a[0]) / length


def ellipse_perimeter(rx: float, ry: float) -> float:
    """Ramanujan's second approximation."""
    a, b = abs(rx), abs(ry)
    if a + b == 0:
        return 0.0
    h = ((a - b) ** 2) / ((a + b) ** 2)
    return math.pi * (a + b) * (1 + 3 * h / (10 + math.sqrt(4 - 3 * h)))
