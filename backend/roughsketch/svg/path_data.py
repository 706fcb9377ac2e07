"""SVG path data ⇄ operation lists, a facade over svgpathtools.

Parsing yields absolute Move/LineTo/QuadraticCurveTo/BezierCurveTo/Close
commands. Elliptical arcs are approximated by cubic béziers.
"""

from __future__ import annotations

import logging
import math
import re

import numpy as np
from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier, parse_path

from roughsketch.engine.operations import (
    BezierCurveTo,
    Close,
    LineTo,
    Move,
    Operation,
    QuadraticCurveTo,
)

logger = logging.getLogger(__name__)

# Arcs are split into pieces of at most this many degrees before conversion
_ARC_PIECE_DEGREES = 90.0

# Subpath boundaries: moveto and closepath letters, everything else as runs
_SUBPATH_TOKENS = re.compile(r"[MmZz]|[^MmZz]+")


def _xy(z: complex) -> tuple[float, float]:
    return (float(z.real), float(z.imag))


def _arc_to_cubics(arc: Arc) -> list[BezierCurveTo]:
    """Hermite-fit cubics through points and derivatives sampled along the arc."""
    pieces = max(1, math.ceil(abs(arc.delta) / _ARC_PIECE_DEGREES))
    cubics: list[BezierCurveTo] = []
    for i in range(pieces):
        t0, t1 = i / pieces, (i + 1) / pieces
        dt = t1 - t0
        p0, p1 = arc.point(t0), arc.point(t1)
        c1 = p0 + arc.derivative(t0) * dt / 3
        c2 = p1 - arc.derivative(t1) * dt / 3
        cubics.append(BezierCurveTo(*_xy(c1), *_xy(c2), *_xy(p1)))
    return cubics


def _split_subpaths(d: str) -> list[tuple[str, bool]]:
    """Split ``d`` at every moveto and after every closepath: (text, closed) per subpath."""
    subpaths: list[tuple[str, bool]] = []
    current = ""
    for token in _SUBPATH_TOKENS.findall(d):
        if token in ("M", "m"):
            if current.strip():
                subpaths.append((current, False))
            current = token
        elif token in ("Z", "z"):
            subpaths.append((current + token, True))
            current = ""
        else:
            current += token
    if current.strip():
        subpaths.append((current, False))
    return subpaths


def parse_path_data(d: str) -> list[Operation]:
    """Absolute commands for an SVG ``d`` string. Malformed data yields [].

    Every subpath starts with a Move; subpaths ended by Z/z end with a Close.
    """
    if not d or not d.strip():
        return []

    ops: list[Operation] = []
    position = 0j
    for text, closed in _split_subpaths(d):
        if text.lstrip()[0] not in "Mm":
            # Drawing after Z resumes at the subpath start
            text = f"M{position.real!r},{position.imag!r} {text}"
        try:
            # A relative m resolves against the current point
            path = parse_path(text, current_pos=position)
        except Exception as e:
            logger.warning("Failed to parse path data: %s", e)
            return []
        if len(path) == 0:
            continue

        start = path[0].start
        ops.append(Move(*_xy(start)))
        for seg in path:
            if isinstance(seg, Line):
                ops.append(LineTo(*_xy(seg.end)))
            elif isinstance(seg, QuadraticBezier):
                ops.append(QuadraticCurveTo(*_xy(seg.control), *_xy(seg.end)))
            elif isinstance(seg, CubicBezier):
                ops.append(BezierCurveTo(*_xy(seg.control1), *_xy(seg.control2), *_xy(seg.end)))
            elif isinstance(seg, Arc):
                ops.extend(_arc_to_cubics(seg))
        if closed:
            ops.append(Close())
            position = start
        else:
            position = path[-1].end
    return ops


def _fmt(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def operations_to_path_data(ops: list[Operation] | tuple[Operation, ...]) -> str:
    """Serialize operations back to absolute SVG path data."""
    parts: list[str] = []
    for op in ops:
        if isinstance(op, Move):
            parts.append(f"M{_fmt(op.x)} {_fmt(op.y)}")
        elif isinstance(op, LineTo):
            parts.append(f"L{_fmt(op.x)} {_fmt(op.y)}")
        elif isinstance(op, QuadraticCurveTo):
            parts.append(f"Q{_fmt(op.cx)} {_fmt(op.cy)} {_fmt(op.x)} {_fmt(op.y)}")
        elif isinstance(op, BezierCurveTo):
            parts.append(
                f"C{_fmt(op.c1x)} {_fmt(op.c1y)} {_fmt(op.c2x)} {_fmt(op.c2y)} {_fmt(op.x)} {_fmt(op.y)}"
            )
        elif isinstance(op, Close):
            parts.append("Z")
    return " ".join(parts)


def path_bounds(ops: list[Operation] | tuple[Operation, ...]) -> tuple[float, float, float, float]:
    """(xmin, ymin, xmax, ymax) over every end and control point."""
    points = [p for op in ops for p in op.points()]
    if not points:
        return (0.0, 0.0, 0.0, 0.0)
    arr = np.asarray(points, dtype=np.float64)
    return (
        float(np.min(arr[:, 0])),
        float(np.min(arr[:, 1])),
        float(np.max(arr[:, 0])),
        float(np.max(arr[:, 1])),
    )
