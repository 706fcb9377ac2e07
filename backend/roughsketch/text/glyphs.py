"""Text → glyph outline commands via matplotlib's TextPath.

Glyph outlines come back in font units with y pointing up; they are
flipped into screen space with the baseline sitting ``ascent`` below the
top of the text box.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from matplotlib.font_manager import FontProperties
from matplotlib.path import Path as MplPath
from matplotlib.textpath import TextPath, TextToPath

from roughsketch.engine.operations import (
    BezierCurveTo,
    Close,
    LineTo,
    Move,
    Operation,
    QuadraticCurveTo,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlyphPath:
    commands: tuple[Operation, ...]
    typographic_size: tuple[float, float]
    ascent: float
    ink_origin: tuple[float, float]


def _to_commands(path: MplPath, ascent: float) -> list[Operation]:
    ops: list[Operation] = []

    def flip(x: float, y: float) -> tuple[float, float]:
        return (float(x), float(ascent - y))

    for vertices, code in path.iter_segments(simplify=False, curves=True):
        if code == MplPath.MOVETO:
            ops.append(Move(*flip(*vertices[:2])))
        elif code == MplPath.LINETO:
            ops.append(LineTo(*flip(*vertices[:2])))
        elif code == MplPath.CURVE3:
            ops.append(QuadraticCurveTo(*flip(*vertices[0:2]), *flip(*vertices[2:4])))
        elif code == MplPath.CURVE4:
            ops.append(BezierCurveTo(*flip(*vertices[0:2]), *flip(*vertices[2:4]), *flip(*vertices[4:6])))
        elif code == MplPath.CLOSEPOLY:
            ops.append(Close())
    return ops


def text_to_path(text: str, font_family: str = "DejaVu Sans", font_size: float = 24.0) -> GlyphPath | None:
    """Outline commands and metrics for text, or None when nothing can be drawn."""
    if not text or not text.strip() or font_size <= 0:
        return None
    try:
        prop = FontProperties(family=font_family, size=font_size)
        path = TextPath((0, 0), text, size=font_size, prop=prop)
        width, height, descent = TextToPath().get_text_width_height_descent(text, prop, ismath=False)
    except Exception as e:
        logger.warning("Glyph lookup failed for %r in %s: %s", text, font_family, e)
        return None

    ascent = float(height - descent)
    commands = _to_commands(path, ascent)
    if not commands:
        return None
    xs = [p[0] for op in commands for p in op.points()]
    ys = [p[1] for op in commands for p in op.points()]
    ink_w = max(xs) - min(xs)
    return GlyphPath(
        commands=tuple(commands),
        typographic_size=(float(ink_w), float(height)),
        ascent=ascent,
        ink_origin=(float(min(xs)), float(min(ys))),
    )
