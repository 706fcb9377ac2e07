"""Tests for drawing → render command mapping."""

from __future__ import annotations

import pytest

from roughsketch.engine import shapes
from roughsketch.engine.brush import BrushCap, BrushJoin, BrushProfile
from roughsketch.engine.generator import Engine
from roughsketch.engine.operations import Close, LineTo, Move
from roughsketch.engine.options import FillStrokeAlignment, FillStyle, RenderOptions
from roughsketch.engine.render import Fill, Stroke, build_commands
from tests.conftest import CANVAS, RECT, TRIANGLE_PATH


def _commands(descriptor, **kw):
    drawing = Engine().generate(descriptor, RenderOptions(**kw), CANVAS)
    return build_commands(drawing)


def test_transparent_fill_is_skipped():
    commands = _commands(shapes.Rectangle(*RECT))
    assert len(commands) == 1
    assert commands[0].style == Stroke("#000000", 1.0, 1.0)


def test_fill_sketch_strokes_with_fill_weight():
    fill, stroke = _commands(shapes.Rectangle(*RECT), fill="#ff0000", stroke_width=4)
    assert fill.style == Stroke("#ff0000", 2.0, 1.0)
    assert stroke.style.width == 4


def test_no_stroke_color_no_stroke_command():
    commands = _commands(shapes.Rectangle(*RECT), fill="#ff0000", stroke=None)
    assert len(commands) == 1
    assert commands[0].style.color == "#ff0000"


def test_solid_fill_is_fill():
    fill, _ = _commands(shapes.Rectangle(*RECT), fill="#00f", fill_style=FillStyle.SOLID, fill_opacity=0.5)
    assert fill.style == Fill("#00f", 0.5)


def test_custom_brush_stroke_becomes_fill():
    (stroke,) = _commands(shapes.Line(0, 0, 100, 50), brush_profile=BrushProfile.calligraphic())
    assert isinstance(stroke.style, Fill)
    assert all(isinstance(op, (Move, LineTo, Close)) for op in stroke.ops)


def test_cap_and_join_from_profile():
    profile = BrushProfile(cap=BrushCap.SQUARE, join=BrushJoin.BEVEL)
    (stroke,) = _commands(shapes.Line(0, 0, 100, 50), brush_profile=profile)
    assert (stroke.cap, stroke.join) == (BrushCap.SQUARE, BrushJoin.BEVEL)


def test_scribble_brush_stroke_becomes_fill():
    fill, _ = _commands(
        shapes.Rectangle(*RECT),
        fill="#0a0",
        fill_style=FillStyle.SCRIBBLE,
        scribble_use_brush_stroke=True,
        fill_weight=3,
    )
    assert isinstance(fill.style, Fill)


def test_svg_stroke_width_override():
    _, stroke = _commands(shapes.SvgPath(TRIANGLE_PATH), fill="#000", svg_stroke_width=6, stroke_width=1)
    assert stroke.style.width == 6


def test_svg_solid_fill_uses_parsed_outline():
    fill, _ = _commands(shapes.SvgPath(TRIANGLE_PATH), fill="#000", fill_style=FillStyle.SOLID)
    assert isinstance(fill.style, Fill)
    assert fill.ops[0] == Move(10, 10)


@pytest.mark.parametrize(
    "alignment, width, clipped, inverse",
    [
        (FillStrokeAlignment.CENTER, 1.5, False, False),
        (FillStrokeAlignment.INSIDE, 3.0, True, False),
        (FillStrokeAlignment.OUTSIDE, 3.0, True, True),
    ],
)
def test_svg_pattern_fill_alignment(alignment, width, clipped, inverse):
    fill, _ = _commands(
        shapes.SvgPath(TRIANGLE_PATH),
        fill="#000",
        svg_fill_weight=1.5,
        svg_fill_stroke_alignment=alignment,
    )
    assert fill.style.width == width
    assert (fill.clip_ops is not None) == clipped
    assert fill.inverse_clip == inverse
