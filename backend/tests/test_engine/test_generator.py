"""Tests for shape generation."""

from __future__ import annotations

import pytest

from roughsketch.engine import shapes
from roughsketch.engine.generator import Generator
from roughsketch.engine.operations import BezierCurveTo, Close, Move, OpSetKind
from roughsketch.engine.options import FillStyle, RenderOptions
from roughsketch.svg.path_data import path_bounds
from tests.conftest import CANVAS, HEART_PATH, RECT, SQUARE, TRIANGLE_PATH


def test_rectangle_default_has_fill_and_stroke(generator):
    drawing = generator.generate(shapes.Rectangle(*RECT))
    assert drawing is not None
    assert len(drawing.sets) == 2
    fill, stroke = drawing.sets
    assert fill.kind == OpSetKind.FILL_SKETCH
    assert stroke.kind == OpSetKind.STROKE_PATH
    assert len(stroke.ops) > 0


def test_rectangle_zero_roughness_exact_bounds(generator, smooth):
    drawing = generator.generate(shapes.Rectangle(*RECT), smooth)
    stroke = drawing.sets[-1]
    assert path_bounds(stroke.ops) == pytest.approx((10.0, 10.0, 110.0, 90.0))


def test_zero_roughness_line_endpoints_exact(generator, smooth):
    drawing = generator.generate(shapes.Line(0, 0, 50, 20), smooth)
    (stroke,) = drawing.sets
    moves = [op for op in stroke.ops if isinstance(op, Move)]
    curves = [op for op in stroke.ops if isinstance(op, BezierCurveTo)]
    assert all((m.x, m.y) == (0, 0) for m in moves)
    assert all((c.x, c.y) == (50, 20) for c in curves)


@pytest.mark.parametrize(
    "descriptor",
    [
        shapes.Line(0, 0, 80, 40),
        shapes.Rectangle(*RECT),
        shapes.RoundedRectangle(10, 10, 120, 80, 12),
        shapes.Ellipse(100, 100, 120, 60),
        shapes.Circle(100, 100, 80),
        shapes.Polygon(tuple(SQUARE)),
        shapes.Arc(100, 100, 120, 80, 0.0, 2.0, closed=True),
        shapes.Curve(((10, 10), (60, 80), (120, 20), (180, 90))),
        shapes.LinearPath(((10, 10), (60, 80), (120, 20)), close=True),
        shapes.SvgPath(HEART_PATH),
        shapes.FullRectangle(),
        shapes.FullCircle(),
    ],
)
def test_generation_is_deterministic(descriptor):
    opts = RenderOptions(fill="#ff0000")
    first = Generator(CANVAS).generate(descriptor, opts)
    second = Generator(CANVAS).generate(descriptor, opts)
    assert first is not None
    assert first == second


def test_explicit_seed_changes_geometry(generator):
    a = generator.generate(shapes.Rectangle(*RECT), RenderOptions(seed=1))
    b = generator.generate(shapes.Rectangle(*RECT), RenderOptions(seed=2))
    assert a.sets[-1].ops != b.sets[-1].ops


@pytest.mark.parametrize(
    "descriptor",
    [
        shapes.Line(0, 0, None, 10),
        shapes.Rectangle(10, 10, None, 20),
        shapes.Circle(None, 10, 20),
        shapes.Arc(0, 0, 10, 10, None, 1.0),
        shapes.Polygon(()),
        shapes.Curve(()),
        shapes.LinearPath(()),
        shapes.SvgPath(""),
        shapes.SvgPath(None),
        shapes.TextPath(""),
    ],
)
def test_missing_parameters_yield_none(generator, descriptor):
    assert generator.generate(descriptor) is None


def test_full_shapes_need_room():
    tiny = Generator((6, 6))
    assert tiny.generate(shapes.FullRectangle()) is None
    assert tiny.generate(shapes.FullCircle()) is None


def test_full_rectangle_inset(smooth):
    drawing = Generator((200, 100)).generate(shapes.FullRectangle(), smooth)
    assert path_bounds(drawing.sets[-1].ops) == pytest.approx((4.0, 4.0, 196.0, 96.0))


def test_degenerate_polygon_has_stroke_only(generator):
    drawing = generator.generate(shapes.Polygon(((0, 0), (10, 10), (20, 20))))
    assert [s.kind for s in drawing.sets] == [OpSetKind.STROKE_PATH]


def test_open_arc_has_no_fill(generator):
    drawing = generator.generate(shapes.Arc(100, 100, 120, 80, 0.0, 2.0))
    assert [s.kind for s in drawing.sets] == [OpSetKind.STROKE_PATH]


def test_solid_ellipse_fill_is_closed_path(generator):
    drawing = generator.generate(
        shapes.Ellipse(100, 100, 80, 40), RenderOptions(fill="#000", fill_style=FillStyle.SOLID)
    )
    fill = drawing.sets[0]
    assert fill.kind == OpSetKind.FILL_SOLID_PATH
    assert isinstance(fill.ops[0], Move)
    assert isinstance(fill.ops[-1], Close)


def test_svg_path_solid_fill_keeps_path(generator):
    drawing = generator.generate(
        shapes.SvgPath(TRIANGLE_PATH), RenderOptions(fill="#000", fill_style=FillStyle.SOLID)
    )
    fill, stroke = drawing.sets
    assert fill.kind == OpSetKind.SVG_FILL_SOLID
    assert fill.ops == ()
    assert fill.path == TRIANGLE_PATH
    assert stroke.path == TRIANGLE_PATH
    assert drawing.is_svg


def test_svg_path_pattern_fill_in_bbox_space(generator):
    drawing = generator.generate(shapes.SvgPath(TRIANGLE_PATH), RenderOptions(fill="#000"))
    fill = drawing.sets[0]
    assert fill.kind == OpSetKind.SVG_FILL_PATTERN
    assert fill.size == pytest.approx((80.0, 70.0))
    assert len(fill.ops) > 0


def test_svg_path_scribble_fill(generator):
    drawing = generator.generate(
        shapes.SvgPath(HEART_PATH), RenderOptions(fill="#000", fill_style=FillStyle.SCRIBBLE)
    )
    fill = drawing.sets[0]
    assert fill.kind == OpSetKind.FILL_SKETCH
    assert len(fill.ops) > 0


def test_text_path_generates_glyph_outline(generator):
    drawing = generator.generate(shapes.TextPath("Hi", font_size=32), RenderOptions(fill="#000"))
    assert drawing is not None
    assert drawing.shape == "text"
    assert drawing.sets[-1].kind == OpSetKind.STROKE_PATH
    assert drawing.sets[-1].path.startswith("M")
