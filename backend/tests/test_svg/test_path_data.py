"""Tests for SVG path data parsing and export."""

from __future__ import annotations

import pytest

from roughsketch.engine.brush import BrushProfile
from roughsketch.engine.operations import BezierCurveTo, Close, LineTo, Move, QuadraticCurveTo
from roughsketch.engine.stroke_to_fill import stroke_to_fill
from roughsketch.svg.path_data import operations_to_path_data, parse_path_data, path_bounds
from tests.conftest import HEART_PATH, RINGS_PATH, TRIANGLE_PATH, WAVE_PATH


def test_parse_closed_triangle():
    ops = parse_path_data(TRIANGLE_PATH)
    assert ops[0] == Move(10, 10)
    assert ops[1] == LineTo(90, 10)
    assert ops[2] == LineTo(50, 80)
    assert isinstance(ops[-1], Close)


def test_relative_commands_become_absolute():
    ops = parse_path_data("m10 10 l20 0 l0 20 z")
    assert ops[:3] == [Move(10, 10), LineTo(30, 10), LineTo(30, 30)]


def test_parse_curves():
    ops = parse_path_data(WAVE_PATH + " Q100 0 110 50")
    assert isinstance(ops[1], BezierCurveTo)
    assert (ops[1].c1x, ops[1].c1y) == (30, 10)
    assert isinstance(ops[2], QuadraticCurveTo)
    assert not any(isinstance(op, Close) for op in ops)


def test_arcs_become_cubics():
    ops = parse_path_data(HEART_PATH)
    assert all(isinstance(op, (Move, LineTo, QuadraticCurveTo, BezierCurveTo, Close)) for op in ops)
    cubics = [op for op in ops if isinstance(op, BezierCurveTo)]
    assert len(cubics) >= 4
    # First arc: semicircle from (10, 30) to (50, 30) bulging upward
    assert (cubics[1].x, cubics[1].y) == pytest.approx((50.0, 30.0), abs=1e-6)
    _, ymin, _, _ = path_bounds(ops)
    assert ymin < 30


def test_each_subpath_starts_with_move():
    ops = parse_path_data(RINGS_PATH)
    assert sum(isinstance(op, Move) for op in ops) == 2
    assert sum(isinstance(op, Close) for op in ops) == 2


@pytest.mark.parametrize("d", ["", "   ", "M 10"])
def test_malformed_data_is_empty(d):
    assert parse_path_data(d) == []


def test_export_round_trips_shape():
    ops = [Move(0, 0), LineTo(10.5, 0), QuadraticCurveTo(12, 3, 10, 6), BezierCurveTo(8, 9, 2, 9, 0, 6), Close()]
    d = operations_to_path_data(ops)
    assert d == "M0 0 L10.5 0 Q12 3 10 6 C8 9 2 9 0 6 Z"
    assert parse_path_data(d)[:4] == ops[:4]


def test_export_rounds_to_two_places():
    assert operations_to_path_data([Move(1.23456, -0.001)]) == "M1.23 0"


def test_bounds():
    assert path_bounds(parse_path_data(TRIANGLE_PATH)) == (10.0, 10.0, 90.0, 80.0)
    assert path_bounds([]) == (0.0, 0.0, 0.0, 0.0)


def test_subpath_restarting_where_previous_closed():
    ops = parse_path_data("M0 0 L10 0 L10 10 Z M0 0 L-10 0 L-10 -10 Z")
    assert sum(isinstance(op, Move) for op in ops) == 2
    assert sum(isinstance(op, Close) for op in ops) == 2
    second = ops.index(Move(0, 0), 1)
    assert isinstance(ops[second - 1], Close)
    assert ops[second + 1] == LineTo(-10, 0)


def test_relative_move_after_close_starts_from_subpath_start():
    ops = parse_path_data("M10 10 l10 0 l0 10 z m5 5 l1 0")
    moves = [op for op in ops if isinstance(op, Move)]
    assert moves == [Move(10, 10), Move(15, 15)]
    assert ops[-1] == LineTo(16, 15)


def test_drawing_after_close_without_move_starts_new_subpath():
    ops = parse_path_data("M0 0 L10 0 L10 10 Z L0 10")
    assert [op for op in ops if isinstance(op, Move)] == [Move(0, 0), Move(0, 0)]
    assert ops[-1] == LineTo(0, 10)


def test_brush_outline_keeps_both_closed_subpaths():
    ops = parse_path_data("M0 0 L10 0 L10 10 Z M0 0 L-10 0 L-10 -10 Z")
    outline = stroke_to_fill(ops, 2.0, BrushProfile.calligraphic())
    assert sum(isinstance(op, Move) for op in outline) >= 2
