"""Tests for hachure scan lines and the fillers built on them."""

from __future__ import annotations

import pytest

from roughsketch.engine.fillers.base import hachure_gap, hachure_lines, pie_polygon
from roughsketch.engine.fillers.cross_hatch import CrossHatchFiller
from roughsketch.engine.fillers.hachure import HachureFiller
from roughsketch.engine.fillers.zigzag import ZigzagFiller
from roughsketch.engine.operations import OpSetKind
from roughsketch.engine.options import RenderOptions
from roughsketch.engine.randomness import Randomizer
from tests.conftest import SQUARE, U_SHAPE


def test_gap_is_spacing_times_weight():
    assert hachure_gap(RenderOptions()) == 4.0
    assert hachure_gap(RenderOptions(fill_weight=2, fill_spacing=3)) == 6.0
    assert hachure_gap(RenderOptions(fill_spacing=0)) == 0.1


def test_horizontal_scan_of_square():
    lines = hachure_lines(SQUARE, RenderOptions(fill_angle=0))
    assert len(lines) == 25
    (x1, y1), (x2, y2) = lines[0]
    assert (x1, x2) == pytest.approx((0.0, 100.0))
    assert y1 == pytest.approx(2.0)
    assert y2 == pytest.approx(2.0)


def test_concave_polygon_pairs_even_odd():
    lines = hachure_lines(U_SHAPE, RenderOptions(fill_angle=0))
    first_row = [line for line in lines if line[0][1] == pytest.approx(2.0)]
    xs = sorted((round(a[0], 6), round(b[0], 6)) for a, b in first_row)
    assert xs == [(0.0, 30.0), (70.0, 100.0)]
    assert len(lines) == 40


def test_rotated_lines_stay_inside():
    for (x1, y1), (x2, y2) in hachure_lines(SQUARE, RenderOptions(fill_angle=-41)):
        for x, y in ((x1, y1), (x2, y2)):
            assert -1e-6 <= x <= 100 + 1e-6
            assert -1e-6 <= y <= 100 + 1e-6


def test_spacing_pattern_cycles():
    plain = hachure_lines(SQUARE, RenderOptions(fill_angle=0))
    patterned = hachure_lines(SQUARE, RenderOptions(fill_angle=0, fill_spacing_pattern=(1.0, 2.0)))
    ys = [line[0][1] for line in patterned]
    assert ys[:4] == pytest.approx([2.0, 6.0, 14.0, 18.0])
    assert len(patterned) < len(plain)


@pytest.mark.parametrize("points", [[], [(0, 0), (1, 1)], [(0, 0), (5, 5), (10, 10)]])
def test_degenerate_polygon_no_lines(points):
    assert hachure_lines(points, RenderOptions()) == []
    assert HachureFiller().fill_polygon(points, RenderOptions(), Randomizer(1)) is None


def test_hachure_set_is_sketch():
    fill = HachureFiller().fill_polygon(SQUARE, RenderOptions(fill_angle=0), Randomizer(1))
    assert fill.kind == OpSetKind.FILL_SKETCH
    # Two passes of Move + curve per line
    assert len(fill.ops) == 25 * 4


def test_cross_hatch_has_more_ops_than_hachure():
    opts = RenderOptions()
    hachure = HachureFiller().fill_polygon(SQUARE, opts, Randomizer(1))
    cross = CrossHatchFiller().fill_polygon(SQUARE, opts, Randomizer(1))
    assert len(cross.ops) > len(hachure.ops)


def test_zigzag_connects_lines():
    opts = RenderOptions(fill_angle=0)
    zigzag = ZigzagFiller().fill_polygon(SQUARE, opts, Randomizer(1))
    assert len(zigzag.ops) == 25 * 4 + 24 * 4


def test_ellipse_fill_scans_edge_polygon():
    fill = HachureFiller().fill_ellipse(50, 50, 40, 20, RenderOptions(roughness=0), Randomizer(1))
    assert fill is not None
    for op in fill.ops:
        x, y = op.points()[0]
        assert ((x - 50) / 40) ** 2 + ((y - 50) / 20) ** 2 <= 1.0 + 1e-6


def test_ellipse_without_radius_is_none():
    assert HachureFiller().fill_ellipse(50, 50, 0, 20, RenderOptions(), Randomizer(1)) is None


def test_pie_polygon():
    points = pie_polygon(0, 0, 10, 10, 0.0, 1.0, RenderOptions(curve_step_count=4))
    assert points[0] == (0, 0)
    assert points[1] == pytest.approx((10.0, 0.0))
    assert len(points) >= 6
