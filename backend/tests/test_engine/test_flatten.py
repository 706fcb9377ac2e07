"""Tests for adaptive bézier flattening."""

from __future__ import annotations

from roughsketch.engine.flatten import flatten_cubic, flatten_quadratic


def test_straight_cubic_is_one_piece():
    assert flatten_cubic((0, 0), (10, 0), (20, 0), (30, 0)) == [1.0]


def test_straight_quadratic_is_one_piece():
    assert flatten_quadratic((0, 0), (5, 5), (10, 10)) == [1.0]


def test_tight_curve_subdivides():
    params = flatten_cubic((0, 0), (0, 100), (100, 100), (100, 0), tolerance=0.25)
    assert len(params) > 8
    assert params == sorted(params)
    assert params[-1] == 1.0
    assert 0.0 not in params


def test_tolerance_controls_density():
    coarse = flatten_quadratic((0, 0), (50, 100), (100, 0), tolerance=5.0)
    fine = flatten_quadratic((0, 0), (50, 100), (100, 0), tolerance=0.1)
    assert len(fine) > len(coarse)


def test_depth_is_bounded():
    params = flatten_cubic((0, 0), (0, 1000), (1000, 1000), (1000, 0), tolerance=0.0001, max_depth=3)
    assert len(params) == 8
