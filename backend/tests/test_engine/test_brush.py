"""Tests for brush profiles."""

from __future__ import annotations

import math

import pytest

from roughsketch.engine.brush import BrushProfile, BrushTip, ThicknessProfile


def test_custom_empty_is_one():
    profile = ThicknessProfile.custom([])
    assert all(profile.multiplier(t) == 1.0 for t in (0.0, 0.3, 0.5, 1.0))


def test_custom_single_sample_is_constant():
    profile = ThicknessProfile.custom([0.7])
    assert all(profile.multiplier(t) == pytest.approx(0.7) for t in (0.0, 0.5, 1.0))


def test_taper_both():
    profile = ThicknessProfile.taper_both(0.25, 0.25)
    assert profile.multiplier(0.0) == pytest.approx(0.0)
    assert profile.multiplier(0.5) == pytest.approx(1.0)
    assert profile.multiplier(1.0) == pytest.approx(0.0)


def test_taper_in_and_out():
    assert ThicknessProfile.taper_in(0.5).multiplier(0.25) == pytest.approx(0.5)
    assert ThicknessProfile.taper_out(0.5).multiplier(0.75) == pytest.approx(0.5)
    assert ThicknessProfile.taper_out(0.5).multiplier(0.25) == 1.0


def test_pressure_interpolates_and_clamps_t():
    profile = ThicknessProfile.pressure([0.0, 1.0])
    assert profile.multiplier(0.5) == pytest.approx(0.5)
    assert profile.multiplier(-1.0) == pytest.approx(0.0)
    assert profile.multiplier(2.0) == pytest.approx(1.0)


def test_roundness_clamped():
    assert BrushTip(roundness=0).roundness == 0.01
    assert BrushTip(roundness=5).roundness == 1.0


def test_effective_width():
    tip = BrushTip.calligraphic()
    assert tip.effective_width(10.0, tip.angle) == pytest.approx(10.0)
    assert tip.effective_width(10.0, tip.angle + math.pi / 2) == pytest.approx(10.0 * tip.roundness)
    assert BrushTip.circular().effective_width(10.0, 1.2) == 10.0


def test_requires_custom_rendering():
    assert not BrushProfile.default().requires_custom_rendering
    assert BrushProfile.calligraphic().requires_custom_rendering
    assert BrushProfile.marker().requires_custom_rendering
    assert BrushProfile(thickness=ThicknessProfile.taper_in(0.2)).requires_custom_rendering
    assert not BrushProfile(tip=BrushTip(roundness=0.5)).requires_custom_rendering
