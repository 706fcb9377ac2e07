"""Tests for text → glyph outlines."""

from __future__ import annotations

import pytest

from roughsketch.engine.operations import Close, Move
from roughsketch.text.glyphs import text_to_path


def test_glyph_outline_in_screen_space():
    glyphs = text_to_path("A", font_size=40)
    assert glyphs is not None
    assert isinstance(glyphs.commands[0], Move)
    assert any(isinstance(op, Close) for op in glyphs.commands)
    width, height = glyphs.typographic_size
    assert width > 0 and height > 0
    assert glyphs.ascent > 0
    # y is flipped: the ink sits between the top of the box and the baseline
    ys = [p[1] for op in glyphs.commands for p in op.points()]
    assert min(ys) >= -1.0
    assert max(ys) == pytest.approx(glyphs.ascent, abs=1.0)


def test_size_scales_outline():
    small = text_to_path("Hi", font_size=12)
    large = text_to_path("Hi", font_size=48)
    assert large.typographic_size[0] > small.typographic_size[0] * 3


@pytest.mark.parametrize("text, size", [("", 24), ("   ", 24), ("A", 0)])
def test_nothing_to_draw(text, size):
    assert text_to_path(text, font_size=size) is None
