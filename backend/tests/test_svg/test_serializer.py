"""Tests for SVG document output."""

from __future__ import annotations

from roughsketch.engine.brush import BrushCap, BrushJoin
from roughsketch.engine.operations import Close, LineTo, Move
from roughsketch.engine.render import Fill, RenderCommand, Stroke
from roughsketch.svg.serializer import serialize_commands

SQUARE_OPS = (Move(0, 0), LineTo(10, 0), LineTo(10, 10), Close())


def test_document_shape():
    svg = serialize_commands([RenderCommand(SQUARE_OPS, Fill("#f00"))], 120, 80)
    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'viewBox="0 0 120 80"' in svg
    assert '<path d="M0 0 L10 0 L10 10 Z" fill="#f00" stroke="none" />' in svg
    assert svg.endswith("</svg>")


def test_stroke_attributes():
    command = RenderCommand(SQUARE_OPS, Stroke("#000", 2.5, 0.4), BrushCap.BUTT, BrushJoin.MITER)
    svg = serialize_commands([command], 10, 10)
    assert 'stroke="#000"' in svg
    assert 'stroke-width="2.5"' in svg
    assert 'stroke-linecap="butt"' in svg
    assert 'stroke-linejoin="miter"' in svg
    assert 'stroke-opacity="0.4"' in svg
    assert 'fill="none"' in svg


def test_clip_and_mask():
    clipped = RenderCommand(SQUARE_OPS, Stroke("#000", 2), clip_ops=SQUARE_OPS)
    masked = RenderCommand(SQUARE_OPS, Stroke("#000", 2), clip_ops=SQUARE_OPS, inverse_clip=True)
    svg = serialize_commands([clipped, masked], 10, 10)
    assert '<clipPath id="rs-clip-0">' in svg
    assert 'clip-path="url(#rs-clip-0)"' in svg
    assert '<mask id="rs-mask-1"' in svg
    assert 'mask="url(#rs-mask-1)"' in svg


def test_empty_commands_skipped():
    svg = serialize_commands([RenderCommand((), Fill("#000"))], 10, 10)
    assert "<path" not in svg
    assert "<defs>" not in svg
