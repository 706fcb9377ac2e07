"""Shared test fixtures."""

from __future__ import annotations

import pytest

from roughsketch.engine.config import EngineConfig
from roughsketch.engine.generator import Engine, Generator
from roughsketch.engine.options import RenderOptions
from roughsketch.engine.randomness import Randomizer


CANVAS = (300.0, 300.0)

# x, y, width, height
RECT = (10.0, 10.0, 100.0, 80.0)

SQUARE = [(0.0, 0.0), (100.0, 0.0), (100.0, 100.0), (0.0, 100.0)]

# Concave: a U shape, so one scan line crosses the outline four times
U_SHAPE = [
    (0.0, 0.0), (30.0, 0.0), (30.0, 60.0), (70.0, 60.0),
    (70.0, 0.0), (100.0, 0.0), (100.0, 100.0), (0.0, 100.0),
]

TRIANGLE_PATH = "M10 10 L90 10 L50 80 Z"

HEART_PATH = "M10 30 A20 20 0 0 1 50 30 A20 20 0 0 1 90 30 Q90 60 50 90 Q10 60 10 30 Z"

# Two closed subpaths
RINGS_PATH = "M0 0 L40 0 L40 40 L0 40 Z M60 0 L100 0 L100 40 L60 40 Z"

WAVE_PATH = "M10 50 C30 10 70 90 90 50"


@pytest.fixture
def options() -> RenderOptions:
    return RenderOptions()


@pytest.fixture
def smooth() -> RenderOptions:
    """No wobble: geometry is the exact shape."""
    return RenderOptions(roughness=0)


@pytest.fixture
def rng() -> Randomizer:
    return Randomizer(42)


@pytest.fixture
def engine() -> Engine:
    return Engine(EngineConfig())


@pytest.fixture
def generator() -> Generator:
    return Generator(CANVAS)
