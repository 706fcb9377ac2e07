"""Precomputed animation frames.

Each animation step nudges every point of every render command by a small
deterministic offset. Offsets for all steps are computed up front as
numpy arrays; a frame is rebuilt from them on lookup.
"""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field, replace
from typing import Iterator

import numpy as np

from roughsketch.engine.operations import Operation, rebuild
from roughsketch.engine.render import RenderCommand

logger = logging.getLogger(__name__)

_MASK64 = (1 << 64) - 1
_STEP_MULTIPLIER = 0x9E3779B97F4A7C15
_INDEX_MULTIPLIER = 0x517CC1B727220A95
# y offsets hash a shifted index so x and y never share a value
_Y_INDEX_SHIFT = 1000
_MIN_MAGNITUDE = 10.0


class AnimationSpeed(str, enum.Enum):
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"

    @property
    def duration(self) -> float:
        """Seconds between steps."""
        return {"slow": 0.6, "medium": 0.3, "fast": 0.1}[self.value]


class AnimationVariance(str, enum.Enum):
    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def factor(self) -> float:
        return {"very_low": 0.005, "low": 0.01, "medium": 0.05, "high": 0.10}[self.value]


@dataclass(frozen=True)
class AnimationConfig:
    steps: int = 4
    speed: AnimationSpeed = AnimationSpeed.MEDIUM
    variance: AnimationVariance = AnimationVariance.MEDIUM

    def __post_init__(self) -> None:
        # A loop needs at least two states
        object.__setattr__(self, "steps", max(2, int(self.steps)))


def step_seeds(base_seed: int, steps: int) -> list[int]:
    return [(base_seed + i * _STEP_MULTIPLIER) & _MASK64 for i in range(steps)]


def _unit(seed: int, index: int) -> float:
    """Deterministic value in [-1, 1) for (seed, index)."""
    h = (seed + index * _INDEX_MULTIPLIER) & _MASK64
    return (h % 2_000_000) / 1_000_000.0 - 1.0


class PathVarianceGenerator:
    """Seeded per-point jitter for one AnimationConfig."""

    def __init__(self, config: AnimationConfig, base_seed: int = 0) -> None:
        self.variance = config.variance.factor
        self.seeds = step_seeds(base_seed & _MASK64, config.steps)

    @property
    def steps(self) -> int:
        return len(self.seeds)

    def compute_offset(self, point: tuple[float, float], step: int, index: int) -> tuple[float, float]:
        seed = self.seeds[step % len(self.seeds)]
        x, y = point
        scale = max(abs(x), abs(y), _MIN_MAGNITUDE) * self.variance
        return (_unit(seed, index) * scale, _unit(seed, index + _Y_INDEX_SHIFT) * scale)

    def apply_variance(self, point: tuple[float, float], step: int, index: int) -> tuple[float, float]:
        dx, dy = self.compute_offset(point, step, index)
        return (point[0] + dx, point[1] + dy)


def vary_ops(ops: tuple[Operation, ...], generator: PathVarianceGenerator, step: int) -> tuple[Operation, ...]:
    """ops with every point displaced for the given step. Close carries no points and keeps its place."""
    varied: list[Operation] = []
    index = 0
    for op in ops:
        points = op.points()
        if not points:
            varied.append(op)
            continue
        moved = [generator.apply_variance(p, step, index + k) for k, p in enumerate(points)]
        varied.append(rebuild(op, moved))
        index += len(points)
    return tuple(varied)


@dataclass(frozen=True)
class PrecomputedPath:
    """Base points of a path plus one offset array per step.

    ``base`` has shape (n, 2); ``offsets`` has shape (steps, n, 2).
    """

    ops: tuple[Operation, ...]
    base: np.ndarray
    offsets: np.ndarray

    @property
    def steps(self) -> int:
        return int(self.offsets.shape[0])

    def ops_for_step(self, step: int) -> tuple[Operation, ...]:
        if self.base.shape[0] == 0:
            return self.ops
        points = self.base + self.offsets[step % self.steps]
        rebuilt: list[Operation] = []
        i = 0
        for op in self.ops:
            n = len(op.points())
            if n == 0:
                rebuilt.append(op)
                continue
            rebuilt.append(rebuild(op, [(float(x), float(y)) for x, y in points[i:i + n]]))
            i += n
        return tuple(rebuilt)


def precompute_all_steps(ops: tuple[Operation, ...], generator: PathVarianceGenerator) -> PrecomputedPath:
    points = [p for op in ops for p in op.points()]
    base = np.asarray(points, dtype=float).reshape(-1, 2)
    offsets = np.zeros((generator.steps, base.shape[0], 2))
    for step in range(generator.steps):
        for i, p in enumerate(points):
            offsets[step, i] = generator.compute_offset(p, step, i)
    return PrecomputedPath(ops=tuple(ops), base=base, offsets=offsets)


@dataclass(frozen=True, eq=False)
class AnimatedCommand:
    """A render command with precomputed offsets for its ops and clip."""

    command: RenderCommand
    path: PrecomputedPath
    clip: PrecomputedPath | None = None

    def at_step(self, step: int) -> RenderCommand:
        return replace(
            self.command,
            ops=self.path.ops_for_step(step),
            clip_ops=self.clip.ops_for_step(step) if self.clip is not None else None,
        )


@dataclass(frozen=True)
class AnimationFrameCache:
    """Per-step offsets for every command of one canvas size and config.

    Frames are rebuilt on lookup from base points plus the step's offsets.
    Indexing wraps: ``cache[n] == cache[n % len(cache)]``.
    """

    size: tuple[float, float] = (0.0, 0.0)
    commands: tuple[AnimatedCommand, ...] = field(default_factory=tuple)
    step_count: int = 0
    config: AnimationConfig | None = None

    @classmethod
    def empty(cls) -> AnimationFrameCache:
        return cls()

    @classmethod
    def precompute(
        cls,
        commands: list[RenderCommand],
        size: tuple[float, float],
        config: AnimationConfig,
        base_seed: int = 0,
    ) -> AnimationFrameCache:
        t0 = time.perf_counter()
        generator = PathVarianceGenerator(config, base_seed)
        animated = tuple(
            AnimatedCommand(
                command=c,
                path=precompute_all_steps(c.ops, generator),
                clip=precompute_all_steps(c.clip_ops, generator) if c.clip_ops is not None else None,
            )
            for c in commands
        )
        logger.info(
            "Precomputed %d steps x %d commands in %.1fms",
            config.steps, len(animated), (time.perf_counter() - t0) * 1000,
        )
        return cls(size=size, commands=animated, step_count=config.steps if animated else 0, config=config)

    @property
    def is_empty(self) -> bool:
        return self.step_count == 0

    def __len__(self) -> int:
        return self.step_count

    def __getitem__(self, index: int) -> tuple[RenderCommand, ...]:
        if self.is_empty:
            raise IndexError("animation frame cache is empty")
        step = index % self.step_count
        return tuple(c.at_step(step) for c in self.commands)

    def __iter__(self) -> Iterator[tuple[RenderCommand, ...]]:
        for step in range(self.step_count):
            yield self[step]
