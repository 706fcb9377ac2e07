"""Seeded randomness used by every geometry routine to emulate hand wobble.

There is no ambient random source anywhere in the engine: each generation
call builds a Randomizer from a seed derived from its inputs, so identical
requests always produce identical geometry.
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions

_MASK64 = (1 << 64) - 1


def derive_seed(*parts: Any) -> int:
    """Stable 64-bit seed from arbitrary reprs. Same value in every process."""
    h = hashlib.blake2b(digest_size=8)
    for part in parts:
        h.update(repr(part).encode("utf-8"))
        h.update(b"\x1f")
    return int.from_bytes(h.digest(), "little") & _MASK64


class Randomizer:
    def __init__(self, seed: int = 0) -> None:
        self.seed = seed & _MASK64
        self._rng = np.random.default_rng(self.seed)

    def random(self) -> float:
        """Uniform in [0, 1)."""
        return float(self._rng.random())

    def offset(self, max_value: float, options: RenderOptions) -> float:
        """roughness * uniform(-max, max); exactly 0 when roughness is 0."""
        if options.roughness == 0:
            return 0.0
        return options.roughness * (self.random() * 2 * max_value - max_value)

    def offset_in_range(self, min_value: float, max_value: float, options: RenderOptions) -> float:
        """Uniform in [min, max], not scaled by roughness."""
        return self.random() * (max_value - min_value) + min_value
