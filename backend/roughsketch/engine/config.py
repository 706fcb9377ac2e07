"""Engine configuration: tuning constants shared by the geometry routines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roughsketch.config import Settings


@dataclass
class EngineConfig:
    """Knobs that are not part of a drawing's RenderOptions."""

    # Base seed mixed into every per-drawing seed
    seed: int = 0

    # Cache capacities
    drawing_cache_size: int = 100
    generator_cache_size: int = 10

    # Adaptive bézier flattening
    flatness_tolerance: float = 0.25  # max control-point distance from chord, px
    max_flatten_depth: int = 10  # 2**10 pieces per curve at most

    # Stroke-to-fill
    max_sample_spacing: float = 4.0  # px between samples when width varies
    miter_limit: float = 4.0  # miter length / half width before falling back to bevel
    round_segments_per_pi: int = 12  # points on a semicircular cap

    # Scribble: intersections closer than this collapse into one
    dedupe_tolerance: float = 0.5

    # FullRectangle / FullCircle distance from the canvas edge
    canvas_inset: float = 4.0

    # Rounded-rectangle fill polygon resolution per corner
    rounded_corner_steps: int = 8

    @classmethod
    def from_settings(cls, settings: Settings) -> EngineConfig:
        return cls(
            seed=settings.default_seed,
            drawing_cache_size=settings.drawing_cache_size,
            generator_cache_size=settings.generator_cache_size,
            flatness_tolerance=settings.flatness_tolerance,
            max_flatten_depth=settings.max_flatten_depth,
            max_sample_spacing=settings.max_sample_spacing,
            miter_limit=settings.miter_limit,
            dedupe_tolerance=settings.dedupe_tolerance,
            canvas_inset=settings.canvas_inset,
        )
