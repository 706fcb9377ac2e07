"""Cross-hatch: hachure at fill_angle plus a second pass at fill_angle + 90."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roughsketch.engine.fillers.base import Filler, hachure_lines, render_lines, sketch_set
from roughsketch.engine.operations import OperationSet

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions
    from roughsketch.engine.randomness import Randomizer
    from roughsketch.utils.geometry import Point


class CrossHatchFiller(Filler):
    def fill_polygon(
        self, points: list[Point], options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        ops = render_lines(hachure_lines(points, options), options, rng)
        ops += render_lines(hachure_lines(points, options, angle=options.fill_angle + 90), options, rng)
        return sketch_set(ops)
