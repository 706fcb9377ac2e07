"""Hachure: parallel doubled lines at fill_angle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roughsketch.engine.fillers.base import Filler, hachure_lines, render_lines, sketch_set
from roughsketch.engine.operations import OperationSet

if TYPE_CHECKING:
    from roughsketch.engine.options import RenderOptions
    from roughsketch.engine.randomness import Randomizer
    from roughsketch.utils.geometry import Point


class HachureFiller(Filler):
    connect = False

    def fill_polygon(
        self, points: list[Point], options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        lines = hachure_lines(points, options)
        return sketch_set(render_lines(lines, options, rng, connect=self.connect))
