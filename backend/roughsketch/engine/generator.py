"""Shape → Drawing generation and the cached Engine entry point."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roughsketch.engine import shapes
from roughsketch.engine.cache import CacheStats, DrawingCache, DrawingCacheKey, GeneratorCache
from roughsketch.engine.config import EngineConfig
from roughsketch.engine.fillers.factory import filler_for
from roughsketch.engine.fillers.scribble import ScribbleFiller
from roughsketch.engine.fillers.starburst import StarburstFiller
from roughsketch.engine.operations import Drawing, Operation, OperationSet, OpSetKind
from roughsketch.engine.options import FillStyle, RenderOptions
from roughsketch.engine.randomness import Randomizer, derive_seed
from roughsketch.engine.render import RenderCommand, build_commands
from roughsketch.engine.strokes import (
    arc_ops,
    curve_ops,
    double_line_ops,
    ellipse_ops,
    linear_path_ops,
    normalize_arc,
    polygon_ops,
    rectangle_ops,
    rectangle_points,
    rounded_rectangle_ops,
    rounded_rectangle_polygon,
    svg_path_ops,
)
from roughsketch.svg.path_data import operations_to_path_data, parse_path_data, path_bounds
from roughsketch.text.glyphs import text_to_path

if TYPE_CHECKING:
    from roughsketch.engine.fillers.base import Filler

logger = logging.getLogger(__name__)


def _missing(*values: object) -> bool:
    return any(v is None for v in values)


class Generator:
    """Builds drawings for one canvas size. Stateless apart from its size and config."""

    def __init__(self, size: tuple[float, float], config: EngineConfig | None = None) -> None:
        self.size = size
        self.config = config or EngineConfig()
        self._scribble = ScribbleFiller(self.config)
        self._starburst = StarburstFiller(self.config)

    def seed_for(self, descriptor: shapes.ShapeDescriptor, options: RenderOptions) -> int:
        base = options.seed if options.seed is not None else self.config.seed
        return derive_seed(base, descriptor.cache_params(), options.cache_key())

    def generate(
        self,
        descriptor: shapes.ShapeDescriptor,
        options: RenderOptions | None = None,
        rng: Randomizer | None = None,
    ) -> Drawing | None:
        options = options or RenderOptions()
        rng = rng or Randomizer(self.seed_for(descriptor, options))
        sets = self._sets(descriptor, options, rng)
        if sets is None:
            return None
        return Drawing(shape=descriptor.tag, sets=tuple(sets), options=options)

    def _filler(self, options: RenderOptions) -> Filler:
        if options.fill_style == FillStyle.SCRIBBLE:
            return self._scribble
        if options.fill_style in (FillStyle.STARBURST, FillStyle.SUNBURST):
            return self._starburst
        return filler_for(options.fill_style)

    def _sets(
        self, d: shapes.ShapeDescriptor, options: RenderOptions, rng: Randomizer
    ) -> list[OperationSet] | None:
        if isinstance(d, shapes.Line):
            if _missing(d.x1, d.y1, d.x2, d.y2):
                return None
            return [_stroke(double_line_ops(d.x1, d.y1, d.x2, d.y2, options, rng))]

        if isinstance(d, shapes.Rectangle):
            if _missing(d.x, d.y, d.width, d.height):
                return None
            return self._rectangle(d.x, d.y, d.width, d.height, options, rng)

        if isinstance(d, shapes.FullRectangle):
            inset = self.config.canvas_inset
            w, h = self.size
            if w - 2 * inset <= 0 or h - 2 * inset <= 0:
                return None
            return self._rectangle(inset, inset, w - 2 * inset, h - 2 * inset, options, rng)

        if isinstance(d, shapes.RoundedRectangle):
            if _missing(d.x, d.y, d.width, d.height, d.radius):
                return None
            outline = rounded_rectangle_polygon(
                d.x, d.y, d.width, d.height, d.radius, self.config.rounded_corner_steps
            )
            fill = self._filler(options).fill_polygon(outline, options, rng)
            stroke = rounded_rectangle_ops(d.x, d.y, d.width, d.height, d.radius, options, rng)
            return _with_fill(fill, stroke)

        if isinstance(d, shapes.Ellipse):
            if _missing(d.x, d.y, d.width, d.height):
                return None
            return self._ellipse(d.x, d.y, d.width / 2, d.height / 2, options, rng)

        if isinstance(d, shapes.Circle):
            if _missing(d.x, d.y, d.diameter):
                return None
            return self._ellipse(d.x, d.y, d.diameter / 2, d.diameter / 2, options, rng)

        if isinstance(d, shapes.FullCircle):
            w, h = self.size
            r = min(w, h) / 2 - self.config.canvas_inset
            if r <= 0:
                return None
            return self._ellipse(w / 2, h / 2, r, r, options, rng)

        if isinstance(d, shapes.Polygon):
            points = list(d.points)
            if not points:
                return None
            fill = self._filler(options).fill_polygon(points, options, rng)
            return _with_fill(fill, polygon_ops(points, options, rng))

        if isinstance(d, shapes.Arc):
            if _missing(d.x, d.y, d.width, d.height, d.start, d.stop):
                return None
            rx, ry = d.width / 2, d.height / 2
            fill = None
            if d.closed:
                start, stop = normalize_arc(d.start, d.stop)
                fill = self._filler(options).fill_arc(d.x, d.y, rx, ry, start, stop, options, rng)
            stroke = arc_ops(d.x, d.y, rx, ry, d.start, d.stop, d.closed, options, rng)
            return _with_fill(fill, stroke)

        if isinstance(d, shapes.Curve):
            if not d.points:
                return None
            return [_stroke(curve_ops(list(d.points), options, rng))]

        if isinstance(d, shapes.LinearPath):
            if not d.points:
                return None
            return [_stroke(linear_path_ops(list(d.points), d.close, options, rng))]

        if isinstance(d, shapes.SvgPath):
            if not d.d:
                return None
            return self._path(d.d, parse_path_data(d.d), options, rng)

        if isinstance(d, shapes.TextPath):
            if not d.text:
                return None
            glyphs = text_to_path(d.text, d.font_family, d.font_size)
            if glyphs is None:
                return None
            commands = list(glyphs.commands)
            return self._path(operations_to_path_data(commands), commands, options, rng)

        logger.warning("Unknown shape descriptor %r", type(d).__name__)
        return None

    def _rectangle(
        self, x: float, y: float, w: float, h: float, options: RenderOptions, rng: Randomizer
    ) -> list[OperationSet]:
        fill = self._filler(options).fill_polygon(rectangle_points(x, y, w, h), options, rng)
        return _with_fill(fill, rectangle_ops(x, y, w, h, options, rng))

    def _ellipse(
        self, cx: float, cy: float, rx: float, ry: float, options: RenderOptions, rng: Randomizer
    ) -> list[OperationSet]:
        fill = self._filler(options).fill_ellipse(cx, cy, rx, ry, options, rng)
        return _with_fill(fill, ellipse_ops(cx, cy, rx, ry, options, rng))

    def _path(
        self, d: str, commands: list[Operation], options: RenderOptions, rng: Randomizer
    ) -> list[OperationSet] | None:
        if not commands:
            return None
        sets: list[OperationSet] = []
        fill = self._path_fill(d, commands, options, rng)
        if fill is not None:
            sets.append(fill)
        sets.append(OperationSet(OpSetKind.STROKE_PATH, tuple(svg_path_ops(commands, options, rng)), path=d))
        return sets

    def _path_fill(
        self, d: str, commands: list[Operation], options: RenderOptions, rng: Randomizer
    ) -> OperationSet | None:
        if options.fill_style == FillStyle.SOLID:
            return OperationSet(OpSetKind.SVG_FILL_SOLID, (), path=d)
        if options.fill_style == FillStyle.SCRIBBLE:
            return self._scribble.fill_commands(commands, options)
        xmin, ymin, xmax, ymax = path_bounds(commands)
        w, h = xmax - xmin, ymax - ymin
        if w <= 0 or h <= 0:
            return None
        # Pattern space: the path's bounding box moved to the origin
        pattern = self._filler(options).fill_polygon(rectangle_points(0, 0, w, h), options, rng)
        if pattern is None:
            return None
        return OperationSet(OpSetKind.SVG_FILL_PATTERN, pattern.ops, path=d, size=(w, h))


def _stroke(ops: list[Operation]) -> OperationSet:
    return OperationSet(OpSetKind.STROKE_PATH, tuple(ops))


def _with_fill(fill: OperationSet | None, stroke_ops: list[Operation]) -> list[OperationSet]:
    sets = [fill] if fill is not None else []
    sets.append(_stroke(stroke_ops))
    return sets


class Engine:
    """Cached generation entry point.

    Owns one GeneratorCache and one DrawingCache. Like the caches, an Engine
    is single-threaded state.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self.generators = GeneratorCache(
            self.config.generator_cache_size, factory=lambda size: Generator(size, self.config)
        )
        self.drawings = DrawingCache(self.config.drawing_cache_size)

    def generate(
        self,
        descriptor: shapes.ShapeDescriptor,
        options: RenderOptions | None = None,
        size: tuple[float, float] = (0.0, 0.0),
    ) -> Drawing | None:
        options = options or RenderOptions()
        key = DrawingCacheKey.build(descriptor, size, options)
        return self.drawings.get_or_generate(
            key, lambda: self.generators.generator(size).generate(descriptor, options)
        )

    def generate_layers(
        self,
        descriptor: shapes.ShapeDescriptor,
        options: RenderOptions | None = None,
        size: tuple[float, float] = (0.0, 0.0),
    ) -> list[Drawing]:
        """One drawing per fill_spacing_pattern multiplier, layered for gradient fills."""
        options = options or RenderOptions()
        pattern = options.fill_spacing_pattern
        if not pattern:
            drawing = self.generate(descriptor, options, size)
            return [drawing] if drawing is not None else []
        weight = options.effective_fill_weight
        layers: list[Drawing] = []
        for i, multiplier in enumerate(pattern):
            layer_options = options.with_changes(
                fill_spacing=options.fill_spacing * multiplier,
                fill_weight=weight * (1.0 + i * 0.01),
                fill_spacing_pattern=None,
            )
            drawing = self.generate(descriptor, layer_options, size)
            if drawing is not None:
                layers.append(drawing)
        return layers

    def render_commands(
        self,
        descriptor: shapes.ShapeDescriptor,
        options: RenderOptions | None = None,
        size: tuple[float, float] = (0.0, 0.0),
    ) -> list[RenderCommand]:
        commands: list[RenderCommand] = []
        for drawing in self.generate_layers(descriptor, options, size):
            commands.extend(build_commands(drawing, self.config))
        return commands

    def clear(self) -> None:
        self.drawings.clear()
        self.generators.clear()

    def stats(self) -> CacheStats:
        return self.drawings.stats()
