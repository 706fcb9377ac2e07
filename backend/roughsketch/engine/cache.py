"""Drawing and generator caches.

Both caches are plain mutable state owned by an Engine. They are not
thread-safe: confine every call to one thread or lock around them.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from roughsketch.engine.generator import Generator
    from roughsketch.engine.operations import Drawing
    from roughsketch.engine.options import RenderOptions
    from roughsketch.engine.shapes import ShapeDescriptor

logger = logging.getLogger(__name__)

Size = tuple[float, float]


def rounded_size(size: Size) -> tuple[int, int]:
    return (round(size[0]), round(size[1]))


@dataclass(frozen=True)
class CacheStats:
    entries: int = 0
    hits: int = 0
    misses: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0

    def as_dict(self) -> dict[str, Any]:
        return {
            "entries": self.entries,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": self.hit_rate,
        }


@dataclass(frozen=True)
class DrawingCacheKey:
    shape: tuple[Any, ...]
    size: tuple[int, int]
    options: tuple[Any, ...]

    @classmethod
    def build(cls, descriptor: ShapeDescriptor, size: Size, options: RenderOptions) -> DrawingCacheKey:
        return cls(descriptor.cache_params(), rounded_size(size), options.cache_key())


class _LRU:
    """Shared bookkeeping: an OrderedDict with hit/miss counters."""

    def __init__(self, max_entries: int) -> None:
        self.max_entries = max(1, max_entries)
        self._entries: OrderedDict[Any, Any] = OrderedDict()
        self.hits = 0
        self.misses = 0

    @property
    def count(self) -> int:
        return len(self._entries)

    def _store(self, key: Any, value: Any) -> None:
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("%s evicted %r", type(self).__name__, evicted)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
        logger.debug("%s cleared", type(self).__name__)

    def stats(self) -> CacheStats:
        return CacheStats(entries=len(self._entries), hits=self.hits, misses=self.misses)


class GeneratorCache(_LRU):
    """One Generator per canvas size, rounded to whole units."""

    def __init__(
        self,
        max_entries: int = 10,
        factory: Callable[[tuple[int, int]], Generator] | None = None,
    ) -> None:
        super().__init__(max_entries)
        self._factory = factory

    def generator(self, size: Size) -> Generator:
        key = rounded_size(size)
        found = self._entries.get(key)
        if found is not None:
            self.hits += 1
            self._entries.move_to_end(key)
            return found
        self.misses += 1
        if self._factory is None:
            from roughsketch.engine.generator import Generator

            generator = Generator(key)
        else:
            generator = self._factory(key)
        logger.debug("Created generator for %dx%d", *key)
        self._store(key, generator)
        return generator

    def sizes(self) -> list[tuple[int, int]]:
        """Cached sizes, least recently used first."""
        return list(self._entries)


class DrawingCache(_LRU):
    def __init__(self, max_entries: int = 100) -> None:
        super().__init__(max_entries)

    def get_or_generate(
        self, key: DrawingCacheKey, producer: Callable[[], Drawing | None]
    ) -> Drawing | None:
        """Cached drawing for key, else producer() exactly once. None results are not stored."""
        found = self._entries.get(key)
        if found is not None:
            self.hits += 1
            self._entries.move_to_end(key)
            return found
        self.misses += 1
        drawing = producer()
        if drawing is not None:
            self._store(key, drawing)
        return drawing

    def get(self, key: DrawingCacheKey) -> Drawing | None:
        return self._entries.get(key)

    def set(self, key: DrawingCacheKey, drawing: Drawing) -> None:
        self._store(key, drawing)

    def clear_for_size(self, size: Size) -> None:
        target = rounded_size(size)
        for key in [k for k in self._entries if k.size == target]:
            del self._entries[key]
