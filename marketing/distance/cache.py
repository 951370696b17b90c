from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "-"


def canonical_key(city_a: str, city_b: str) -> str:
    """Join two city names in lexicographic order so (A, B) and (B, A) share a key."""
    return KEY_SEPARATOR.join(sorted([city_a, city_b]))


class DistanceCache:
    """
    Pairwise city distance cache.

    With ``max_size=None`` entries are never evicted. With a positive
    ``max_size`` the least recently used pair is dropped once the cache is
    full.
    """

    def __init__(self, max_size: int | None = None) -> None:
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be positive or None, got {max_size}")
        self.max_size = max_size
        self._entries: OrderedDict[str, int] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return canonical_key(*pair) in self._entries

    def get(self, city_a: str, city_b: str) -> int | None:
        key = canonical_key(city_a, city_b)
        distance = self._entries.get(key)
        if distance is None:
            self._misses += 1
            return None
        self._hits += 1
        if self.max_size is not None:
            self._entries.move_to_end(key)
        return distance

    def set(self, city_a: str, city_b: str, distance: int) -> None:
        key = canonical_key(city_a, city_b)
        self._entries[key] = distance
        self._entries.move_to_end(key)
        if self.max_size is not None and len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            self._evictions += 1
            logger.debug("Evicted distance for %s", evicted)

    def stats(self) -> dict[str, Any]:
        total = self._hits + self._misses
        return {
            "size": len(self._entries),
            "max_size": self.max_size,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
        }

    def clear(self) -> None:
        self._entries.clear()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
