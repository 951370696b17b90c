from __future__ import annotations

import logging

from ..catalog.cities import get_city
from ..catalog.models import City
from .cache import DistanceCache

logger = logging.getLogger(__name__)


def manhattan_distance(city_a: City, city_b: City) -> int:
    return abs(city_a.x - city_b.x) + abs(city_a.y - city_b.y)


def _resolve(city: City | str) -> City:
    return city if isinstance(city, City) else get_city(city)


class DistanceCalculator:
    """Cached distance lookups between cities of the static table."""

    def __init__(self, cache: DistanceCache | None = None) -> None:
        self.cache = cache if cache is not None else DistanceCache()
        self.compute_count = 0

    def distance(self, city_a: City | str, city_b: City | str) -> int:
        a = _resolve(city_a)
        b = _resolve(city_b)

        cached = self.cache.get(a.name, b.name)
        if cached is not None:
            return cached

        distance = manhattan_distance(a, b)
        self.compute_count += 1
        logger.debug("Computed distance %s <-> %s = %d", a.name, b.name, distance)
        self.cache.set(a.name, b.name, distance)
        return distance
