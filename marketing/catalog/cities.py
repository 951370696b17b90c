from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import City


class UnknownCityError(KeyError):
    """Raised when a city name is missing from the static city table."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown city: {self.name!r}"


_CITY_ROWS: list[tuple[str, int, int]] = [
    ("New York", 3572, 1455),
    ("Los Angeles", 462, 975),
    ("San Francisco", 183, 1233),
    ("Boston", 3778, 1566),
    ("Chicago", 2608, 1525),
    ("Washington", 3358, 1320),
]

CITIES: Mapping[str, City] = MappingProxyType(
    {name: City(name=name, x=x, y=y) for name, x, y in _CITY_ROWS}
)


def get_city(name: str) -> City:
    """Return the city with exactly this name, or raise UnknownCityError."""
    try:
        return CITIES[name]
    except KeyError:
        raise UnknownCityError(name) from None


def city_names() -> list[str]:
    return list(CITIES)
