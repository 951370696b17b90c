from __future__ import annotations

import datetime as dt
import logging
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

import pandas as pd

from ..catalog.data_store import build_event_frame
from ..catalog.models import Customer, Event
from ..config import DEFAULT_MARKETING_CONFIG, MarketingConfig
from ..distance.cache import DistanceCache
from ..distance.calculator import DistanceCalculator
from ..notifications.sink import ConsoleNotificationSink, NotificationSink

logger = logging.getLogger(__name__)

# Public field name -> event frame column
SORTABLE_FIELDS: Mapping[str, str] = MappingProxyType({
    "id": "id",
    "name": "name",
    "city": "city",
    "date": "date",
})


class UnknownFieldError(ValueError):
    """Raised when sorting by a field that is not in SORTABLE_FIELDS."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        valid = ", ".join(SORTABLE_FIELDS)
        super().__init__(f"Cannot sort events by {field_name!r}; expected one of: {valid}")


class BirthdayWindow(str, Enum):
    forward = "forward"
    symmetric = "symmetric"


def next_birthday(birth_date: dt.date, today: dt.date) -> dt.date:
    """
    Return the first birthday on or after ``today``.

    Feb 29 birthdays fall on Feb 28 in non-leap years.
    """

    def _in_year(year: int) -> dt.date:
        try:
            return birth_date.replace(year=year)
        except ValueError:
            return dt.date(year, 2, 28)

    birthday = _in_year(today.year)
    if birthday < today:
        birthday = _in_year(today.year + 1)
    return birthday


class MarketingEngine:
    def __init__(
        self,
        events: Iterable[Event],
        sink: NotificationSink | None = None,
        calculator: DistanceCalculator | None = None,
        config: MarketingConfig = DEFAULT_MARKETING_CONFIG,
    ) -> None:
        self._events: tuple[Event, ...] = tuple(events)
        self._df: pd.DataFrame = build_event_frame(self._events)
        self.config = config
        self.sink: NotificationSink = sink if sink is not None else ConsoleNotificationSink()
        self.calculator = (
            calculator
            if calculator is not None
            else DistanceCalculator(DistanceCache(max_size=config.distance_cache_size))
        )
        logger.info("Marketing engine ready with %d events", len(self._events))

    @property
    def events(self) -> tuple[Event, ...]:
        return self._events

    def _events_at(self, index: Iterable[int]) -> list[Event]:
        return [self._events[i] for i in index]

    def _notify(self, customer: Customer, events: list[Event]) -> list[Event]:
        for event in events:
            self.sink.send(customer, event)
        return events

    # --- Selections ---

    def send_same_city_notifications(self, customer: Customer) -> list[Event]:
        df = self._df
        mask = df["city_folded"] == customer.city.casefold()
        selected = self._events_at(df.loc[mask].index)
        logger.debug("Same-city selection for %s matched %d events", customer.city, len(selected))
        return self._notify(customer, selected)

    def send_closest_cities_notifications(
        self, customer: Customer, max_cities: int | None = None
    ) -> list[Event]:
        """
        Notify about the ``max_cities`` events nearest to the customer's city.

        Events are ranked by distance with a stable sort, so equally distant
        events keep their original order.
        """
        limit = self.config.max_cities if max_cities is None else max_cities
        if limit < 0:
            raise ValueError(f"max_cities must be non-negative, got {limit}")

        df = self._df
        distances = df["city"].map(lambda city: self.calculator.distance(city, customer.city))
        ranked = df.assign(_distance=distances).sort_values("_distance", kind="stable")
        selected = self._events_at(ranked.head(limit).index)
        logger.debug("Closest-cities selection for %s picked %d events", customer.city, len(selected))
        return self._notify(customer, selected)

    def send_birthday_notifications(
        self,
        customer: Customer,
        days_far: int | None = None,
        today: dt.date | None = None,
        window: BirthdayWindow | str | None = None,
    ) -> list[Event]:
        """
        Notify about events close to the customer's next birthday.

        The ``forward`` window keeps events less than ``days_far`` days after
        the birthday and every event before it. The ``symmetric`` window keeps
        events less than ``days_far`` days away on either side.
        """
        days = self.config.days_far if days_far is None else days_far
        mode = BirthdayWindow(window if window is not None else self.config.birthday_window)
        birthday = next_birthday(customer.birth_date, today or dt.date.today())

        df = self._df
        offset_days = (df["date"] - pd.Timestamp(birthday)).dt.days
        if mode is BirthdayWindow.symmetric:
            offset_days = offset_days.abs()
        mask = offset_days < days

        selected = self._events_at(df.loc[mask].index)
        logger.debug(
            "Birthday selection (%s, %d days from %s) matched %d events",
            mode.value, days, birthday, len(selected),
        )
        return self._notify(customer, selected)

    # --- Sorting ---

    def sort_events_by_field(self, field_name: str, ascending: bool = True) -> tuple[Event, ...]:
        column = SORTABLE_FIELDS.get(field_name.casefold())
        if column is None:
            raise UnknownFieldError(field_name)

        ordered = self._df.sort_values(column, ascending=ascending, kind="stable")
        return tuple(self._events_at(ordered.index))
