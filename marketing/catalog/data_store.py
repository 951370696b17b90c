from __future__ import annotations

import datetime as dt
from typing import Iterable

import pandas as pd

from .models import Customer, Event

_DEMO_EVENT_ROWS: list[tuple[int, str, str, dt.date]] = [
    (1, "Phantom of the Opera", "New York", dt.date(2023, 12, 23)),
    (2, "Metallica", "Los Angeles", dt.date(2023, 12, 2)),
    (3, "Metallica", "New York", dt.date(2023, 12, 6)),
    (4, "Metallica", "Boston", dt.date(2023, 10, 23)),
    (5, "LadyGaGa", "New York", dt.date(2023, 9, 20)),
    (6, "LadyGaGa", "Boston", dt.date(2023, 8, 1)),
    (7, "LadyGaGa", "Chicago", dt.date(2023, 7, 4)),
    (8, "LadyGaGa", "San Francisco", dt.date(2023, 7, 7)),
    (9, "LadyGaGa", "Washington", dt.date(2023, 5, 22)),
    (10, "Metallica", "Chicago", dt.date(2023, 1, 1)),
    (11, "Phantom of the Opera", "San Francisco", dt.date(2023, 7, 4)),
    (12, "Phantom of the Opera", "Chicago", dt.date(2024, 5, 15)),
]

EVENT_COLUMNS: list[str] = ["id", "name", "city", "date"]


def demo_events() -> list[Event]:
    """Return a fresh copy of the hardcoded demo events."""
    return [
        Event(id=event_id, name=name, city=city, date=date)
        for event_id, name, city, date in _DEMO_EVENT_ROWS
    ]


def demo_customer() -> Customer:
    return Customer(id=1, name="John", city="New York", birth_date=dt.date(1995, 5, 10))


def build_event_frame(events: Iterable[Event]) -> pd.DataFrame:
    """
    Index events in a DataFrame.

    Row labels are positions in the given sequence, so ``frame.index`` maps
    straight back to the Event objects.
    """
    rows = [event.model_dump() for event in events]
    df = pd.DataFrame(rows, columns=EVENT_COLUMNS)

    # Timestamps make date arithmetic vectorised
    df["date"] = pd.to_datetime(df["date"])

    # Case-folded city for case-insensitive matching
    df["city_folded"] = df["city"].fillna("").str.casefold()

    return df
