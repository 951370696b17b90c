from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1, description="Name of a city in the static city table")
    date: dt.date

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class Customer(BaseModel):
    id: int
    name: str
    city: str
    birth_date: dt.date


class City(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    x: int
    y: int
