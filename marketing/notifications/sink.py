"""
Notification delivery stand-ins.

A real deployment would hand messages to email, SMS or push; here they are
written to a text stream or kept in memory.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from ..catalog.models import Customer, Event


def format_notification(customer: Customer, event: Event) -> str:
    return f"{customer.name} from {customer.city} event {event.name} at {event.date.isoformat()}"


class NotificationSink(Protocol):
    def send(self, customer: Customer, event: Event) -> None: ...


class ConsoleNotificationSink:
    """Write one line per notification, to stdout unless another stream is given."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send(self, customer: Customer, event: Event) -> None:
        # Resolve stdout lazily so redirection after construction still applies
        stream = self._stream if self._stream is not None else sys.stdout
        print(format_notification(customer, event), file=stream)


class RecordingNotificationSink:
    def __init__(self) -> None:
        self.sent: list[tuple[Customer, Event]] = []

    def send(self, customer: Customer, event: Event) -> None:
        self.sent.append((customer, event))

    @property
    def lines(self) -> list[str]:
        return [format_notification(customer, event) for customer, event in self.sent]

    @property
    def event_ids(self) -> list[int]:
        return [event.id for _, event in self.sent]

    def clear(self) -> None:
        self.sent.clear()
