import datetime as dt
import io

from marketing.catalog.data_store import demo_customer
from marketing.catalog.models import Event
from marketing.notifications import (
    ConsoleNotificationSink,
    RecordingNotificationSink,
    format_notification,
)

EVENT = Event(id=1, name="Phantom of the Opera", city="New York", date=dt.date(2023, 12, 23))


def test_format_notification():
    assert format_notification(demo_customer(), EVENT) == (
        "John from New York event Phantom of the Opera at 2023-12-23"
    )


def test_console_sink_writes_one_line_per_send():
    stream = io.StringIO()
    sink = ConsoleNotificationSink(stream)
    sink.send(demo_customer(), EVENT)
    sink.send(demo_customer(), EVENT)

    assert stream.getvalue().splitlines() == [
        "John from New York event Phantom of the Opera at 2023-12-23",
    ] * 2


def test_console_sink_defaults_to_stdout(capsys):
    ConsoleNotificationSink().send(demo_customer(), EVENT)
    assert capsys.readouterr().out == "John from New York event Phantom of the Opera at 2023-12-23\n"


def test_recording_sink_keeps_pairs():
    sink = RecordingNotificationSink()
    sink.send(demo_customer(), EVENT)

    assert sink.event_ids == [1]
    assert sink.lines == ["John from New York event Phantom of the Opera at 2023-12-23"]

    sink.clear()
    assert sink.sent == []
