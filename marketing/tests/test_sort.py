import pytest

from marketing.catalog.data_store import demo_events
from marketing.engine.engine import SORTABLE_FIELDS, MarketingEngine, UnknownFieldError
from marketing.notifications.sink import RecordingNotificationSink


def _engine():
    return MarketingEngine(demo_events(), sink=RecordingNotificationSink())


def test_sort_by_date_ascending():
    result = _engine().sort_events_by_field("Date")
    dates = [e.date for e in result]

    assert dates == sorted(dates)
    assert result[0].id == 10
    assert result[-1].id == 12


def test_sort_field_name_is_case_insensitive():
    engine = _engine()
    expected = engine.sort_events_by_field("date")

    assert engine.sort_events_by_field("DATE") == expected
    assert engine.sort_events_by_field("Date") == expected


def test_sort_ties_keep_list_order():
    result = _engine().sort_events_by_field("city")
    assert [e.id for e in result if e.city == "Boston"] == [4, 6]
    assert [e.id for e in result if e.city == "Chicago"] == [7, 10, 12]
    assert result[0].city == "Boston"


def test_sort_descending_ties_keep_list_order():
    result = _engine().sort_events_by_field("date", ascending=False)
    same_day = [e.id for e in result if e.date.isoformat() == "2023-07-04"]

    assert same_day == [7, 11]
    assert result[0].id == 12


def test_ascending_then_descending_is_reversed():
    engine = _engine()
    ascending = engine.sort_events_by_field("Id")
    descending = engine.sort_events_by_field("Id", ascending=False)

    assert [e.id for e in ascending] == list(range(1, 13))
    assert list(descending) == list(reversed(ascending))


def test_sort_by_name():
    result = _engine().sort_events_by_field("name")
    names = [e.name for e in result]
    assert names == sorted(names)


def test_sort_unknown_field_raises():
    with pytest.raises(UnknownFieldError) as exc_info:
        _engine().sort_events_by_field("Foo")
    assert isinstance(exc_info.value, ValueError)
    assert "Foo" in str(exc_info.value)
    for field in SORTABLE_FIELDS:
        assert field in str(exc_info.value)


def test_sort_empty_field_raises():
    with pytest.raises(UnknownFieldError):
        _engine().sort_events_by_field("")


def test_sort_does_not_mutate_events_and_can_be_repeated():
    engine = _engine()
    before = [e.id for e in engine.events]

    result = engine.sort_events_by_field("date", ascending=False)

    assert [e.id for e in engine.events] == before
    assert [e.id for e in result] == [e.id for e in result]
    assert engine.sort_events_by_field("date", ascending=False) == result


def test_sort_empty_collection():
    engine = MarketingEngine([], sink=RecordingNotificationSink())
    assert engine.sort_events_by_field("date") == ()
