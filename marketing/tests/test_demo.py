from marketing.config import MarketingConfig
from marketing.demo import format_event_line, main, run_demo
from marketing.catalog.data_store import demo_events

CONFIG = MarketingConfig(max_cities=5, days_far=30, birthday_window="forward", distance_cache_size=None)


def test_format_event_line():
    assert format_event_line(demo_events()[0]) == "Phantom of the Opera - New York - 2023-12-23"


def test_run_demo_prints_all_sections(capsys):
    run_demo(CONFIG)
    out = capsys.readouterr().out.splitlines()

    for header in ("== Same city ==", "== Close to birthday ==", "== Closest cities ==", "== Events by date =="):
        assert header in out

    same_city = out[out.index("== Same city ==") + 1: out.index("== Close to birthday ==")]
    assert same_city == [
        "John from New York event Phantom of the Opera at 2023-12-23",
        "John from New York event Metallica at 2023-12-06",
        "John from New York event LadyGaGa at 2023-09-20",
    ]

    closest = out[out.index("== Closest cities ==") + 1: out.index("== Events by date ==")]
    assert len(closest) == 5
    assert closest[-1] == "John from New York event LadyGaGa at 2023-08-01"

    by_date = out[out.index("== Events by date ==") + 1: out.index("== Events by date ==") + 13]
    assert by_date[0] == "Metallica - Chicago - 2023-01-01"
    assert by_date[-1] == "Phantom of the Opera - Chicago - 2024-05-15"

    assert out[-1] == "Distance cache: 6 pairs, 6 hits, 6 misses"


def test_main_returns_zero(capsys):
    assert main() == 0
    assert "== Events by date ==" in capsys.readouterr().out
