from __future__ import annotations

import logging

from .catalog.data_store import demo_customer, demo_events
from .config import DEFAULT_MARKETING_CONFIG, MarketingConfig
from .engine.engine import MarketingEngine

logger = logging.getLogger(__name__)


def format_event_line(event) -> str:
    return f"{event.name} - {event.city} - {event.date.isoformat()}"


def run_demo(config: MarketingConfig = DEFAULT_MARKETING_CONFIG) -> MarketingEngine:
    """Run every selection for the demo customer, then list events by date."""
    customer = demo_customer()
    engine = MarketingEngine(demo_events(), config=config)
    logger.info("Running demo for customer %s (%s)", customer.name, customer.city)

    print("== Same city ==")
    engine.send_same_city_notifications(customer)

    print("== Close to birthday ==")
    engine.send_birthday_notifications(customer)

    print("== Closest cities ==")
    engine.send_closest_cities_notifications(customer)

    print("== Events by date ==")
    for event in engine.sort_events_by_field("Date"):
        print(format_event_line(event))

    stats = engine.calculator.cache.stats()
    print(f"Distance cache: {stats['size']} pairs, {stats['hits']} hits, {stats['misses']} misses")
    return engine


def main() -> int:
    logging.basicConfig(
        level=DEFAULT_MARKETING_CONFIG.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_demo()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
