from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _optional_int(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass(frozen=True)
class MarketingConfig:
    max_cities: int = int(os.getenv("MARKETING_MAX_CITIES", "5"))
    days_far: int = int(os.getenv("MARKETING_DAYS_FAR", "30"))
    birthday_window: str = os.getenv("MARKETING_BIRTHDAY_WINDOW", "forward")
    # None keeps every computed pair for the life of the process
    distance_cache_size: int | None = _optional_int(os.getenv("MARKETING_DISTANCE_CACHE_SIZE"))
    log_level: str = os.getenv("MARKETING_LOG_LEVEL", "WARNING")


DEFAULT_MARKETING_CONFIG = MarketingConfig()
