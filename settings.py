from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_FRESHNESS_WINDOW_ENV = "WEATHER_FRESHNESS_WINDOW_MS"
_SEED_SAMPLE_ENV = "WEATHER_SEED_SAMPLE_AIRPORTS"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DAY_IN_MILLIS = 24 * 60 * 60 * 1000

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    freshness_window_ms: int
    seed_sample_airports: bool
    log_level: str


def _read_positive_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip().lower()
    if candidate in _TRUTHY:
        return True
    if candidate in _FALSY:
        return False
    return default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        freshness_window_ms=_read_positive_int(_FRESHNESS_WINDOW_ENV, DAY_IN_MILLIS),
        seed_sample_airports=_read_bool(_SEED_SAMPLE_ENV, True),
        log_level=_read_log_level("INFO"),
    )
