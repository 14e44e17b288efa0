"""
Weather query package.

OpenWeatherMap current weather and next-day forecast, normalized to
WeatherObservation, with a 5-minute file-backed response cache keyed by
request URL.
"""

from services.dreich.weather.cache import ResponseCache, cache_key
from services.dreich.weather.errors import (
    CacheReadError,
    CacheWriteError,
    MalformedResponseError,
    TransportError,
    WeatherError,
)
from services.dreich.weather.mapper import map_response
from services.dreich.weather.service import WeatherQueryService
from services.dreich.weather.types import (
    DayWindow,
    QueryResult,
    QueryStatus,
    ResponseKind,
    WeatherObservation,
)
from services.dreich.weather.window import day_window, select_day, tomorrow

__all__ = [
    "CacheReadError",
    "CacheWriteError",
    "DayWindow",
    "MalformedResponseError",
    "QueryResult",
    "QueryStatus",
    "ResponseCache",
    "ResponseKind",
    "TransportError",
    "WeatherError",
    "WeatherObservation",
    "WeatherQueryService",
    "cache_key",
    "day_window",
    "map_response",
    "select_day",
    "tomorrow",
]
