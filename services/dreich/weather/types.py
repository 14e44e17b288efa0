"""
Domain types for weather queries.

These are provider-agnostic: the CLI and the window selector only ever see
WeatherObservation, never the OpenWeatherMap schemas.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from services.dreich.weather.errors import MalformedResponseError, TransportError, WeatherError


class ResponseKind(str, enum.Enum):
    """Which provider endpoint a raw body came from."""

    CURRENT = "weather"
    FORECAST = "forecast"


@dataclass(frozen=True)
class WeatherObservation:
    """One normalized weather sample: now, or one 3-hour forecast slot."""

    description: str
    """Condition group, e.g. 'Rain', 'Clouds'."""

    icon_code: str
    """Provider icon code, e.g. '10d'. Used for emoji rendering."""

    observed_at: datetime | None = None
    """Timezone-aware local time of the sample. None when the provider omits it."""


@dataclass(frozen=True)
class DayWindow:
    """Half-open local-time interval [start, end) covering one calendar day."""

    start: datetime
    end: datetime

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


class QueryStatus(str, enum.Enum):
    OK = "ok"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of a weather query, for callers that prefer values to exceptions.

    value is a WeatherObservation for current-weather queries and a list of
    them for forecast queries. error is set whenever status is not OK.
    """

    status: QueryStatus
    value: Any = None
    error: WeatherError | None = None

    @property
    def ok(self) -> bool:
        return self.status is QueryStatus.OK

    @classmethod
    def success(cls, value: Any) -> QueryResult:
        return cls(status=QueryStatus.OK, value=value)

    @classmethod
    def failure(cls, error: WeatherError) -> QueryResult:
        if isinstance(error, TransportError):
            status = QueryStatus.TRANSPORT_ERROR
        elif isinstance(error, MalformedResponseError):
            status = QueryStatus.MALFORMED_RESPONSE
        else:
            raise TypeError(f"Not a query failure: {type(error).__name__}")
        return cls(status=status, error=error)
