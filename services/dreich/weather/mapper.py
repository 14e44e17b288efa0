"""
Provider JSON -> WeatherObservation.

Both endpoints go through the same timestamp conversion so that forecast
slots and current observations land in the same local timezone, which the
day-window filter depends on.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo

from pydantic import ValidationError

from services.dreich.weather.errors import MalformedResponseError
from services.dreich.weather.schemas import (
    ConditionData,
    CurrentWeatherResponse,
    ForecastResponse,
)
from services.dreich.weather.types import ResponseKind, WeatherObservation

logger = logging.getLogger(__name__)


def to_local(epoch_seconds: int | None, tz: tzinfo | None = None) -> datetime | None:
    """Whole-second Unix time -> aware datetime in tz (process local zone if None)."""
    if epoch_seconds is None:
        return None
    try:
        moment = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
        return moment.astimezone(tz)
    except (OverflowError, OSError, ValueError) as exc:
        raise MalformedResponseError(f"timestamp {epoch_seconds} out of range: {exc}") from exc


def _primary_condition(conditions: list[ConditionData], where: str) -> ConditionData:
    if not conditions:
        raise MalformedResponseError(f"empty weather condition list in {where}")
    return conditions[0]


def _observation(
    conditions: list[ConditionData],
    epoch_seconds: int | None,
    where: str,
    tz: tzinfo | None,
) -> WeatherObservation:
    primary = _primary_condition(conditions, where)
    return WeatherObservation(
        description=primary.main or primary.description,
        icon_code=primary.icon,
        observed_at=to_local(epoch_seconds, tz),
    )


def map_current(raw: bytes | str, tz: tzinfo | None = None) -> WeatherObservation:
    try:
        payload = CurrentWeatherResponse.model_validate_json(raw)
    except ValidationError as exc:
        raise MalformedResponseError(f"invalid current weather response: {exc}") from exc
    return _observation(payload.conditions, payload.dt, "current weather response", tz)


def map_forecast(raw: bytes | str, tz: tzinfo | None = None) -> list[WeatherObservation]:
    try:
        payload = ForecastResponse.model_validate_json(raw)
    except ValidationError as exc:
        raise MalformedResponseError(f"invalid forecast response: {exc}") from exc

    observations = [
        _observation(element.conditions, element.dt, f"forecast element {i}", tz)
        for i, element in enumerate(payload.forecasts)
    ]
    logger.debug("Mapped %d forecast slots", len(observations))
    return observations


def map_response(
    raw: bytes | str,
    kind: ResponseKind,
    tz: tzinfo | None = None,
) -> list[WeatherObservation]:
    """
    Decode a raw provider body into observations.

    CURRENT yields exactly one observation; FORECAST yields one per slot in
    provider order.

    Raises:
        MalformedResponseError: invalid JSON, wrong shape, or an empty
            weather-condition list anywhere in the body.
    """
    if kind is ResponseKind.CURRENT:
        return [map_current(raw, tz)]
    if kind is ResponseKind.FORECAST:
        return map_forecast(raw, tz)
    raise ValueError(f"Unknown response kind: {kind!r}")
