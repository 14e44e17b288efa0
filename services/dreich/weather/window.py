"""
Select forecast slots that fall inside one local calendar day.

The window is half-open: a slot at exactly midnight belongs to the day that
starts at that midnight.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Iterable

from services.dreich.weather.types import DayWindow, WeatherObservation


def _local_midnight(day: date, tz: tzinfo | None) -> datetime:
    if tz is None:
        # naive -> aware in the process local zone, DST-correct for that date
        return datetime.combine(day, time.min).astimezone()
    return datetime.combine(day, time.min, tzinfo=tz)


def day_window(reference_day: date, tz: tzinfo | None = None) -> DayWindow:
    return DayWindow(
        start=_local_midnight(reference_day, tz),
        end=_local_midnight(reference_day + timedelta(days=1), tz),
    )


def select_day(
    observations: Iterable[WeatherObservation],
    reference_day: date,
    tz: tzinfo | None = None,
) -> list[WeatherObservation]:
    """
    Keep observations with start <= observed_at < end, in their original order.

    Observations without a timestamp cannot be placed in a day and are
    dropped. Returns [] when nothing matches.
    """
    window = day_window(reference_day, tz)
    return [
        obs for obs in observations
        if obs.observed_at is not None and obs.observed_at in window
    ]


def tomorrow(now: datetime | None = None, tz: tzinfo | None = None) -> date:
    """Date one day after now, read in tz (process local zone if None)."""
    now = now or datetime.now(tz).astimezone(tz)
    return now.date() + timedelta(days=1)
