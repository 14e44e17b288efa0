"""
Terminal rendering for weather observations.

OpenWeatherMap icon codes are '<condition><d|n>' (day/night). Day and night
share a glyph except for clear sky.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from services.dreich.weather.types import WeatherObservation

ICON_EMOJI: Mapping[str, str] = MappingProxyType({
    "01d": "\u2600\ufe0f",    # sunny
    "01n": "\U0001f319",      # crescent moon
    "02d": "\u26c5",          # partly sunny
    "02n": "\u26c5",
    "03d": "\u2601\ufe0f",    # cloud
    "03n": "\u2601\ufe0f",
    "04d": "\u2601\ufe0f",
    "04n": "\u2601\ufe0f",
    "09d": "\u2614",          # umbrella
    "09n": "\u2614",
    "10d": "\u2614",
    "10n": "\u2614",
    "11d": "\u26a1",          # zap
    "11n": "\u26a1",
    "13d": "\u2744\ufe0f",    # snowflake
    "13n": "\u2744\ufe0f",
    "50d": "\U0001f301",      # foggy
    "50n": "\U0001f301",
})

TIME_FORMAT = "%H:%M"


def icon_to_emoji(icon_code: str, table: Mapping[str, str] = ICON_EMOJI) -> str:
    """Glyph for an icon code, or '' for codes we have no glyph for."""
    return table.get(icon_code, "")


def render_condition(obs: WeatherObservation, use_emoji: bool = False) -> str:
    if use_emoji:
        return icon_to_emoji(obs.icon_code)
    return obs.description


def render_current(obs: WeatherObservation, use_emoji: bool = False) -> str:
    return render_condition(obs, use_emoji)


def render_forecast(observations: list[WeatherObservation], use_emoji: bool = False) -> list[str]:
    """One 'HH:MM<TAB>condition' line per slot."""
    lines = []
    for obs in observations:
        stamp = obs.observed_at.strftime(TIME_FORMAT) if obs.observed_at else "--:--"
        lines.append(f"{stamp}\t{render_condition(obs, use_emoji)}")
    return lines
