"""
Factories for OpenWeatherMap bodies and test doubles shared across the suite.
"""

import json
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx

# UTC+1, no DST
LOCAL_TZ = timezone(timedelta(hours=1))


def ts(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> int:
    """Unix time of a wall-clock moment in LOCAL_TZ."""
    return int(datetime(year, month, day, hour, minute, second, tzinfo=LOCAL_TZ).timestamp())


# ---------------------------------------------------------------------------
# Provider body factories
# ---------------------------------------------------------------------------

def make_condition(main: str = "Clear", icon: str = "01d", description: str | None = None,
                   condition_id: int = 800) -> dict[str, Any]:
    return {
        "id": condition_id,
        "main": main,
        "description": description if description is not None else main.lower(),
        "icon": icon,
    }


def make_current_body(conditions: list[dict] | None = None, dt: int | None = 1524473400,
                      **extra: Any) -> bytes:
    """OpenWeatherMap /weather response, as raw bytes."""
    body: dict[str, Any] = {
        "coord": {"lon": -3.98, "lat": 55.87},
        "weather": conditions if conditions is not None else [
            make_condition("Drizzle", "09d", "light intensity drizzle rain", 310),
            make_condition("Rain", "10d", "light rain", 500),
        ],
        "base": "stations",
        "main": {"temp": 282.48, "pressure": 1008, "humidity": 87,
                 "temp_min": 282.15, "temp_max": 283.15},
        "visibility": 3200,
        "wind": {"speed": 7.7, "deg": 240},
        "clouds": {"all": 90},
        "sys": {"type": 1, "id": 5121, "country": "GB"},
        "id": 2657613,
        "name": "Airdrie",
        "cod": 200,
    }
    if dt is not None:
        body["dt"] = dt
    body.update(extra)
    return json.dumps(body).encode("utf-8")


def make_forecast_element(dt: int, main: str = "Clouds", icon: str = "04d",
                          conditions: list[dict] | None = None) -> dict[str, Any]:
    return {
        "dt": dt,
        "main": {"temp": 298.77, "pressure": 1005.93, "humidity": 87, "temp_kf": 0.26},
        "weather": conditions if conditions is not None else [make_condition(main, icon)],
        "clouds": {"all": 88},
        "wind": {"speed": 5.71, "deg": 229.501},
        "sys": {"pod": "d"},
        "dt_txt": datetime.fromtimestamp(dt, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S"),
    }


def make_forecast_body(elements: list[dict], list_key: str = "list") -> bytes:
    """OpenWeatherMap /forecast response, as raw bytes."""
    body = {
        "cod": "200",
        "message": 0.0045,
        "cnt": len(elements),
        "city": {"id": 1851632, "name": "Shuzenji",
                 "coord": {"lon": 138.933334, "lat": 34.966671}, "country": "JP"},
        list_key: elements,
    }
    return json.dumps(body).encode("utf-8")


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------

class FakeClock:
    """Callable clock for ResponseCache; advance() moves time forward."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ProviderStub:
    """
    Stands in for OpenWeatherMap behind httpx.MockTransport.

    Set .status / .body / .error before the call; inspect .requests after.
    """

    def __init__(self) -> None:
        self.status = 200
        self.body: bytes = make_current_body()
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status, content=self.body)

