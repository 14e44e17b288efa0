"""
WeatherQueryService — OpenWeatherMap client with a file-backed response cache.

Flow per query:
  - build the request URL for the endpoint + location (no API key)
  - ResponseCache.get(url): a fresh body skips the network entirely
  - on miss: GET url&APPID=..., write the body back into the cache
  - map the body to WeatherObservation(s)
  - next-day queries: keep only tomorrow's slots

One network round trip at most, no retries. Transport and mapping failures
end the query; cache faults never do.
"""

from __future__ import annotations

import logging
from datetime import date, tzinfo
from urllib.parse import urlencode

import httpx

from services.dreich.weather.cache import ResponseCache
from services.dreich.weather.errors import MalformedResponseError, TransportError
from services.dreich.weather.mapper import map_response
from services.dreich.weather.types import QueryResult, ResponseKind, WeatherObservation
from services.dreich.weather.window import select_day, tomorrow

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://api.openweathermap.org/data/2.5"

# HTTP timeout for OpenWeatherMap calls
_API_TIMEOUT_S = 8.0

_OP_CURRENT = "current weather"
_OP_NEXT_DAY = "next-day forecast"


def _provider_message(response: httpx.Response) -> str:
    """Best-effort 'message' field from an OpenWeatherMap error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text[:200]


class WeatherQueryService:
    """
    Current weather and next-day forecast for a named location.

    Usage:
        cache = ResponseCache(settings.cache_dir)
        with WeatherQueryService(api_key="...", cache=cache) as service:
            now = service.current_weather("Glasgow,uk")
            slots = service.next_day_forecast("Glasgow,uk")
    """

    def __init__(
        self,
        api_key: str,
        cache: ResponseCache,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.Client | None = None,
        timeout: float = _API_TIMEOUT_S,
        tz: tzinfo | None = None,
    ) -> None:
        """
        Args:
            api_key:     OpenWeatherMap APPID.
            cache:       ResponseCache for raw bodies.
            base_url:    Provider base URL, without trailing slash.
            http_client: Optional httpx.Client. One is created (and owned) if omitted.
            timeout:     Request timeout in seconds for an owned client.
            tz:          Timezone for observation times. None = process local zone.
        """
        self._api_key = api_key
        self._cache = cache
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)
        self._tz = tz

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> WeatherQueryService:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -- public queries ---------------------------------------------------

    def request_url(self, kind: ResponseKind, location: str) -> str:
        """Provider URL for kind + location. Also the cache key input."""
        return f"{self._base_url}/{kind.value}?{urlencode({'q': location})}"

    def current_weather(self, location: str) -> WeatherObservation:
        """
        Raises:
            TransportError, MalformedResponseError
        """
        raw = self._resolve(ResponseKind.CURRENT, location, _OP_CURRENT)
        return self._map(raw, ResponseKind.CURRENT, location, _OP_CURRENT)[0]

    def next_day_forecast(
        self,
        location: str,
        reference_day: date | None = None,
    ) -> list[WeatherObservation]:
        """
        Forecast slots for tomorrow (or reference_day) in local time.

        Empty list when the provider horizon does not reach that day.

        Raises:
            TransportError, MalformedResponseError
        """
        raw = self._resolve(ResponseKind.FORECAST, location, _OP_NEXT_DAY)
        forecast = self._map(raw, ResponseKind.FORECAST, location, _OP_NEXT_DAY)
        day = reference_day or tomorrow(tz=self._tz)
        selected = select_day(forecast, day, self._tz)
        logger.info(
            "Next-day forecast for %r: %d of %d slots on %s",
            location, len(selected), len(forecast), day.isoformat(),
        )
        return selected

    def query_current_weather(self, location: str) -> QueryResult:
        """current_weather() as a QueryResult instead of an exception."""
        try:
            return QueryResult.success(self.current_weather(location))
        except (TransportError, MalformedResponseError) as exc:
            logger.debug("Query failed: %s", exc)
            return QueryResult.failure(exc)

    def query_next_day_forecast(
        self,
        location: str,
        reference_day: date | None = None,
    ) -> QueryResult:
        """next_day_forecast() as a QueryResult instead of an exception."""
        try:
            return QueryResult.success(self.next_day_forecast(location, reference_day))
        except (TransportError, MalformedResponseError) as exc:
            logger.debug("Query failed: %s", exc)
            return QueryResult.failure(exc)

    # -- internals --------------------------------------------------------

    def _resolve(self, kind: ResponseKind, location: str, operation: str) -> bytes:
        url = self.request_url(kind, location)

        cached = self._cache.get(url)
        if cached is not None:
            logger.info("Serving %s for %r from cache", operation, location)
            return cached

        body = self._fetch(url, location, operation)
        self._cache.put(url, body)
        return body

    def _fetch(self, url: str, location: str, operation: str) -> bytes:
        logger.info("Fetching %s for %r from provider", operation, location)
        try:
            resp = self._client.get(f"{url}&{urlencode({'APPID': self._api_key})}")
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise TransportError(
                f"provider returned {status}: {_provider_message(exc.response)}",
                operation=operation,
                location=location,
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"{type(exc).__name__}: {exc}",
                operation=operation,
                location=location,
            ) from exc
        return resp.content

    def _map(
        self,
        raw: bytes,
        kind: ResponseKind,
        location: str,
        operation: str,
    ) -> list[WeatherObservation]:
        try:
            return map_response(raw, kind, self._tz)
        except MalformedResponseError as exc:
            raise MalformedResponseError(exc.message, operation=operation, location=location) from exc
