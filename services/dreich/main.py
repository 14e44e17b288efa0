"""
dreich — a weather CLI.

Usage:
    dreich                          # current weather for the default location
    dreich -l "Glasgow,uk"          # current weather for Glasgow
    dreich -l "Glasgow,uk" -t       # tomorrow's 3-hourly forecast
    dreich -e                       # render as emoji

The OpenWeatherMap APPID comes from --appid, $OPEN_WEATHER_MAP_APPID or
"app_id" in ~/.dreich.conf.json, in that order.

Exits 0 on success, 1 if the query failed, 2 on usage/config errors.
"""

from __future__ import annotations

import argparse
import logging
import sys

import httpx

from services.dreich.config import Settings, settings
from services.dreich.display import render_current, render_forecast
from services.dreich.weather.cache import ResponseCache
from services.dreich.weather.service import WeatherQueryService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_QUERY_FAILED = 1
EXIT_USAGE = 2


def build_parser(config: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dreich", description="A weather CLI tool")
    parser.add_argument("-a", "--appid", metavar="APPID", help="OpenWeatherMap APPID")
    parser.add_argument("-e", "--emoji", action="store_true", help="show weather as emoji")
    parser.add_argument(
        "-l", "--location",
        help=f"location to get weather for (default: {config.default_location})",
    )
    parser.add_argument("-t", "--tomorrow", action="store_true", help="get the forecast for tomorrow")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {config.app_version}")
    return parser


def main(
    argv: list[str] | None = None,
    config: Settings | None = None,
    http_client: httpx.Client | None = None,
) -> int:
    config = config or settings
    args = build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app_id = args.appid or config.app_id
    if not app_id:
        print(
            "dreich: no OpenWeatherMap APPID; pass --appid, set OPEN_WEATHER_MAP_APPID "
            "or add app_id to ~/.dreich.conf.json",
            file=sys.stderr,
        )
        return EXIT_USAGE

    location = args.location or config.default_location

    cache = ResponseCache(config.cache_dir, freshness_seconds=config.cache_ttl_s)
    cache.ensure_dir()

    with WeatherQueryService(
        api_key=app_id,
        cache=cache,
        base_url=config.base_url,
        http_client=http_client,
        timeout=config.weather_api_timeout_s,
    ) as service:
        if args.tomorrow:
            result = service.query_next_day_forecast(location)
            lines = render_forecast(result.value, args.emoji) if result.ok else []
        else:
            result = service.query_current_weather(location)
            lines = [render_current(result.value, args.emoji)] if result.ok else []

    if not result.ok:
        print(f"dreich: {result.error}", file=sys.stderr)
        return EXIT_QUERY_FAILED

    for line in lines:
        print(line)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
