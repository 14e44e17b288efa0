"""
Error types for weather queries.

TransportError and MalformedResponseError end the current query and are
reported to the user. CacheError subclasses never leave ResponseCache: a
read fault becomes a cache miss and a write fault is logged and dropped.
"""

from __future__ import annotations


class WeatherError(Exception):
    """Base class. Carries the operation and location for user-facing messages."""

    def __init__(self, message: str, operation: str | None = None, location: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.location = location

    def __str__(self) -> str:
        if self.operation and self.location:
            return f"{self.operation} for {self.location!r} failed: {self.message}"
        return self.message


class TransportError(WeatherError):
    """Network, DNS, timeout, or non-success HTTP status from the provider."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        location: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, operation=operation, location=location)
        self.status_code = status_code


class MalformedResponseError(WeatherError):
    """Body is not valid JSON for the expected schema, or has no weather conditions."""


class CacheError(WeatherError):
    pass


class CacheReadError(CacheError):
    pass


class CacheWriteError(CacheError):
    pass
