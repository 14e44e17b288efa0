"""
Shared test fixtures for the dreich test suite.

Provides:
- a controllable clock for cache freshness tests
- an httpx.Client backed by MockTransport that records every request

Body factories live in services.dreich.tests.helpers.factories. No test
touches the network or the real ~/.dreich directory.
"""

import os

import httpx
import pytest

# Ensure test env vars before any app imports
os.environ.setdefault("DREICH_CONFIG", "/nonexistent/dreich-test.conf.json")
os.environ.setdefault("DREICH_CACHE_DIR", "/nonexistent/dreich-test-cache")

from services.dreich.tests.helpers.factories import FakeClock, ProviderStub  # noqa: E402


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def provider():
    return ProviderStub()


@pytest.fixture
def http_client(provider):
    client = httpx.Client(transport=httpx.MockTransport(provider))
    yield client
    client.close()
