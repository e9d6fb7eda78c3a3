"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from saillog.api.app import app
from saillog.api.deps import get_openweather_client
from saillog.services.weather.openweather_client import OpenWeatherClient
from tests.api.payloads import OPENWEATHER_RESPONSE


@pytest.fixture
def weather_http():
    """HTTP client answering every request with a canned OpenWeatherMap payload."""
    transport = httpx.MockTransport(
        lambda req: httpx.Response(200, json=OPENWEATHER_RESPONSE)
    )
    return httpx.AsyncClient(transport=transport)


@pytest.fixture
async def test_app(monkeypatch, weather_http):
    """FastAPI app with dependency overrides for testing."""
    monkeypatch.setenv("SAILLOG_TZ", "UTC")
    monkeypatch.setenv("OPENWEATHER_API_KEY", "test-key")

    # Route outbound weather calls to the mock transport
    app.dependency_overrides[get_openweather_client] = lambda: OpenWeatherClient(
        http_client=weather_http
    )
    yield app

    app.dependency_overrides.clear()
    await weather_http.aclose()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
