"""OpenWeatherMap client for current conditions at a position."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone

import httpx

from saillog.contracts.trip import WeatherObservation
from saillog.services.errors import WeatherServiceError
from saillog.services.weather.beaufort import beaufort_force, knots_from_mps

logger = logging.getLogger(__name__)

BASE_URL = "https://api.openweathermap.org/data/2.5/weather"


def fallback_observation() -> WeatherObservation:
    """Neutral reading logged when the provider cannot be reached."""
    return WeatherObservation(
        timestamp=datetime.now(tz=timezone.utc),
        wind_speed=0.0,
        wind_direction=0.0,
        pressure=1013.0,
        temperature=20.0,
        notes="Weather data unavailable",
    )


class OpenWeatherClient:
    """Async HTTP client for the OpenWeatherMap current-weather API.

    The API key comes from ``OPENWEATHER_API_KEY`` unless passed explicitly.
    """

    def __init__(
        self,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key or os.environ.get("OPENWEATHER_API_KEY")
        if not self._api_key:
            raise WeatherServiceError("OPENWEATHER_API_KEY is not set")
        self._client = http_client or httpx.AsyncClient(timeout=15.0)

    async def get_current_weather(
        self, latitude: float, longitude: float
    ) -> WeatherObservation:
        """Fetch current conditions, wind converted to knots.

        Network and payload errors are logged and replaced by
        ``fallback_observation()`` so trip recording can continue.
        """
        params = {
            "lat": latitude,
            "lon": longitude,
            "appid": self._api_key,
            "units": "metric",
        }
        try:
            resp = await self._client.get(BASE_URL, params=params)
            resp.raise_for_status()
            return _parse_current(resp.json())
        except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError) as exc:
            logger.warning(
                "Weather lookup failed at %.4f,%.4f: %s", latitude, longitude, exc
            )
            return fallback_observation()


def _parse_current(data: dict) -> WeatherObservation:
    """Parse an OpenWeatherMap ``/weather`` response (metric units)."""
    wind = data["wind"]
    main = data["main"]
    wind_speed_kt = knots_from_mps(wind["speed"])

    description = data["weather"][0]["description"]
    notes = f"{description}, {beaufort_force(wind_speed_kt).description}"

    ts = data.get("dt")
    timestamp = (
        datetime.fromtimestamp(ts, tz=timezone.utc)
        if ts is not None
        else datetime.now(tz=timezone.utc)
    )

    return WeatherObservation(
        timestamp=timestamp,
        wind_speed=wind_speed_kt,
        wind_direction=wind.get("deg", 0),
        pressure=main.get("pressure"),
        temperature=main.get("temp"),
        notes=notes,
    )
