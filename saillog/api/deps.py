"""FastAPI dependency injection wiring."""

from __future__ import annotations

from datetime import tzinfo

from fastapi import HTTPException, Query, Request

from saillog.config import default_timezone_name, resolve_timezone
from saillog.services.errors import WeatherServiceError
from saillog.services.weather.openweather_client import OpenWeatherClient


# ------------------------------------------------------------------
# Time zone used for local-hour bucketing
# ------------------------------------------------------------------


def get_timezone(
    tz: str | None = Query(
        None, description="IANA zone for time-of-day buckets (default SAILLOG_TZ or UTC)"
    ),
) -> tzinfo:
    try:
        return resolve_timezone(tz or default_timezone_name())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


# ------------------------------------------------------------------
# Weather provider (shares the app's HTTP client when running)
# ------------------------------------------------------------------


def get_openweather_client(request: Request) -> OpenWeatherClient:
    http_client = getattr(request.app.state, "http_client", None)
    try:
        return OpenWeatherClient(http_client=http_client)
    except WeatherServiceError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
