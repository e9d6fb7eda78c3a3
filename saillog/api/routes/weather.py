"""Weather endpoints: Beaufort classification, current conditions, alerts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from pydantic import Field

from saillog.api.deps import get_openweather_client
from saillog.contracts.common import SailLogModel, UtcDatetime
from saillog.contracts.trip import WeatherObservation
from saillog.contracts.weather import AlertSettings
from saillog.services.weather.alerts import evaluate_alerts
from saillog.services.weather.beaufort import beaufort_force, sea_state
from saillog.services.weather.openweather_client import OpenWeatherClient

router = APIRouter(prefix="/weather", tags=["weather"])


class AlertRequest(SailLogModel):
    """Latest observation plus recent history to evaluate alerts against."""

    current: WeatherObservation
    history: list[WeatherObservation] = Field(default_factory=list)
    settings: AlertSettings = Field(default_factory=AlertSettings)
    now: UtcDatetime | None = Field(
        default=None, description="Evaluation time (defaults to the current observation)"
    )


@router.get("/beaufort")
async def classify_wind(
    wind_speed_kt: float = Query(..., ge=0, description="Sustained wind in kt"),
) -> dict:
    force = beaufort_force(wind_speed_kt)
    data = force.to_document()
    data["seaState"] = sea_state(wind_speed_kt)
    return data


@router.get("/current")
async def current_weather(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    client: OpenWeatherClient = Depends(get_openweather_client),
) -> dict:
    observation = await client.get_current_weather(latitude, longitude)
    return observation.to_document()


@router.post("/alerts")
async def weather_alerts(payload: AlertRequest) -> list[dict]:
    alerts = evaluate_alerts(
        payload.current, payload.history, payload.settings, now=payload.now
    )
    return [a.to_document() for a in alerts]
