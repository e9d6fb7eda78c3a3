"""Trip, RoutePoint, WeatherObservation: recorded sailing data.

These are the inputs of the analytics services. They are produced by the
trip-recording side of the app and are treated here as immutable values:
nothing in ``saillog.services`` mutates them.

Validation is structural only. Coordinates, wind speeds and the ordering of
``start_time`` / ``end_time`` are not checked, so one malformed trip never
prevents a fleet from being aggregated.
"""

from typing import Any

from pydantic import Field, model_validator
from pydantic.alias_generators import to_camel

from saillog.contracts.common import GeoPoint, SailLogModel, UtcDatetime


class RoutePoint(GeoPoint):
    """A GPS fix recorded during a trip."""

    timestamp: UtcDatetime
    speed: float | None = Field(default=None, description="kt, when the fix carries one")
    heading: float | None = Field(default=None, description="degrees true")


class WeatherObservation(SailLogModel):
    """A weather reading logged during a trip. Order within a log is not guaranteed."""

    timestamp: UtcDatetime
    temperature: float | None = Field(default=None, description="deg C")
    wind_speed: float = Field(..., description="kt")
    wind_direction: float = Field(..., description="degrees, where the wind comes FROM")
    pressure: float | None = Field(default=None, description="hPa")
    notes: str = ""


class CrewMember(SailLogModel):
    name: str
    role: str = ""


class Trip(SailLogModel):
    """A single recorded sailing excursion.

    ``end_time`` is ``None`` while the trip is in progress. The route is
    ordered; the weather log is not.

    Older app versions stored ``weatherConditions`` and ``crewMembers``;
    those keys are folded into ``weather_log`` and ``crew`` when the
    current keys are absent.
    """

    id: str | None = None
    vessel_id: str | None = None
    start_time: UtcDatetime
    end_time: UtcDatetime | None = None
    route: list[RoutePoint] = Field(default_factory=list)
    weather_log: list[WeatherObservation] = Field(default_factory=list)
    crew: list[CrewMember] = Field(default_factory=list)
    equipment: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def fold_legacy_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for legacy, current in (
            ("weatherConditions", "weather_log"),
            ("crewMembers", "crew"),
        ):
            value = data.pop(legacy, None)
            alias = to_camel(current)
            if value is not None and current not in data and alias not in data:
                data[alias] = value
        return data

    @property
    def is_open(self) -> bool:
        return self.end_time is None
