"""SailLog data contracts: Pydantic v2 models for trip analytics.

Recorded (produced by the trip-recording app, read-only here)
-------------------------------------------------------------
- ``Trip`` — start/end time, ordered GPS ``route``, unordered ``weather_log``, crew
- ``RoutePoint`` — GPS fix with optional speed and heading
- ``WeatherObservation`` — wind, temperature, pressure reading

Calculated (never persisted)
----------------------------
- ``TripStats`` — distance, duration, average and max speed of one trip
- ``SailingStats`` — totals, averages, monthly and time-of-day breakdowns
- ``WindRoseBin`` / ``PopularSailingTime`` — chart series
- ``BeaufortForce`` — wind classification
- ``WeatherAlert`` — threshold crossings, evaluated against ``AlertSettings``
"""

from saillog.contracts.enums import (
    AlertType,
    DistanceUnit,
    PressureUnit,
    Quantity,
    SpeedUnit,
    TemperatureUnit,
    TimeOfDay,
)
from saillog.contracts.common import GeoPoint, SailLogModel, UtcDatetime, as_utc
from saillog.contracts.trip import CrewMember, RoutePoint, Trip, WeatherObservation
from saillog.contracts.stats import (
    MonthlyActivity,
    PopularSailingTime,
    SailingStats,
    TimeOfDayBreakdown,
    TripStats,
    WeatherAverages,
    WindRoseBin,
)
from saillog.contracts.weather import AlertSettings, BeaufortForce, WeatherAlert

__all__ = [
    # Enums
    "AlertType",
    "DistanceUnit",
    "PressureUnit",
    "Quantity",
    "SpeedUnit",
    "TemperatureUnit",
    "TimeOfDay",
    # Common
    "GeoPoint",
    "SailLogModel",
    "UtcDatetime",
    "as_utc",
    # Recorded
    "CrewMember",
    "RoutePoint",
    "Trip",
    "WeatherObservation",
    # Calculated
    "MonthlyActivity",
    "PopularSailingTime",
    "SailingStats",
    "TimeOfDayBreakdown",
    "TripStats",
    "WeatherAverages",
    "WindRoseBin",
    "AlertSettings",
    "BeaufortForce",
    "WeatherAlert",
]
