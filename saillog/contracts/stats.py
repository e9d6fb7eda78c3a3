"""Trip and fleet statistics, calculated, never persisted.

All values are raw numbers in the units named by their suffix. Display
formatting lives in ``saillog.services.units``; chart consumers read these
fields directly.

No range constraints are declared: a malformed trip (end before start,
non-finite coordinates) yields negative or NaN figures that must still
serialize.
"""

from pydantic import Field

from saillog.contracts.common import SailLogModel


class TripStats(SailLogModel):
    """Scalar metrics of a single trip."""

    distance_nm: float = Field(0.0, description="Sum of great-circle segment lengths")
    duration_minutes: float = Field(0.0, description="0 while the trip is open")
    average_speed_kt: float = 0.0
    max_speed_kt: float = Field(0.0, description="Highest recorded GPS speed")


class MonthlyActivity(SailLogModel):
    trips: int = 0
    distance_nm: float = 0.0
    duration_minutes: float = 0.0


class TimeOfDayBreakdown(SailLogModel):
    """Trip counts by local start hour."""

    morning: int = 0
    afternoon: int = 0
    evening: int = 0
    night: int = 0


class WeatherAverages(SailLogModel):
    wind_speed_kt: float = 0.0
    wind_direction_deg: float = 0.0
    temperature_c: float = 0.0


class SailingStats(SailLogModel):
    """Aggregate over a collection of trips.

    ``monthly_activity`` is keyed ``YYYY-MM`` and iterates in the order each
    month was first seen, so callers can slice the last N months.

    ``max_speed_kt`` is the vessel's highest GPS speed across trips;
    the strongest wind observed is reported separately as ``max_wind_speed_kt``.
    """

    total_trips: int = 0
    total_distance_nm: float = 0.0
    total_duration_minutes: float = 0.0
    average_speed_kt: float = 0.0
    average_trip_length_nm: float = 0.0
    max_speed_kt: float = 0.0
    max_wind_speed_kt: float = 0.0
    most_frequent_conditions: WeatherAverages = Field(default_factory=WeatherAverages)
    monthly_activity: dict[str, MonthlyActivity] = Field(default_factory=dict)
    time_of_day: TimeOfDayBreakdown = Field(default_factory=TimeOfDayBreakdown)


class WindRoseBin(SailLogModel):
    """Share of weather observations whose wind comes from one of 16 sectors."""

    direction_deg: float
    frequency: float = Field(0.0, description="0..1 share of all observations")
    average_wind_speed_kt: float = 0.0


class PopularSailingTime(SailLogModel):
    hour: int = Field(..., ge=0, le=23)
    trips: int = 0
