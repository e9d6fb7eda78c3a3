"""Fleet/period aggregation of recorded trips.

Everything here is a pure function of the trips passed in: no storage
access, no mutation of inputs, no validation. Malformed trips produce
negative or NaN figures instead of exceptions so a single bad record
cannot abort the roll-up of a whole logbook.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from datetime import datetime, tzinfo

from saillog.contracts.common import as_utc
from saillog.contracts.enums import TimeOfDay
from saillog.contracts.stats import (
    MonthlyActivity,
    PopularSailingTime,
    SailingStats,
    TimeOfDayBreakdown,
    WeatherAverages,
    WindRoseBin,
)
from saillog.contracts.trip import Trip
from saillog.services.trip_stats import trip_stats

logger = logging.getLogger(__name__)

WIND_ROSE_SECTORS = 16
_SECTOR_DEG = 360 / WIND_ROSE_SECTORS


def month_key(moment: datetime) -> str:
    """``YYYY-MM`` of *moment* in UTC."""
    return as_utc(moment).strftime("%Y-%m")


def local_hour(moment: datetime, tz: tzinfo | None = None) -> int:
    """Hour of *moment* in *tz*, or in the system zone when *tz* is None."""
    return as_utc(moment).astimezone(tz).hour


def time_of_day(hour: int) -> TimeOfDay:
    if 6 <= hour < 12:
        return TimeOfDay.MORNING
    if 12 <= hour < 18:
        return TimeOfDay.AFTERNOON
    if 18 <= hour < 24:
        return TimeOfDay.EVENING
    return TimeOfDay.NIGHT


def aggregate(trips: Iterable[Trip], tz: tzinfo | None = None) -> SailingStats:
    """Fold trips into a ``SailingStats`` in a single pass.

    Monthly buckets are keyed by the UTC month of each trip's start and keep
    first-seen order; pass trips chronologically for a chronological series.
    Time-of-day buckets use the start hour in *tz* (system local when None).
    Open trips count with zero duration.
    """
    total_trips = 0
    total_distance = 0.0
    total_duration = 0.0
    max_speed = 0.0
    max_wind = 0.0
    monthly: dict[str, MonthlyActivity] = {}
    periods = {period: 0 for period in TimeOfDay}

    wind_speed_sum = 0.0
    wind_direction_sum = 0.0
    observations = 0
    temperature_sum = 0.0
    temperatures = 0

    for trip in trips:
        stats = trip_stats(trip)
        total_trips += 1
        total_distance += stats.distance_nm
        total_duration += stats.duration_minutes
        if stats.max_speed_kt > max_speed:
            max_speed = stats.max_speed_kt

        key = month_key(trip.start_time)
        bucket = monthly.get(key)
        if bucket is None:
            bucket = monthly[key] = MonthlyActivity()
        bucket.trips += 1
        bucket.distance_nm += stats.distance_nm
        bucket.duration_minutes += stats.duration_minutes

        periods[time_of_day(local_hour(trip.start_time, tz))] += 1

        for obs in trip.weather_log:
            wind_speed_sum += obs.wind_speed
            wind_direction_sum += obs.wind_direction
            observations += 1
            if obs.temperature is not None:
                temperature_sum += obs.temperature
                temperatures += 1
            if obs.wind_speed > max_wind:
                max_wind = obs.wind_speed

    conditions = WeatherAverages()
    if observations:
        conditions = WeatherAverages(
            wind_speed_kt=wind_speed_sum / observations,
            wind_direction_deg=wind_direction_sum / observations,
            temperature_c=temperature_sum / temperatures if temperatures else 0.0,
        )

    logger.debug(
        "Aggregated %d trips: %.1f NM over %.0f min, %d weather observations",
        total_trips, total_distance, total_duration, observations,
    )

    return SailingStats(
        total_trips=total_trips,
        total_distance_nm=total_distance,
        total_duration_minutes=total_duration,
        average_speed_kt=total_distance / (total_duration / 60) if total_duration else 0.0,
        average_trip_length_nm=total_distance / total_trips if total_trips else 0.0,
        max_speed_kt=max_speed,
        max_wind_speed_kt=max_wind,
        most_frequent_conditions=conditions,
        monthly_activity=monthly,
        time_of_day=TimeOfDayBreakdown(**{p.value: n for p, n in periods.items()}),
    )


def recent_months(stats: SailingStats, n: int = 6) -> dict[str, MonthlyActivity]:
    """The last *n* monthly buckets, in the order the aggregate holds them."""
    if n <= 0:
        return {}
    items = list(stats.monthly_activity.items())
    return dict(items[-n:])


def wind_rose(trips: Iterable[Trip]) -> list[WindRoseBin]:
    """Frequency of observed wind directions over 16 compass sectors.

    Sector *i* is centred on ``i * 22.5`` degrees. Observations with a
    non-finite direction are left out.
    """
    counts = [0] * WIND_ROSE_SECTORS
    speed_sums = [0.0] * WIND_ROSE_SECTORS
    total = 0
    for trip in trips:
        for obs in trip.weather_log:
            if not math.isfinite(obs.wind_direction):
                continue
            index = math.floor(obs.wind_direction % 360 / _SECTOR_DEG + 0.5) % WIND_ROSE_SECTORS
            counts[index] += 1
            speed_sums[index] += obs.wind_speed
            total += 1

    return [
        WindRoseBin(
            direction_deg=i * _SECTOR_DEG,
            frequency=counts[i] / total if total else 0.0,
            average_wind_speed_kt=speed_sums[i] / counts[i] if counts[i] else 0.0,
        )
        for i in range(WIND_ROSE_SECTORS)
    ]


def popular_sailing_times(
    trips: Iterable[Trip], tz: tzinfo | None = None
) -> list[PopularSailingTime]:
    """Number of trips started in each hour of the day (24 entries)."""
    hours = [0] * 24
    for trip in trips:
        hours[local_hour(trip.start_time, tz)] += 1
    return [PopularSailingTime(hour=h, trips=n) for h, n in enumerate(hours)]


def filter_trips_by_date(
    trips: Iterable[Trip],
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[Trip]:
    """Trips starting at or after *start* and ending at or before *end*.

    Open trips have no end and are excluded whenever *end* is given.
    Naive bounds are taken as UTC.
    """
    start = as_utc(start) if start is not None else None
    end = as_utc(end) if end is not None else None
    selected: list[Trip] = []
    for trip in trips:
        if start is not None and trip.start_time < start:
            continue
        if end is not None and (trip.end_time is None or trip.end_time > end):
            continue
        selected.append(trip)
    return selected

