"""Stateless trip analytics endpoints. Trips are posted in the request body."""

from __future__ import annotations

from datetime import tzinfo

from fastapi import APIRouter, Depends, Query

from saillog.api.deps import get_timezone
from saillog.contracts.trip import Trip
from saillog.services.analytics import (
    aggregate,
    popular_sailing_times,
    recent_months,
    wind_rose,
)
from saillog.services.trip_stats import trip_stats

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.post("/stats")
async def sailing_stats(
    trips: list[Trip],
    months: int | None = Query(
        None, ge=1, description="Keep only the last N monthly buckets"
    ),
    tz: tzinfo = Depends(get_timezone),
) -> dict:
    stats = aggregate(trips, tz=tz)
    if months is not None:
        stats.monthly_activity = recent_months(stats, months)
    return stats.to_document()


@router.post("/trip-stats")
async def single_trip_stats(trip: Trip) -> dict:
    return trip_stats(trip).to_document()


@router.post("/wind-rose")
async def trips_wind_rose(trips: list[Trip]) -> list[dict]:
    return [b.to_document() for b in wind_rose(trips)]


@router.post("/popular-times")
async def trips_popular_times(
    trips: list[Trip],
    tz: tzinfo = Depends(get_timezone),
) -> list[dict]:
    return [p.to_document() for p in popular_sailing_times(trips, tz=tz)]
