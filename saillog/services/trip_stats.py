"""Per-trip statistics: distance, duration, average and max speed."""

from __future__ import annotations

from saillog.contracts.stats import TripStats
from saillog.contracts.trip import Trip
from saillog.services.geo import route_distance


def trip_duration_minutes(trip: Trip) -> float:
    """Elapsed minutes between start and end; 0 while the trip is open.

    An end before the start gives a negative value, passed through as-is.
    """
    if trip.end_time is None:
        return 0.0
    return (trip.end_time - trip.start_time).total_seconds() / 60


def trip_stats(trip: Trip) -> TripStats:
    """Reduce a trip's route to scalar metrics.

    - Distance sums every segment of the route; fewer than two fixes gives 0.
    - Max speed comes from the fixes that close a segment (``route[1:]``).
      The opening fix is logged when recording starts, so a single-fix
      route reports 0.
    - Average speed is distance over elapsed hours, 0 when the duration is
      not positive.
    """
    distance_nm = route_distance(trip.route)
    duration_minutes = trip_duration_minutes(trip)

    max_speed_kt = max(
        (p.speed for p in trip.route[1:] if p.speed is not None),
        default=0.0,
    )

    average_speed_kt = 0.0
    if duration_minutes > 0:
        average_speed_kt = distance_nm / (duration_minutes / 60)

    return TripStats(
        distance_nm=distance_nm,
        duration_minutes=duration_minutes,
        average_speed_kt=average_speed_kt,
        max_speed_kt=max_speed_kt,
    )
