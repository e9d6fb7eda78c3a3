"""Great-circle distance on a spherical Earth."""

from __future__ import annotations

import math
from collections.abc import Sequence

from saillog.contracts.common import GeoPoint

EARTH_RADIUS_NM = 3440.065


def haversine_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance in nautical miles.

    Inputs are not range-checked. Any non-finite coordinate yields NaN.
    """
    if not all(math.isfinite(v) for v in (lat1, lon1, lat2, lon2)):
        return math.nan
    la1, lo1 = math.radians(lat1), math.radians(lon1)
    la2, lo2 = math.radians(lat2), math.radians(lon2)
    dlat = la2 - la1
    dlon = lo2 - lo1
    a = math.sin(dlat / 2) ** 2 + math.cos(la1) * math.cos(la2) * math.sin(dlon / 2) ** 2
    # rounding can push near-antipodal points just past 1
    if a > 1.0:
        a = 1.0
    return 2 * math.asin(math.sqrt(a)) * EARTH_RADIUS_NM


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """Distance between two points in nautical miles."""
    return haversine_nm(a.latitude, a.longitude, b.latitude, b.longitude)


def route_distance(points: Sequence[GeoPoint]) -> float:
    """Length of a path: sum of consecutive segments, not start-to-end displacement."""
    return sum(
        (distance(prev, cur) for prev, cur in zip(points, points[1:])),
        0.0,
    )
