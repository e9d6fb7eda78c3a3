"""Beaufort scale, sea state and compass-point naming from wind observations."""

from __future__ import annotations

import math

from saillog.contracts.weather import BeaufortForce

MPS_TO_KNOTS = 1.944

# (exclusive upper bound in kt, Beaufort description, sea state) for forces 0..11
_SCALE: list[tuple[float, str, str]] = [
    (1, "Calm", "Calm (rippled)"),
    (4, "Light air", "Calm (wavelets)"),
    (7, "Light breeze", "Smooth wavelets"),
    (11, "Gentle breeze", "Slight"),
    (17, "Moderate breeze", "Moderate"),
    (22, "Fresh breeze", "Rough"),
    (28, "Strong breeze", "Very rough"),
    (34, "Near gale", "High"),
    (41, "Gale", "Very high"),
    (48, "Strong gale", "Phenomenal"),
    (56, "Storm", "Phenomenal"),
    (64, "Violent storm", "Phenomenal"),
]
_FORCE_12 = ("Hurricane force", "Phenomenal")

_COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
]


def _classify(wind_speed_kt: float) -> tuple[int, str, str]:
    for force, (upper, description, sea) in enumerate(_SCALE):
        if wind_speed_kt < upper:
            return force, description, sea
    return 12, *_FORCE_12


def beaufort_force(wind_speed_kt: float) -> BeaufortForce:
    """Classify a wind speed on the Beaufort scale.

    Bounds are inclusive-lower / exclusive-upper: 0.9 kt is force 0, 1 kt is
    force 1, 3.9 kt is still force 1, anything from 64 kt is force 12.
    """
    force, description, _ = _classify(wind_speed_kt)
    return BeaufortForce(force=force, description=description)


def sea_state(wind_speed_kt: float) -> str:
    """Expected sea state for a sustained wind speed."""
    return _classify(wind_speed_kt)[2]


def wind_direction_text(degrees: float) -> str:
    """Nearest of the 16 compass points, e.g. ``247`` -> ``"WSW"``."""
    index = math.floor((degrees % 360) / 22.5 + 0.5)
    return _COMPASS_POINTS[index % 16]


def knots_from_mps(mps: float) -> float:
    return mps * MPS_TO_KNOTS
