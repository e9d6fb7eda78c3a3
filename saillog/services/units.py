"""Unit conversion for display.

Each quantity has a numeric half (``*_value``) for charts and calculations
and a display half (``convert_*``) returning a formatted label. Units are
resolved through the enums in ``saillog.contracts.enums``, so app-side
spellings like ``"nm"`` or ``"kts"`` work. An unrecognized unit falls back
to the base unit of the quantity.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import TypeVar

from saillog.contracts.enums import (
    DistanceUnit,
    PressureUnit,
    Quantity,
    SpeedUnit,
    TemperatureUnit,
)

logger = logging.getLogger(__name__)

METERS_PER_NM = 1852.0
METERS_PER_KM = 1000.0
METERS_PER_MILE = 1609.34

E = TypeVar("E", bound=Enum)

# unit -> (factor from base unit, label)
_DISTANCE: dict[DistanceUnit, tuple[float, str]] = {
    DistanceUnit.NAUTICAL_MILES: (1 / METERS_PER_NM, "NM"),
    DistanceUnit.KILOMETERS: (1 / METERS_PER_KM, "km"),
    DistanceUnit.MILES: (1 / METERS_PER_MILE, "mi"),
    DistanceUnit.METERS: (1.0, "m"),
}

_SPEED: dict[SpeedUnit, tuple[float, str]] = {
    SpeedUnit.KNOTS: (1.944, "kts"),
    SpeedUnit.KPH: (3.6, "km/h"),
    SpeedUnit.MPH: (2.237, "mph"),
    SpeedUnit.MPS: (1.0, "m/s"),
}


def _resolve(enum_cls: type[E], unit: E | str, default: E) -> E:
    try:
        return enum_cls(unit)
    except ValueError:
        logger.debug("Unknown %s %r, using %s", enum_cls.__name__, unit, default.value)
        return default


# ---------------------------------------------------------------------------
# Distance (base: meters)
# ---------------------------------------------------------------------------


def distance_value(meters: float, unit: DistanceUnit | str) -> float:
    factor, _ = _DISTANCE[_resolve(DistanceUnit, unit, DistanceUnit.METERS)]
    return meters * factor


def convert_distance(meters: float, unit: DistanceUnit | str) -> str:
    """``1852`` in ``"nm"`` -> ``"1.0 NM"``."""
    resolved = _resolve(DistanceUnit, unit, DistanceUnit.METERS)
    factor, label = _DISTANCE[resolved]
    return f"{meters * factor:.1f} {label}"


def nm_to_meters(nm: float) -> float:
    return nm * METERS_PER_NM


# ---------------------------------------------------------------------------
# Speed (base: meters per second)
# ---------------------------------------------------------------------------


def speed_value(mps: float, unit: SpeedUnit | str) -> float:
    factor, _ = _SPEED[_resolve(SpeedUnit, unit, SpeedUnit.MPS)]
    return mps * factor


def convert_speed(mps: float, unit: SpeedUnit | str) -> str:
    factor, label = _SPEED[_resolve(SpeedUnit, unit, SpeedUnit.MPS)]
    return f"{mps * factor:.1f} {label}"


# ---------------------------------------------------------------------------
# Temperature (base: Celsius)
# ---------------------------------------------------------------------------


def temperature_value(celsius: float, unit: TemperatureUnit | str) -> float:
    if _resolve(TemperatureUnit, unit, TemperatureUnit.CELSIUS) is TemperatureUnit.FAHRENHEIT:
        return celsius * 9 / 5 + 32
    return celsius


def convert_temperature(celsius: float, unit: TemperatureUnit | str) -> str:
    resolved = _resolve(TemperatureUnit, unit, TemperatureUnit.CELSIUS)
    symbol = "°F" if resolved is TemperatureUnit.FAHRENHEIT else "°C"
    return f"{temperature_value(celsius, resolved):.1f}{symbol}"


# ---------------------------------------------------------------------------
# Pressure (base: hectopascals)
# ---------------------------------------------------------------------------

HPA_TO_INHG = 0.02953


def pressure_value(hpa: float, unit: PressureUnit | str) -> float:
    if _resolve(PressureUnit, unit, PressureUnit.HPA) is PressureUnit.INHG:
        return hpa * HPA_TO_INHG
    return hpa


def convert_pressure(hpa: float, unit: PressureUnit | str) -> str:
    if _resolve(PressureUnit, unit, PressureUnit.HPA) is PressureUnit.INHG:
        return f"{hpa * HPA_TO_INHG:.2f} inHg"
    return f"{hpa:.1f} hPa"


# ---------------------------------------------------------------------------
# Dispatch by quantity
# ---------------------------------------------------------------------------

_CONVERTERS: dict[Quantity, tuple[Callable[[float, str], float], Callable[[float, str], str]]] = {
    Quantity.DISTANCE: (distance_value, convert_distance),
    Quantity.SPEED: (speed_value, convert_speed),
    Quantity.TEMPERATURE: (temperature_value, convert_temperature),
    Quantity.PRESSURE: (pressure_value, convert_pressure),
}


def convert(quantity: Quantity | str, value: float, unit: str) -> tuple[float, str]:
    """Return ``(numeric value, display string)`` for *value* in its base unit.

    Raises ``ValueError`` for an unknown quantity.
    """
    to_value, to_display = _CONVERTERS[Quantity(quantity)]
    return to_value(value, unit), to_display(value, unit)


def format_duration(start: datetime, end: datetime | None) -> str:
    """``"3h 25m"`` between two instants, ``"In Progress"`` when *end* is None."""
    if end is None:
        return "In Progress"
    total_minutes = math.floor((end - start).total_seconds() / 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"
