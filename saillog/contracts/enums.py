"""Enumerations shared across all SailLog contracts."""

from enum import Enum


def _match_alias(cls, value: object, aliases: dict[str, str]):
    """Resolve case-insensitive values and app-side aliases to a member."""
    if not isinstance(value, str):
        return None
    lowered = value.strip().lower()
    lowered = aliases.get(lowered, lowered).lower()
    for member in cls:
        if member.value.lower() == lowered:
            return member
    return None


class DistanceUnit(str, Enum):
    NAUTICAL_MILES = "nautical_miles"
    KILOMETERS = "kilometers"
    MILES = "miles"
    METERS = "meters"

    @classmethod
    def _missing_(cls, value: object):
        return _match_alias(cls, value, {
            "nm": "nautical_miles",
            "nautical": "nautical_miles",
            "km": "kilometers",
            "mi": "miles",
            "m": "meters",
        })


class SpeedUnit(str, Enum):
    KNOTS = "knots"
    KPH = "kph"
    MPH = "mph"
    MPS = "mps"

    @classmethod
    def _missing_(cls, value: object):
        return _match_alias(cls, value, {
            "kt": "knots",
            "kts": "knots",
            "kn": "knots",
            "km/h": "kph",
            "kmh": "kph",
            "m/s": "mps",
        })


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @classmethod
    def _missing_(cls, value: object):
        return _match_alias(cls, value, {"c": "celsius", "f": "fahrenheit"})


class PressureUnit(str, Enum):
    HPA = "hPa"
    INHG = "inHg"

    @classmethod
    def _missing_(cls, value: object):
        return _match_alias(cls, value, {"mb": "hPa", "mbar": "hPa"})


class Quantity(str, Enum):
    """Physical quantity handled by the unit converters."""
    DISTANCE = "distance"
    SPEED = "speed"
    TEMPERATURE = "temperature"
    PRESSURE = "pressure"


class TimeOfDay(str, Enum):
    """Bucket of a trip's local start hour."""
    MORNING = "morning"  # [6, 12)
    AFTERNOON = "afternoon"  # [12, 18)
    EVENING = "evening"  # [18, 24)
    NIGHT = "night"  # [0, 6)


class AlertType(str, Enum):
    HIGH_WIND = "high_wind"
    GALE = "gale"
    STORM = "storm"
    PRESSURE_DROP = "pressure_drop"
