"""Tests for unit conversion and duration formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from saillog.contracts.enums import DistanceUnit, Quantity, SpeedUnit
from saillog.services.units import (
    convert,
    convert_distance,
    convert_pressure,
    convert_speed,
    convert_temperature,
    distance_value,
    format_duration,
    nm_to_meters,
    pressure_value,
    speed_value,
    temperature_value,
)


class TestDistance:
    def test_nautical_miles(self):
        assert convert_distance(1852, DistanceUnit.NAUTICAL_MILES) == "1.0 NM"

    def test_app_alias(self):
        assert convert_distance(3704, "nm") == "2.0 NM"

    def test_kilometers(self):
        assert convert_distance(1852, "kilometers") == "1.9 km"

    def test_miles(self):
        assert convert_distance(1609.34, "miles") == "1.0 mi"

    def test_unknown_unit_falls_back_to_meters(self):
        assert convert_distance(1852, "furlongs") == "1852.0 m"

    def test_numeric_value(self):
        assert distance_value(3704, DistanceUnit.NAUTICAL_MILES) == pytest.approx(2.0)
        assert distance_value(nm_to_meters(10), "km") == pytest.approx(18.52)


class TestSpeed:
    def test_knots(self):
        assert convert_speed(10, SpeedUnit.KNOTS) == "19.4 kts"

    def test_kph(self):
        assert convert_speed(10, "kph") == "36.0 km/h"

    def test_mph(self):
        assert convert_speed(10, "mph") == "22.4 mph"

    def test_mps(self):
        assert convert_speed(10, "m/s") == "10.0 m/s"

    def test_numeric_value(self):
        assert speed_value(5, "knots") == pytest.approx(9.72)


class TestTemperature:
    def test_fahrenheit(self):
        assert convert_temperature(20, "fahrenheit") == "68.0°F"

    def test_celsius(self):
        assert convert_temperature(20, "celsius") == "20.0°C"

    def test_numeric_value(self):
        assert temperature_value(100, "fahrenheit") == pytest.approx(212)
        assert temperature_value(-5, "celsius") == -5


class TestPressure:
    def test_inhg_two_decimals(self):
        assert convert_pressure(1013.25, "inHg") == "29.92 inHg"

    def test_hpa(self):
        assert convert_pressure(1013, "hPa") == "1013.0 hPa"

    def test_numeric_value(self):
        assert pressure_value(1000, "inhg") == pytest.approx(29.53)


class TestConvert:
    def test_returns_value_and_display(self):
        value, display = convert(Quantity.SPEED, 10, "kts")
        assert value == pytest.approx(19.44)
        assert display == "19.4 kts"

    def test_quantity_as_string(self):
        value, display = convert("temperature", 0, "f")
        assert value == 32
        assert display == "32.0°F"

    def test_unknown_quantity(self):
        with pytest.raises(ValueError):
            convert("volume", 1, "l")


class TestFormatDuration:
    START = datetime(2025, 6, 15, 8, 0, tzinfo=timezone.utc)

    def test_hours_and_minutes(self):
        end = self.START + timedelta(hours=3, minutes=25, seconds=40)
        assert format_duration(self.START, end) == "3h 25m"

    def test_in_progress(self):
        assert format_duration(self.START, None) == "In Progress"

    def test_under_a_minute(self):
        assert format_duration(self.START, self.START + timedelta(seconds=59)) == "0h 0m"
