"""Tests for weather alert evaluation."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from saillog.contracts.enums import AlertType
from saillog.contracts.trip import WeatherObservation
from saillog.contracts.weather import AlertSettings
from saillog.services.weather.alerts import evaluate_alerts, prune_history

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


def _obs(
    wind: float = 10,
    minutes_ago: float = 0,
    pressure: float | None = 1013,
) -> WeatherObservation:
    return WeatherObservation(
        timestamp=NOW - timedelta(minutes=minutes_ago),
        wind_speed=wind,
        wind_direction=180,
        pressure=pressure,
    )


def _types(alerts) -> list[str]:
    return [a.alert_type for a in alerts]


class TestWindAlerts:
    def test_quiet_conditions(self):
        assert evaluate_alerts(_obs(wind=12)) == []

    def test_high_wind_at_threshold(self):
        alerts = evaluate_alerts(_obs(wind=20))
        assert _types(alerts) == [AlertType.HIGH_WIND]
        assert alerts[0].title == "High Wind Alert"
        assert alerts[0].body == "Wind speed has reached 20.0 knots"

    def test_custom_threshold(self):
        settings = AlertSettings(wind_speed_threshold=12)
        assert _types(evaluate_alerts(_obs(wind=12), settings=settings)) == [AlertType.HIGH_WIND]

    def test_gale(self):
        alerts = evaluate_alerts(_obs(wind=35))
        assert _types(alerts) == [AlertType.HIGH_WIND, AlertType.GALE]
        assert alerts[1].body == "Force 8 (Gale)"

    def test_storm_replaces_gale(self):
        alerts = evaluate_alerts(_obs(wind=50))
        assert _types(alerts) == [AlertType.HIGH_WIND, AlertType.STORM]
        assert alerts[1].title == "Storm Warning"

    def test_toggles(self):
        settings = AlertSettings(notify_on_gale=False, notify_on_storm=False)
        assert _types(evaluate_alerts(_obs(wind=50), settings=settings)) == [AlertType.HIGH_WIND]
        assert _types(evaluate_alerts(_obs(wind=35), settings=settings)) == [AlertType.HIGH_WIND]

    def test_disabled(self):
        assert evaluate_alerts(_obs(wind=70), settings=AlertSettings(enabled=False)) == []


class TestPressureDrop:
    def test_drop_within_last_hour(self):
        history = [_obs(minutes_ago=45, pressure=1015), _obs(minutes_ago=20, pressure=1012)]
        alerts = evaluate_alerts(_obs(pressure=1009), history=history)
        assert _types(alerts) == [AlertType.PRESSURE_DROP]
        assert alerts[0].body == "Barometric pressure has dropped 6.0 hPa in the last hour"

    def test_small_drop_ignored(self):
        history = [_obs(minutes_ago=30, pressure=1013)]
        assert evaluate_alerts(_obs(pressure=1010), history=history) == []

    def test_older_readings_outside_window(self):
        history = [_obs(minutes_ago=120, pressure=1025)]
        assert evaluate_alerts(_obs(pressure=1010), history=history) == []

    def test_history_order_does_not_matter(self):
        history = [_obs(minutes_ago=10, pressure=1011), _obs(minutes_ago=50, pressure=1016)]
        alerts = evaluate_alerts(_obs(pressure=1010), history=history)
        assert _types(alerts) == [AlertType.PRESSURE_DROP]

    def test_missing_pressure_skipped(self):
        history = [_obs(minutes_ago=40, pressure=1016), _obs(minutes_ago=20, pressure=None)]
        alerts = evaluate_alerts(_obs(pressure=1010), history=history)
        assert _types(alerts) == [AlertType.PRESSURE_DROP]

    def test_rising_pressure(self):
        history = [_obs(minutes_ago=40, pressure=1000)]
        assert evaluate_alerts(_obs(pressure=1010), history=history) == []


class TestPruneHistory:
    def test_keeps_last_day_sorted(self):
        history = [
            _obs(minutes_ago=30),
            _obs(minutes_ago=25 * 60),
            _obs(minutes_ago=90),
        ]
        pruned = prune_history(history, NOW)
        assert [o.timestamp for o in pruned] == [
            NOW - timedelta(minutes=90),
            NOW - timedelta(minutes=30),
        ]

    def test_custom_window(self):
        history = [_obs(minutes_ago=30), _obs(minutes_ago=90)]
        assert len(prune_history(history, NOW, window=timedelta(hours=1))) == 1
