"""Weather alert evaluation from the latest observation and recent history.

Only decides which alerts apply; scheduling and delivering notifications is
left to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from saillog.contracts.common import as_utc
from saillog.contracts.enums import AlertType
from saillog.contracts.trip import WeatherObservation
from saillog.contracts.weather import AlertSettings, WeatherAlert
from saillog.services.weather.beaufort import beaufort_force

HISTORY_WINDOW = timedelta(hours=24)
PRESSURE_WINDOW = timedelta(hours=1)

_GALE_FORCE = 8
_STORM_FORCE = 10


def prune_history(
    history: Iterable[WeatherObservation],
    now: datetime,
    window: timedelta = HISTORY_WINDOW,
) -> list[WeatherObservation]:
    """Observations newer than ``now - window``, oldest first."""
    cutoff = as_utc(now) - window
    return sorted(
        (obs for obs in history if obs.timestamp > cutoff),
        key=lambda obs: obs.timestamp,
    )


def evaluate_alerts(
    current: WeatherObservation,
    history: Iterable[WeatherObservation] = (),
    settings: AlertSettings | None = None,
    now: datetime | None = None,
) -> list[WeatherAlert]:
    """Return the alerts triggered by *current* given earlier observations.

    - High wind: ``wind_speed >= settings.wind_speed_threshold``.
    - Gale / storm: Beaufort force 8-9 / 10+, each behind its own toggle.
    - Pressure drop: over the last hour (history plus *current*), the first
      reading minus the last is at least ``pressure_drop_threshold``.

    *now* defaults to the timestamp of *current*.
    """
    settings = settings or AlertSettings()
    if not settings.enabled:
        return []
    now = as_utc(now) if now is not None else current.timestamp

    alerts: list[WeatherAlert] = []

    if current.wind_speed >= settings.wind_speed_threshold:
        alerts.append(WeatherAlert(
            alert_type=AlertType.HIGH_WIND,
            title="High Wind Alert",
            body=f"Wind speed has reached {current.wind_speed:.1f} knots",
        ))

    force = beaufort_force(current.wind_speed)
    if force.force >= _STORM_FORCE and settings.notify_on_storm:
        alerts.append(WeatherAlert(
            alert_type=AlertType.STORM,
            title="Storm Warning",
            body=f"Force {force.force} ({force.description})",
        ))
    elif _GALE_FORCE <= force.force < _STORM_FORCE and settings.notify_on_gale:
        alerts.append(WeatherAlert(
            alert_type=AlertType.GALE,
            title="Gale Warning",
            body=f"Force {force.force} ({force.description})",
        ))

    recent = prune_history([*history, current], now)
    hour_ago = now - PRESSURE_WINDOW
    pressures = [
        obs.pressure for obs in recent
        if obs.timestamp > hour_ago and obs.pressure is not None
    ]
    if len(pressures) > 1:
        drop = pressures[0] - pressures[-1]
        if drop >= settings.pressure_drop_threshold:
            alerts.append(WeatherAlert(
                alert_type=AlertType.PRESSURE_DROP,
                title="Pressure Drop Alert",
                body=f"Barometric pressure has dropped {drop:.1f} hPa in the last hour",
            ))

    return alerts
