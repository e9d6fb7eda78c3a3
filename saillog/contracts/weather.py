"""Weather classification and alert models."""

from pydantic import Field

from saillog.contracts.common import SailLogModel
from saillog.contracts.enums import AlertType


class BeaufortForce(SailLogModel):
    force: int = Field(..., ge=0, le=12)
    description: str


class AlertSettings(SailLogModel):
    """User thresholds for weather alerts."""

    enabled: bool = True
    wind_speed_threshold: float = Field(default=20.0, description="kt")
    pressure_drop_threshold: float = Field(default=5.0, description="hPa per hour")
    notify_on_gale: bool = True
    notify_on_storm: bool = True


class WeatherAlert(SailLogModel):
    """An alert raised by ``evaluate_alerts``. Delivery is up to the caller."""

    alert_type: AlertType
    title: str
    body: str
