"""Base classes and shared types for SailLog contracts.

Unit conventions (computed contracts and API responses):
- **Distances**: nautical miles (NM) — suffix ``_nm``
- **Speeds**: knots (kt) — suffix ``_kt``
- **Durations**: minutes — suffix ``_minutes``
- **Temperatures**: degrees Celsius — suffix ``_c``
- **Headings/angles**: degrees — suffix ``_deg``
- **Datetimes**: always timezone-aware UTC; naive input is taken as UTC
- **Coordinates**: WGS84 decimal degrees

Recorded inputs (``Trip``, ``RoutePoint``, ``WeatherObservation``) keep the
field names used by the mobile app's storage (``windSpeed``, ``startTime``...)
so stored documents validate without a mapping layer.
"""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """Return *value* as an aware UTC datetime (naive values are taken as UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class SailLogModel(BaseModel):
    """Base model with document-friendly serialization.

    - Fields accept both snake_case names and camelCase keys.
    - Enums serialize as string values.
    - ``to_document()`` produces a JSON-safe dict (camelCase, datetimes as ISO 8601).
    - ``from_document()`` hydrates from a stored document dict.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_document(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "SailLogModel":
        """Create model instance from a stored document dict."""
        return cls.model_validate(data)


class GeoPoint(SailLogModel):
    """WGS84 geographic coordinate. Ranges are not validated."""

    latitude: float
    longitude: float

    model_config = ConfigDict(frozen=True)
