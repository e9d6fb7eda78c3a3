"""Environment-driven settings shared by the API and the CLI.

Variables (optionally loaded from ``.env`` by the API app):
- ``SAILLOG_TZ`` — default IANA zone for time-of-day bucketing (``UTC``)
- ``OPENWEATHER_API_KEY`` — enables current-weather lookups
- ``CORS_ORIGINS`` — comma-separated origins allowed by the API
- ``LOG_LEVEL`` — API log level (``INFO``)
"""

from __future__ import annotations

import os
from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TZ = "UTC"


def resolve_timezone(name: str) -> tzinfo:
    """Map an IANA zone name to a tzinfo. Raises ``ValueError`` if unknown."""
    if name.strip().upper() in ("UTC", "Z"):
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown time zone: {name}") from exc


def default_timezone_name() -> str:
    return os.environ.get("SAILLOG_TZ") or DEFAULT_TZ
