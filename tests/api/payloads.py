"""Request payloads shared by the API tests, in the app's document layout."""

from __future__ import annotations

# 2025-06-15T08:00:00Z
START_MS = 1749974400000

OPENWEATHER_RESPONSE = {
    "dt": 1749974400,
    "wind": {"speed": 5, "deg": 225},
    "main": {"temp": 16.0, "pressure": 1018},
    "weather": [{"description": "clear sky"}],
}


def trip_document(start_ms: int = START_MS, minutes: int = 60, **overrides) -> dict:
    """A closed trip covering one degree of longitude at the equator."""
    doc = {
        "id": f"trip-{start_ms}",
        "vesselId": "vessel-1",
        "startTime": start_ms,
        "endTime": start_ms + minutes * 60_000,
        "route": [
            {"latitude": 0, "longitude": 0, "timestamp": start_ms},
            {"latitude": 0, "longitude": 1, "timestamp": start_ms + 1_800_000, "speed": 6.5},
        ],
        "weatherLog": [
            {"timestamp": start_ms, "windSpeed": 14, "windDirection": 90, "temperature": 19},
        ],
        "crew": [],
    }
    doc.update(overrides)
    return doc
