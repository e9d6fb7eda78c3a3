"""Service-level exceptions.

The analytics functions never raise these; they are used at the edges
(document loading, external weather lookups).
"""


class SailLogError(Exception):
    """Base exception for all SailLog errors."""


class TripDocumentError(SailLogError):
    """Raised when a trips document cannot be read or is not a list of trips."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class WeatherServiceError(SailLogError):
    """Raised when the weather provider is not configured."""
