"""Command-line entry point for trip analytics.

Usage:
    python -m saillog.cli stats trips.json --tz Europe/Paris --months 6
    python -m saillog.cli beaufort 23.5
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from saillog.config import resolve_timezone
from saillog.contracts.trip import Trip
from saillog.services.analytics import aggregate, recent_months
from saillog.services.errors import TripDocumentError
from saillog.services.weather.beaufort import beaufort_force, sea_state

logger = logging.getLogger(__name__)


def load_trips(path: Path) -> list[Trip]:
    """Read trips from a JSON file.

    Accepts either a bare array of trip documents or an object with a
    ``trips`` array (the app's backup layout).
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise TripDocumentError(str(path), str(exc)) from exc

    if isinstance(raw, dict) and "trips" in raw:
        raw = raw["trips"]
    if not isinstance(raw, list):
        raise TripDocumentError(str(path), "expected a JSON array of trips")

    trips: list[Trip] = []
    for index, item in enumerate(raw):
        try:
            trips.append(Trip.model_validate(item))
        except ValidationError as exc:
            raise TripDocumentError(str(path), f"trip #{index}: {exc}") from exc
    logger.debug("Loaded %d trips from %s", len(trips), path)
    return trips


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SailLog trip analytics")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    stats = sub.add_parser("stats", help="Aggregate trips into sailing statistics")
    stats.add_argument("path", type=Path, help="JSON file with trip documents")
    stats.add_argument("--tz", default=None, help="IANA zone for time-of-day buckets")
    stats.add_argument("--months", type=int, default=None, help="Keep only the last N months")

    beaufort = sub.add_parser("beaufort", help="Classify a wind speed in knots")
    beaufort.add_argument("wind_speed_kt", type=float)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "beaufort":
        force = beaufort_force(args.wind_speed_kt)
        data = force.to_document()
        data["seaState"] = sea_state(args.wind_speed_kt)
        print(json.dumps(data, indent=2))
        return 0

    tz = None
    if args.tz:
        try:
            tz = resolve_timezone(args.tz)
        except ValueError as exc:
            parser.error(str(exc))

    try:
        trips = load_trips(args.path)
    except TripDocumentError as exc:
        logger.error("Cannot load trips: %s", exc)
        return 1

    stats = aggregate(trips, tz=tz)
    if args.months is not None:
        stats.monthly_activity = recent_months(stats, args.months)
    logger.info(
        "%d trips, %.1f NM, %d months", stats.total_trips,
        stats.total_distance_nm, len(stats.monthly_activity),
    )
    print(json.dumps(stats.to_document(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
