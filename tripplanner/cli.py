"""tripplanner CLI: inspect trips and their day-by-day base locations."""

from __future__ import annotations

import argparse
import json
import sys

from dotenv import load_dotenv

from tripplanner.application import get_trip, list_trips, make_app_context
from tripplanner.domain.dates import format_date_short
from tripplanner.services.trip_presenter import present_trip


def _format_overview(payload: dict) -> str:
    """Readable day-by-day plan with TBD gaps."""
    trip = payload["trip"]
    lines: list[str] = []
    title = trip["name"] + (f" · {trip['destination']}" if trip.get("destination") else "")
    lines.append(title)
    lines.append(payload["date_range_label"])
    lines.append("=" * 50)

    if payload["segment_summary"]:
        lines.append("Bases: " + ", ".join(item["label"] for item in payload["segment_summary"]))
        lines.append("-" * 50)

    for day in payload["days"]:
        marker = "?" if day["kind"] == "tbd" else "•"
        lines.append(f"Day {day['number']:>2}  {day['formatted']:<20} {marker} {day['place_name']}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Inspect trips and segments")
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List trips, newest first")
    list_cmd.add_argument("--limit", type=int, default=20)

    show_cmd = sub.add_parser("show", help="Show a trip's day-by-day plan")
    show_cmd.add_argument("trip_id")
    show_cmd.add_argument("--json", action="store_true", help="Print the raw payload")

    args = parser.parse_args(argv)
    ctx = make_app_context()

    if args.command == "list":
        result = list_trips(ctx, limit=args.limit)
        if not result.success:
            print(result.error, file=sys.stderr)
            return 1
        for trip in result.trips:
            print(f"{trip.id}  {format_date_short(trip.start_date)} – {format_date_short(trip.end_date)}  {trip.name}")
        return 0

    result = get_trip(ctx, args.trip_id)
    if not result.success:
        print(result.error, file=sys.stderr)
        return 1
    payload = present_trip(result.trip, result.segments)
    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(_format_overview(payload))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
