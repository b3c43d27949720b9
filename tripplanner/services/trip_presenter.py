"""Presentation payloads for a trip and its segments."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from tripplanner.domain.dates import format_date, format_date_range, format_segment_range, to_ymd, trip_days
from tripplanner.domain.models import DisplaySegment, Segment, Trip
from tripplanner.domain.segments import (
    build_display_segments,
    build_segment_summary,
    find_display_segment_for_day,
)


def _present_display_segment(segment: DisplaySegment, trip: Trip) -> dict[str, Any]:
    payload = segment.model_dump(mode="json")
    payload["label"] = format_segment_range(segment.start_date, segment.end_date, trip.start_date)
    return payload


def _present_days(trip: Trip, display_segments: Sequence[DisplaySegment]) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for day in trip_days(trip.start_date, trip.end_date):
        base = find_display_segment_for_day(display_segments, day.date)
        rows.append(
            {
                "number": day.number,
                "date": to_ymd(day.date),
                "formatted": format_date(day.date),
                "segment_id": base.id if base else None,
                "place_name": base.place_name if base else None,
                "kind": base.kind.value if base else None,
            }
        )
    return rows


def present_trip(trip: Trip, segments: Sequence[Segment]) -> dict[str, Any]:
    """Trip payload with gap-filled display segments, day list and summary.

    Everything beyond ``trip`` and ``segments`` is derived on each call and
    never stored.
    """
    display_segments = build_display_segments(trip.date_range, segments)
    summary = build_segment_summary(segments, trip.date_range)
    return {
        "trip": trip.model_dump(mode="json"),
        "date_range_label": format_date_range(trip.start_date, trip.end_date),
        "day_count": trip.date_range.day_count,
        "segments": [segment.model_dump(mode="json") for segment in segments],
        "display_segments": [_present_display_segment(seg, trip) for seg in display_segments],
        "segment_summary": [{**item.model_dump(mode="json"), "label": item.label} for item in summary],
        "days": _present_days(trip, display_segments),
    }


__all__ = ["present_trip"]
