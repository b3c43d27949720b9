"""Trip presentation payload tests."""

from __future__ import annotations

import datetime as dt

from tripplanner.domain.models import Segment, Trip
from tripplanner.services.trip_presenter import present_trip


def _trip() -> Trip:
    return Trip(id="t1", name="Italy", start_date=dt.date(2026, 6, 1), end_date=dt.date(2026, 6, 10))


def _rome() -> Segment:
    return Segment(
        id="rome",
        trip_id="t1",
        place_name="Rome",
        start_date=dt.date(2026, 6, 3),
        end_date=dt.date(2026, 6, 6),
    )


def test_present_trip_fills_gaps_and_days():
    payload = present_trip(_trip(), [_rome()])

    assert payload["trip"]["start_date"] == "2026-06-01"
    assert payload["date_range_label"] == "June 1, 2026 – June 10, 2026"
    assert payload["day_count"] == 10
    assert [(row["kind"], row["start_date"], row["end_date"]) for row in payload["display_segments"]] == [
        ("tbd", "2026-06-01", "2026-06-02"),
        ("real", "2026-06-03", "2026-06-06"),
        ("tbd", "2026-06-07", "2026-06-10"),
    ]
    assert payload["display_segments"][1]["label"] == "June 3 - June 6, 2026 (Days 3-6)"
    assert payload["segment_summary"] == [
        {"id": "rome", "place_name": "Rome", "day_start": 3, "day_end": 6, "label": "Rome (Days 3–6)"}
    ]

    days = payload["days"]
    assert len(days) == 10
    assert days[0] == {
        "number": 1,
        "date": "2026-06-01",
        "formatted": "June 1, 2026",
        "segment_id": "tbd-2026-06-01",
        "place_name": "TBD",
        "kind": "tbd",
    }
    assert days[3]["place_name"] == "Rome"
    assert days[9]["segment_id"] == "tbd-2026-06-07"


def test_present_trip_without_segments():
    payload = present_trip(_trip(), [])

    assert payload["segments"] == []
    assert payload["segment_summary"] == []
    assert [row["id"] for row in payload["display_segments"]] == ["tbd-full"]
    assert {day["segment_id"] for day in payload["days"]} == {"tbd-full"}
