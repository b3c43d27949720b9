"""Gap-fill display projection and segment summary tests."""

from __future__ import annotations

import datetime as dt

from tripplanner.domain.enums import SegmentKind
from tripplanner.domain.models import DateRange, Segment
from tripplanner.domain.segments import (
    build_display_segments,
    build_segment_summary,
    find_display_segment_for_day,
    find_segment_for_day,
)

_BASE = dt.date(2026, 6, 1)
_ONE_DAY = dt.timedelta(days=1)


def _d(offset: int) -> dt.date:
    return _BASE + dt.timedelta(days=offset)


def _june(day: int) -> dt.date:
    return dt.date(2026, 6, day)


def _segment(seg_id: str, start: dt.date, end: dt.date, place: str | None = None, notes: str | None = None) -> Segment:
    return Segment(
        id=seg_id,
        trip_id="t1",
        place_name=place or seg_id,
        start_date=start,
        end_date=end,
        notes=notes,
    )


def test_gaps_before_and_after_single_segment():
    rome = _segment("rome", _june(3), _june(6), "Rome", notes="Trastevere flat")
    rows = build_display_segments(DateRange(start=_june(1), end=_june(10)), [rome])

    assert [(row.kind, row.place_name, row.start_date, row.end_date) for row in rows] == [
        (SegmentKind.TBD, "TBD", _june(1), _june(2)),
        (SegmentKind.REAL, "Rome", _june(3), _june(6)),
        (SegmentKind.TBD, "TBD", _june(7), _june(10)),
    ]
    assert rows[0].id == "tbd-2026-06-01"
    assert rows[1].id == "rome"
    assert rows[1].notes == "Trastevere flat"


def test_no_segments_yields_single_placeholder():
    rows = build_display_segments(DateRange(start=_june(1), end=_june(10)), [])

    assert len(rows) == 1
    assert rows[0].id == "tbd-full"
    assert rows[0].kind == SegmentKind.TBD
    assert (rows[0].start_date, rows[0].end_date) == (_june(1), _june(10))


def test_full_coverage_has_no_placeholders():
    segments = [_segment("b", _june(6), _june(10)), _segment("a", _june(1), _june(5))]
    rows = build_display_segments(DateRange(start=_june(1), end=_june(10)), segments)

    assert [row.id for row in rows] == ["a", "b"]
    assert all(row.kind == SegmentKind.REAL for row in rows)


def test_projection_covers_trip_contiguously():
    trip = DateRange(start=_d(0), end=_d(6))
    intervals = [(s, e) for s in range(7) for e in range(s, 7)]
    segment_sets = [[]]
    segment_sets += [[_segment("a", _d(s), _d(e))] for s, e in intervals]
    segment_sets += [
        [_segment("a", _d(s1), _d(e1)), _segment("b", _d(s2), _d(e2))]
        for s1, e1 in intervals
        for s2, e2 in intervals
        if s2 > e1
    ]

    for segments in segment_sets:
        rows = build_display_segments(trip, list(reversed(segments)))

        assert rows[0].start_date == trip.start
        assert rows[-1].end_date == trip.end
        for previous, following in zip(rows, rows[1:]):
            assert following.start_date == previous.end_date + _ONE_DAY
        for row in rows:
            assert row.start_date <= row.end_date

        real = [row for row in rows if row.kind == SegmentKind.REAL]
        assert sorted(row.id for row in real) == sorted(seg.id for seg in segments)
        by_id = {seg.id: seg for seg in segments}
        for row in real:
            source = by_id[row.id]
            assert (row.start_date, row.end_date, row.place_name) == (
                source.start_date,
                source.end_date,
                source.place_name,
            )


def test_day_lookups():
    rome = _segment("rome", _june(3), _june(6), "Rome")
    rows = build_display_segments(DateRange(start=_june(1), end=_june(10)), [rome])

    assert find_segment_for_day([rome], _june(6)) == rome
    assert find_segment_for_day([rome], _june(7)) is None
    assert find_display_segment_for_day(rows, _june(7)).kind == SegmentKind.TBD
    assert find_display_segment_for_day(rows, _june(11)) is None


def test_segment_summary_uses_trip_day_numbers():
    trip = DateRange(start=_june(1), end=_june(10))
    segments = [
        _segment("como", _june(6), _june(6), "Lake Como"),
        _segment("rome", _june(1), _june(4), "Rome"),
    ]
    summary = build_segment_summary(segments, trip)

    assert [(item.place_name, item.day_start, item.day_end) for item in summary] == [
        ("Rome", 1, 4),
        ("Lake Como", 6, 6),
    ]
    assert summary[0].label == "Rome (Days 1–4)"
    assert summary[1].label == "Lake Como (Day 6)"


def test_segment_summary_clamps_and_drops_out_of_trip_rows():
    trip = DateRange(start=_june(3), end=_june(8))
    segments = [
        _segment("early", _june(1), _june(2)),
        _segment("edge", _june(2), _june(4)),
        _segment("late", _june(7), _june(12)),
    ]
    summary = build_segment_summary(segments, trip)

    assert [(item.id, item.day_start, item.day_end) for item in summary] == [
        ("edge", 1, 2),
        ("late", 5, 6),
    ]
