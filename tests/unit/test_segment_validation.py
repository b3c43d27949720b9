"""Segment candidate validation tests."""

from __future__ import annotations

import datetime as dt

import pytest

from tripplanner.domain.enums import ErrorCode
from tripplanner.domain.models import DateRange, Segment, SegmentCandidate
from tripplanner.domain.segments import find_overlap, ranges_overlap, validate_candidate

_BASE = dt.date(2026, 6, 1)


def _d(offset: int) -> dt.date:
    return _BASE + dt.timedelta(days=offset)


def _june(day: int) -> dt.date:
    return dt.date(2026, 6, day)


def _segment(seg_id: str, place: str, start: dt.date, end: dt.date) -> Segment:
    return Segment(id=seg_id, trip_id="t1", place_name=place, start_date=start, end_date=end)


def _candidate(start: dt.date, end: dt.date, place: str = "Lake Como") -> SegmentCandidate:
    return SegmentCandidate(place_name=place, start_date=start, end_date=end)


TRIP = DateRange(start=_june(1), end=_june(10))
ROME = _segment("rome", "Rome", _june(1), _june(5))


def test_touching_segment_is_rejected_as_overlap():
    """Rome ends 06-05 and Lake Como starts 06-05: no same-day handoff, so this overlaps."""
    failure = validate_candidate(TRIP, [ROME], _candidate(_june(5), _june(10)))

    assert failure is not None
    assert failure.code == ErrorCode.OVERLAPS_SEGMENT
    assert "Rome (2026-06-01 - 2026-06-05)" in failure.message


def test_next_day_start_is_accepted():
    assert validate_candidate(TRIP, [ROME], _candidate(_june(6), _june(10))) is None


def test_reversed_range_fails_before_bounds_and_overlap():
    failure = validate_candidate(TRIP, [ROME], _candidate(_june(12), _june(3)))

    assert failure is not None
    assert failure.code == ErrorCode.INVALID_RANGE
    assert failure.message == "Start date must be before or equal to end date"


def test_out_of_bounds_fails_before_overlap_and_reports_trip_bounds():
    failure = validate_candidate(TRIP, [ROME], _candidate(_june(1), _june(11)))

    assert failure is not None
    assert failure.code == ErrorCode.OUT_OF_TRIP_BOUNDS
    assert "2026-06-01 - 2026-06-10" in failure.message


def test_editing_excludes_own_range():
    candidate = _candidate(_june(2), _june(6), place="Rome")
    assert validate_candidate(TRIP, [ROME], candidate, exclude_id="rome") is None
    assert validate_candidate(TRIP, [ROME], candidate).code == ErrorCode.OVERLAPS_SEGMENT


def test_single_day_segment_inside_trip_is_valid():
    assert validate_candidate(TRIP, [], _candidate(_june(10), _june(10))) is None


def test_invalid_range_iff_start_after_end():
    trip = DateRange(start=_d(-10), end=_d(20))
    for start in range(0, 7):
        for end in range(0, 7):
            failure = validate_candidate(trip, [], _candidate(_d(start), _d(end)))
            if start > end:
                assert failure is not None and failure.code == ErrorCode.INVALID_RANGE
            else:
                assert failure is None


def test_out_of_bounds_iff_any_day_outside_trip():
    trip = DateRange(start=_d(1), end=_d(4))
    for start in range(0, 7):
        for end in range(start, 7):
            failure = validate_candidate(trip, [], _candidate(_d(start), _d(end)))
            outside = start < 1 or end > 4
            if outside:
                assert failure is not None and failure.code == ErrorCode.OUT_OF_TRIP_BOUNDS
            else:
                assert failure is None


def test_overlap_iff_inclusive_intersection():
    trip = DateRange(start=_d(0), end=_d(6))
    for a, b, c, d in _all_interval_pairs(6):
        existing = _segment("x", "Existing", _d(c), _d(d))
        failure = validate_candidate(trip, [existing], _candidate(_d(a), _d(b)))
        expected = a <= d and c <= b
        assert (failure is not None) == expected, (a, b, c, d)
        if expected:
            assert failure.code == ErrorCode.OVERLAPS_SEGMENT
        assert ranges_overlap(_d(a), _d(b), _d(c), _d(d)) == expected


def test_first_conflicting_segment_is_reported():
    segments = [
        _segment("a", "Florence", _june(3), _june(4)),
        _segment("b", "Venice", _june(6), _june(8)),
    ]
    failure = validate_candidate(TRIP, segments, _candidate(_june(4), _june(7)))
    assert "Florence" in failure.message


@pytest.mark.parametrize(
    ("ranges", "expected"),
    [
        ([(1, 3), (4, 6)], None),
        ([(4, 6), (1, 3)], None),
        ([(1, 3), (3, 6)], ("a", "b")),
        ([(1, 9), (4, 5), (7, 8)], ("a", "b")),
    ],
)
def test_find_overlap_on_sorted_neighbours(ranges, expected):
    ids = "abc"
    segments = [_segment(ids[i], ids[i], _d(s), _d(e)) for i, (s, e) in enumerate(ranges)]
    found = find_overlap(segments)
    if expected is None:
        assert found is None
    else:
        assert (found[0].id, found[1].id) == expected


def _all_interval_pairs(limit: int):
    intervals = [(s, e) for s in range(limit + 1) for e in range(s, limit + 1)]
    for a, b in intervals:
        for c, d in intervals:
            yield a, b, c, d
