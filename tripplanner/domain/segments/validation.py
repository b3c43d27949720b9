"""Segment validation: range ordering, trip containment and sibling overlap."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Sequence
from typing import Optional

from tripplanner.domain.dates import to_ymd
from tripplanner.domain.enums import ErrorCode
from tripplanner.domain.models import DateRange, Segment, SegmentCandidate, SegmentFailure

INVALID_RANGE_MESSAGE = "Start date must be before or equal to end date"


def ranges_overlap(a_start: dt.date, a_end: dt.date, b_start: dt.date, b_end: dt.date) -> bool:
    """Inclusive-inclusive overlap: ``[a, b]`` and ``[c, d]`` overlap iff ``a <= d and c <= b``.

    Touching ranges (one ends on the day the other starts) overlap; there is no
    same-day handoff between segments.
    """
    return a_start <= b_end and b_start <= a_end


def _describe(segment: Segment) -> str:
    return f"{segment.place_name} ({to_ymd(segment.start_date)} - {to_ymd(segment.end_date)})"


def validate_candidate(
    trip_range: DateRange,
    existing_segments: Iterable[Segment],
    candidate: SegmentCandidate,
    exclude_id: Optional[str] = None,
) -> SegmentFailure | None:
    """Return the first failure for ``candidate`` or ``None`` when it may be committed.

    Checks run in order and stop at the first failure: range ordering, trip
    bounds, then overlap with every existing segment except ``exclude_id``.
    """
    start, end = candidate.start_date, candidate.end_date
    if start > end:
        return SegmentFailure(code=ErrorCode.INVALID_RANGE, message=INVALID_RANGE_MESSAGE)

    if start < trip_range.start or end > trip_range.end:
        return SegmentFailure(
            code=ErrorCode.OUT_OF_TRIP_BOUNDS,
            message=(
                f"Segment must be within trip dates "
                f"({to_ymd(trip_range.start)} - {to_ymd(trip_range.end)})"
            ),
        )

    for existing in existing_segments:
        if exclude_id is not None and existing.id == exclude_id:
            continue
        if ranges_overlap(start, end, existing.start_date, existing.end_date):
            return SegmentFailure(
                code=ErrorCode.OVERLAPS_SEGMENT,
                message=f"Segment overlaps with existing segment: {_describe(existing)}",
            )
    return None


def find_overlap(segments: Sequence[Segment]) -> tuple[Segment, Segment] | None:
    """First pair of start-sorted neighbours sharing a calendar day, if any."""
    ordered = sorted(segments, key=lambda seg: (seg.start_date, seg.end_date))
    for current, following in zip(ordered, ordered[1:]):
        if following.start_date <= current.end_date:
            return current, following
    return None


__all__ = [
    "INVALID_RANGE_MESSAGE",
    "find_overlap",
    "ranges_overlap",
    "validate_candidate",
]
