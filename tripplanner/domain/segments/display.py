"""Display projection of trip segments: TBD gap filling, per-day lookup and summaries."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Sequence

from tripplanner.domain.constants import TBD_FULL_ID, TBD_ID_PREFIX, TBD_PLACE_NAME
from tripplanner.domain.dates import day_number, is_day_in_range, to_ymd
from tripplanner.domain.enums import SegmentKind
from tripplanner.domain.models import DateRange, DisplaySegment, Segment, SegmentSummary

_ONE_DAY = dt.timedelta(days=1)


def _tbd(start: dt.date, end: dt.date, *, segment_id: str | None = None) -> DisplaySegment:
    return DisplaySegment(
        kind=SegmentKind.TBD,
        id=segment_id or f"{TBD_ID_PREFIX}{to_ymd(start)}",
        start_date=start,
        end_date=end,
        place_name=TBD_PLACE_NAME,
        notes=None,
    )


def _real(segment: Segment) -> DisplaySegment:
    return DisplaySegment(
        kind=SegmentKind.REAL,
        id=segment.id,
        start_date=segment.start_date,
        end_date=segment.end_date,
        place_name=segment.place_name,
        notes=segment.notes,
    )


def build_display_segments(trip_range: DateRange, segments: Iterable[Segment]) -> list[DisplaySegment]:
    """Interleave real segments with TBD placeholders covering every gap of the trip.

    Segments are expected to satisfy the trip invariants already; they are not
    re-validated here.
    """
    ordered = sorted(segments, key=lambda seg: seg.start_date)
    if not ordered:
        return [_tbd(trip_range.start, trip_range.end, segment_id=TBD_FULL_ID)]

    rows: list[DisplaySegment] = []
    cursor = trip_range.start
    for segment in ordered:
        if cursor < segment.start_date:
            rows.append(_tbd(cursor, segment.start_date - _ONE_DAY))
        rows.append(_real(segment))
        cursor = segment.end_date + _ONE_DAY

    if cursor <= trip_range.end:
        rows.append(_tbd(cursor, trip_range.end))
    return rows


def find_segment_for_day(segments: Iterable[Segment], day: dt.date) -> Segment | None:
    for segment in segments:
        if is_day_in_range(day, segment.start_date, segment.end_date):
            return segment
    return None


def find_display_segment_for_day(
    display_segments: Sequence[DisplaySegment], day: dt.date
) -> DisplaySegment | None:
    for segment in display_segments:
        if is_day_in_range(day, segment.start_date, segment.end_date):
            return segment
    return None


def build_segment_summary(segments: Iterable[Segment], trip_range: DateRange) -> list[SegmentSummary]:
    """Day-number spans per segment, e.g. ``Rome (Days 1–4)``.

    Ranges are clamped to the trip so imperfect rows still render; segments
    entirely outside the trip are left out.
    """
    rows: list[SegmentSummary] = []
    for segment in sorted(segments, key=lambda seg: seg.start_date):
        start = max(segment.start_date, trip_range.start)
        end = min(segment.end_date, trip_range.end)
        first = day_number(trip_range.start, start)
        last = day_number(trip_range.start, end)
        if last < first:
            continue
        rows.append(
            SegmentSummary(id=segment.id, place_name=segment.place_name, day_start=first, day_end=last)
        )
    return rows


__all__ = [
    "build_display_segments",
    "build_segment_summary",
    "find_display_segment_for_day",
    "find_segment_for_day",
]
