"""Trip-bounds change reconciliation.

Moving a trip to a new date range clamps every segment into the new range and
drops segments the new range no longer touches. The result is all-or-nothing:
if two clamped segments would share a day, nothing is planned at all.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable

from tripplanner.domain.enums import ErrorCode
from tripplanner.domain.models import DateRange, ReconcilePlan, Segment, SegmentFailure
from tripplanner.domain.segments.validation import INVALID_RANGE_MESSAGE, find_overlap

CLAMP_OVERLAP_MESSAGE = (
    "Clamping would cause segment overlaps. "
    "Please manually adjust segments before changing trip dates."
)


def clamp_date(day: dt.date, lower: dt.date, upper: dt.date) -> dt.date:
    return min(max(day, lower), upper)


def clamp_range(segment_range: DateRange, bounds: DateRange) -> DateRange | None:
    """Clamp ``segment_range`` into ``bounds``.

    Returns ``None`` when the two ranges share no calendar day: clamping both
    ends of such a segment would collapse it onto a trip boundary it never
    covered, so the caller drops it instead.
    """
    clamped_start = max(segment_range.start, bounds.start)
    clamped_end = min(segment_range.end, bounds.end)
    if clamped_start > clamped_end:
        return None
    return DateRange(
        start=clamp_date(clamped_start, bounds.start, bounds.end),
        end=clamp_date(clamped_end, bounds.start, bounds.end),
    )


def reconcile(
    old_range: DateRange,
    new_range: DateRange,
    segments: Iterable[Segment],
) -> ReconcilePlan | SegmentFailure:
    if new_range.start > new_range.end:
        return SegmentFailure(code=ErrorCode.INVALID_RANGE, message=INVALID_RANGE_MESSAGE)

    survivors: list[Segment] = []
    deleted_ids: list[str] = []
    original: dict[str, DateRange] = {}

    for segment in segments:
        original[segment.id] = segment.date_range
        clamped = clamp_range(segment.date_range, new_range)
        if clamped is None:
            deleted_ids.append(segment.id)
            continue
        survivors.append(
            segment.model_copy(update={"start_date": clamped.start, "end_date": clamped.end})
        )

    survivors.sort(key=lambda seg: (seg.start_date, seg.end_date))
    if find_overlap(survivors) is not None:
        return SegmentFailure(code=ErrorCode.CLAMP_WOULD_OVERLAP, message=CLAMP_OVERLAP_MESSAGE)

    return ReconcilePlan(
        previous_range=old_range,
        trip_range=new_range,
        segments=survivors,
        deleted_ids=deleted_ids,
        original=original,
    )


__all__ = ["CLAMP_OVERLAP_MESSAGE", "clamp_date", "clamp_range", "reconcile"]
