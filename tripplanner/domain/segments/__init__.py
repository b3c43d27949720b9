"""Segment consistency engine: validation, reconciliation and display projection."""

from tripplanner.domain.segments.display import (
    build_display_segments,
    build_segment_summary,
    find_display_segment_for_day,
    find_segment_for_day,
)
from tripplanner.domain.segments.reconcile import clamp_date, clamp_range, reconcile
from tripplanner.domain.segments.validation import find_overlap, ranges_overlap, validate_candidate

__all__ = [
    "build_display_segments",
    "build_segment_summary",
    "clamp_date",
    "clamp_range",
    "find_display_segment_for_day",
    "find_overlap",
    "find_segment_for_day",
    "ranges_overlap",
    "reconcile",
    "validate_candidate",
]
