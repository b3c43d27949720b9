"""Domain package exports."""

from tripplanner.domain.constants import TBD_FULL_ID, TBD_PLACE_NAME
from tripplanner.domain.enums import ErrorCode, SegmentKind, TripStatus
from tripplanner.domain.exceptions import DomainError, InvalidDateString
from tripplanner.domain.models import (
    DateRange,
    DisplaySegment,
    ReconcilePlan,
    Segment,
    SegmentCandidate,
    SegmentFailure,
    SegmentSummary,
    Trip,
    TripDay,
    TripWithSegments,
)

__all__ = [
    "DateRange",
    "DisplaySegment",
    "DomainError",
    "ErrorCode",
    "InvalidDateString",
    "ReconcilePlan",
    "Segment",
    "SegmentCandidate",
    "SegmentFailure",
    "SegmentKind",
    "SegmentSummary",
    "TBD_FULL_ID",
    "TBD_PLACE_NAME",
    "Trip",
    "TripDay",
    "TripStatus",
    "TripWithSegments",
]
