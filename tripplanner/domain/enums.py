"""Domain enums."""

from enum import Enum


class TripStatus(str, Enum):
    DRAFT = "draft"
    SHARED = "shared"
    FINAL = "final"


class SegmentKind(str, Enum):
    REAL = "real"
    TBD = "tbd"


class ErrorCode(str, Enum):
    INVALID_RANGE = "INVALID_RANGE"
    OUT_OF_TRIP_BOUNDS = "OUT_OF_TRIP_BOUNDS"
    OVERLAPS_SEGMENT = "OVERLAPS_SEGMENT"
    CLAMP_WOULD_OVERLAP = "CLAMP_WOULD_OVERLAP"
    NOT_FOUND = "NOT_FOUND"
    INVALID_DATE = "INVALID_DATE"
    INVALID_INPUT = "INVALID_INPUT"
    INTERNAL_ERROR = "INTERNAL_ERROR"
