"""Pydantic domain models."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterator
from typing import Optional

from pydantic import BaseModel, Field

from tripplanner.domain.enums import ErrorCode, SegmentKind, TripStatus


class DateRange(BaseModel):
    """Inclusive range of naive calendar dates.

    Ordering is not enforced here: candidate ranges with ``start > end`` must be
    representable so validators can report them instead of failing to parse.
    """

    start: dt.date
    end: dt.date

    @property
    def is_ordered(self) -> bool:
        return self.start <= self.end

    @property
    def day_count(self) -> int:
        return (self.end - self.start).days + 1 if self.is_ordered else 0

    def contains(self, day: dt.date) -> bool:
        return self.start <= day <= self.end

    def covers(self, other: "DateRange") -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        # Both ends inclusive: sharing a single calendar day is an overlap.
        return self.start <= other.end and other.start <= self.end

    def iter_days(self) -> Iterator[dt.date]:
        day = self.start
        while day <= self.end:
            yield day
            day += dt.timedelta(days=1)

    def __str__(self) -> str:
        return f"{self.start.isoformat()} - {self.end.isoformat()}"


class Trip(BaseModel):
    id: str
    name: str
    destination: Optional[str] = None
    start_date: dt.date
    end_date: dt.date
    status: TripStatus = TripStatus.DRAFT
    requirements: Optional[str] = None
    created_at: str = ""

    @property
    def date_range(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date)


class Segment(BaseModel):
    id: str
    trip_id: str
    place_name: str
    start_date: dt.date
    end_date: dt.date
    notes: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    timezone: Optional[str] = None

    @property
    def date_range(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date)


class TripWithSegments(BaseModel):
    trip: Trip
    segments: list[Segment] = Field(default_factory=list)


class SegmentCandidate(BaseModel):
    place_name: str
    start_date: dt.date
    end_date: dt.date
    notes: Optional[str] = None

    @property
    def date_range(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date)


class DisplaySegment(BaseModel):
    kind: SegmentKind
    id: str
    start_date: dt.date
    end_date: dt.date
    place_name: str
    notes: Optional[str] = None


class SegmentSummary(BaseModel):
    id: str
    place_name: str
    day_start: int
    day_end: int

    @property
    def label(self) -> str:
        if self.day_start == self.day_end:
            return f"{self.place_name} (Day {self.day_start})"
        return f"{self.place_name} (Days {self.day_start}–{self.day_end})"


class TripDay(BaseModel):
    number: int
    date: dt.date


class SegmentFailure(BaseModel):
    """Expected, recoverable validation outcome."""

    code: ErrorCode
    message: str = ""


class ReconcilePlan(BaseModel):
    """Mutations needed to move a trip to a new date range.

    ``segments`` holds every surviving segment with its clamped range, sorted by
    start date. ``deleted_ids`` holds segments the new range no longer touches.
    """

    previous_range: DateRange
    trip_range: DateRange
    segments: list[Segment] = Field(default_factory=list)
    deleted_ids: list[str] = Field(default_factory=list)
    original: dict[str, DateRange] = Field(default_factory=dict, repr=False)

    @property
    def updated(self) -> list[Segment]:
        changed: list[Segment] = []
        for segment in self.segments:
            before = self.original.get(segment.id)
            if before is None or before != segment.date_range:
                changed.append(segment)
        return changed

    @property
    def is_noop(self) -> bool:
        return (
            self.previous_range == self.trip_range
            and not self.deleted_ids
            and not self.updated
        )
