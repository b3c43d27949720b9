"""Persistence-layer write batches."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from tripplanner.domain.models import DateRange, Segment


class MutationBatch(BaseModel):
    """Writes for one trip that must commit together or not at all."""

    trip_id: str
    trip_range: Optional[DateRange] = None
    inserts: list[Segment] = Field(default_factory=list)
    updates: list[Segment] = Field(default_factory=list)
    deletions: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.trip_range is None and not (self.inserts or self.updates or self.deletions)


__all__ = ["MutationBatch"]
