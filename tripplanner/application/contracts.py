"""Application request/response contracts."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from tripplanner.domain.enums import ErrorCode
from tripplanner.domain.models import Segment, SegmentFailure, Trip


class OperationResult(BaseModel):
    """Outcome of a caller-facing operation.

    Expected validation failures come back here with ``success=False`` and a
    typed ``code``; they are never raised.
    """

    success: bool
    code: Optional[ErrorCode] = None
    error: str = ""
    trip: Optional[Trip] = None
    segment: Optional[Segment] = None
    segments: list[Segment] = Field(default_factory=list)
    trips: list[Trip] = Field(default_factory=list)
    updated_segment_ids: list[str] = Field(default_factory=list)
    deleted_segment_ids: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, **payload) -> "OperationResult":
        return cls(success=True, **payload)

    @classmethod
    def fail(cls, code: ErrorCode, message: str) -> "OperationResult":
        return cls(success=False, code=code, error=message)

    @classmethod
    def from_failure(cls, failure: SegmentFailure) -> "OperationResult":
        return cls.fail(failure.code, failure.message)


__all__ = ["OperationResult"]
