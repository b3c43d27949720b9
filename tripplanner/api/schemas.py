"""API request/response models."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from tripplanner.domain.constants import MAX_NOTES_LENGTH, MAX_PLACE_NAME_LENGTH

_YMD_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"


class CreateTripRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200, description="Trip name")
    destination: Optional[str] = Field(default=None, max_length=200)
    start_date: str = Field(pattern=_YMD_PATTERN, description="YYYY-MM-DD")
    end_date: str = Field(pattern=_YMD_PATTERN, description="YYYY-MM-DD")
    requirements: Optional[str] = Field(default=None, max_length=4000)


class TripDatesRequest(BaseModel):
    start_date: str = Field(pattern=_YMD_PATTERN, description="YYYY-MM-DD")
    end_date: str = Field(pattern=_YMD_PATTERN, description="YYYY-MM-DD")


class SegmentRequest(BaseModel):
    place_name: str = Field(min_length=1, max_length=MAX_PLACE_NAME_LENGTH)
    start_date: str = Field(pattern=_YMD_PATTERN, description="YYYY-MM-DD")
    end_date: str = Field(pattern=_YMD_PATTERN, description="YYYY-MM-DD")
    notes: Optional[str] = Field(default=None, max_length=MAX_NOTES_LENGTH)


class HealthResponse(BaseModel):
    status: str = "ok"
    store_backend: str = ""


class ErrorResponse(BaseModel):
    success: bool = False
    code: str = "INTERNAL_ERROR"
    error: str = ""


class TripListResponse(BaseModel):
    success: bool = True
    trips: list[dict[str, Any]] = Field(default_factory=list)
