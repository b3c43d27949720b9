"""Normalisation of raw caller input (date strings, names, notes)."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from tripplanner.application.contracts import OperationResult
from tripplanner.domain.constants import MAX_NOTES_LENGTH, MAX_PLACE_NAME_LENGTH
from tripplanner.domain.dates import coerce_date_only, parse_ymd
from tripplanner.domain.enums import ErrorCode
from tripplanner.domain.exceptions import InvalidDateString

DateInput = str | dt.date


def to_date(value: DateInput) -> dt.date:
    """Strict ``YYYY-MM-DD`` for strings; date and datetime values keep their calendar day."""
    if isinstance(value, str):
        return parse_ymd(value)
    return coerce_date_only(value)


def parse_date_pair(start: DateInput, end: DateInput) -> tuple[dt.date, dt.date] | OperationResult:
    try:
        return to_date(start), to_date(end)
    except InvalidDateString as exc:
        return OperationResult.fail(ErrorCode.INVALID_DATE, str(exc))


def clean_place_name(place_name: str) -> str | OperationResult:
    cleaned = str(place_name or "").strip()
    if not cleaned:
        return OperationResult.fail(ErrorCode.INVALID_INPUT, "Place name is required")
    if len(cleaned) > MAX_PLACE_NAME_LENGTH:
        return OperationResult.fail(
            ErrorCode.INVALID_INPUT,
            f"Place name must be at most {MAX_PLACE_NAME_LENGTH} characters",
        )
    return cleaned


def clean_notes(notes: Optional[str]) -> str | None | OperationResult:
    cleaned = str(notes or "").strip()
    if len(cleaned) > MAX_NOTES_LENGTH:
        return OperationResult.fail(
            ErrorCode.INVALID_INPUT,
            f"Notes must be at most {MAX_NOTES_LENGTH} characters",
        )
    return cleaned or None


__all__ = ["DateInput", "clean_notes", "clean_place_name", "parse_date_pair", "to_date"]
