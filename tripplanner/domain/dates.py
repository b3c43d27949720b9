"""Date-only helpers.

Trip and segment dates are calendar dates with no time of day and no timezone.
``"2026-01-10"`` always means January 10th: values are parsed field by field and
never through a datetime parser, which could reinterpret them in UTC and shift
the day.
"""

from __future__ import annotations

import datetime as dt
import re

from tripplanner.domain.exceptions import InvalidDateString
from tripplanner.domain.models import DateRange, TripDay

_YMD_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


def parse_ymd(value: str) -> dt.date:
    """Parse a strict ``YYYY-MM-DD`` string into a calendar date."""
    match = _YMD_PATTERN.match(str(value or "").strip())
    if match is None:
        raise InvalidDateString(value)
    year, month, day = (int(part) for part in match.groups())
    try:
        return dt.date(year, month, day)
    except ValueError as exc:
        raise InvalidDateString(value) from exc


def to_ymd(day: dt.date) -> str:
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def coerce_date_only(value: dt.date | dt.datetime | str) -> dt.date:
    """Reduce a date, datetime or date-ish string to its calendar date.

    A datetime keeps its own calendar fields; no timezone conversion is applied.
    Strings may carry a ``T...`` time suffix, which is dropped.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        return parse_ymd(value.split("T", 1)[0])
    raise InvalidDateString(value)


def days_between(start: dt.date, end: dt.date) -> int:
    return (end - start).days


def day_number(trip_start: dt.date, day: dt.date) -> int:
    """1-based day number of ``day`` relative to the trip start.

    Dates before the start yield numbers <= 0; callers decide whether that is an error.
    """
    return days_between(trip_start, day) + 1


def date_for_day(trip_start: dt.date, number: int) -> dt.date:
    """Calendar date of a 1-based trip day number."""
    return trip_start + dt.timedelta(days=number - 1)


def is_day_in_range(day: dt.date, start: dt.date, end: dt.date) -> bool:
    return start <= day <= end


def trip_days(start: dt.date, end: dt.date) -> list[TripDay]:
    return [
        TripDay(number=day_number(start, day), date=day)
        for day in DateRange(start=start, end=end).iter_days()
    ]


def format_date(day: dt.date) -> str:
    """``January 5, 2026``"""
    return f"{day.strftime('%B')} {day.day}, {day.year}"


def format_date_short(day: dt.date, *, today: dt.date | None = None) -> str:
    """``Jan 5``, or ``Jan 5, 2025`` outside the current year."""
    reference = today or dt.date.today()
    text = f"{day.strftime('%b')} {day.day}"
    if day.year != reference.year:
        text += f", {day.year}"
    return text


def format_date_range(start: dt.date, end: dt.date) -> str:
    """``June 1, 2026 – June 10, 2026``"""
    return f"{format_date(start)} – {format_date(end)}"


def format_segment_range(start: dt.date, end: dt.date, trip_start: dt.date) -> str:
    """``June 3 - June 6, 2026 (Days 3-6)``"""
    return (
        f"{day_label(start)} - {format_date(end)}"
        f" (Days {day_number(trip_start, start)}-{day_number(trip_start, end)})"
    )


def day_label(day: dt.date) -> str:
    return f"{day.strftime('%B')} {day.day}"


__all__ = [
    "coerce_date_only",
    "date_for_day",
    "day_label",
    "day_number",
    "days_between",
    "format_date",
    "format_date_range",
    "format_date_short",
    "format_segment_range",
    "is_day_in_range",
    "parse_ymd",
    "to_ymd",
    "trip_days",
]
