"""Trip use-cases: create, fetch, list and delete."""

from __future__ import annotations

from typing import Optional

from tripplanner.application.context import AppContext
from tripplanner.application.contracts import OperationResult
from tripplanner.application.inputs import DateInput, parse_date_pair
from tripplanner.application.runner import run_operation
from tripplanner.application.segments import TRIP_NOT_FOUND
from tripplanner.domain.enums import ErrorCode, TripStatus
from tripplanner.domain.models import Trip
from tripplanner.domain.segments.validation import INVALID_RANGE_MESSAGE

_MAX_NAME_LENGTH = 200


def create_trip(
    ctx: AppContext,
    name: str,
    start_date: DateInput,
    end_date: DateInput,
    destination: Optional[str] = None,
    requirements: Optional[str] = None,
) -> OperationResult:
    def body() -> OperationResult:
        cleaned_name = str(name or "").strip()
        if not cleaned_name or len(cleaned_name) > _MAX_NAME_LENGTH:
            return OperationResult.fail(
                ErrorCode.INVALID_INPUT,
                f"Trip name is required (at most {_MAX_NAME_LENGTH} characters)",
            )
        dates = parse_date_pair(start_date, end_date)
        if isinstance(dates, OperationResult):
            return dates
        start, end = dates
        if start > end:
            return OperationResult.fail(ErrorCode.INVALID_RANGE, INVALID_RANGE_MESSAGE)

        trip = Trip(
            id=ctx.id_factory(),
            name=cleaned_name,
            destination=str(destination or "").strip() or None,
            start_date=start,
            end_date=end,
            status=TripStatus.DRAFT,
            requirements=str(requirements or "").strip() or None,
            created_at=ctx.clock(),
        )
        ctx.repository.create_trip(trip)
        return OperationResult.ok(trip=trip)

    return run_operation(ctx, "create_trip", "Failed to create trip", body)


def get_trip(ctx: AppContext, trip_id: str) -> OperationResult:
    def body() -> OperationResult:
        current = ctx.repository.get_trip(trip_id)
        if current is None:
            return OperationResult.fail(ErrorCode.NOT_FOUND, TRIP_NOT_FOUND)
        return OperationResult.ok(trip=current.trip, segments=current.segments)

    return run_operation(ctx, "get_trip", "Failed to fetch trip", body, trip_id=trip_id)


def list_trips(ctx: AppContext, limit: int = 50) -> OperationResult:
    def body() -> OperationResult:
        return OperationResult.ok(trips=ctx.repository.list_trips(limit=limit))

    return run_operation(ctx, "list_trips", "Failed to fetch trips", body)


def delete_trip(ctx: AppContext, trip_id: str) -> OperationResult:
    def body() -> OperationResult:
        with ctx.repository.trip_guard(trip_id):
            if not ctx.repository.delete_trip(trip_id):
                return OperationResult.fail(ErrorCode.NOT_FOUND, TRIP_NOT_FOUND)
        return OperationResult.ok()

    return run_operation(ctx, "delete_trip", "Failed to delete trip", body, trip_id=trip_id)


__all__ = ["create_trip", "delete_trip", "get_trip", "list_trips"]
