"""Trip date-range edits with segment reconciliation."""

from __future__ import annotations

from tripplanner.application.context import AppContext
from tripplanner.application.contracts import OperationResult
from tripplanner.application.inputs import DateInput, parse_date_pair
from tripplanner.application.runner import run_operation
from tripplanner.application.segments import TRIP_NOT_FOUND
from tripplanner.domain.enums import ErrorCode
from tripplanner.domain.models import DateRange, SegmentFailure
from tripplanner.domain.segments import reconcile
from tripplanner.domain.segments.validation import INVALID_RANGE_MESSAGE
from tripplanner.persistence.models import MutationBatch


def update_trip_dates(
    ctx: AppContext,
    trip_id: str,
    new_start: DateInput,
    new_end: DateInput,
) -> OperationResult:
    """Move a trip to a new date range, clamping or dropping its segments.

    The new range, every clamped segment and every deletion are written in one
    batch; a rejected plan writes nothing.
    """

    def body() -> OperationResult:
        dates = parse_date_pair(new_start, new_end)
        if isinstance(dates, OperationResult):
            return dates
        new_range = DateRange(start=dates[0], end=dates[1])
        if not new_range.is_ordered:
            return OperationResult.fail(ErrorCode.INVALID_RANGE, INVALID_RANGE_MESSAGE)

        with ctx.repository.trip_guard(trip_id):
            current = ctx.repository.get_trip(trip_id)
            if current is None:
                return OperationResult.fail(ErrorCode.NOT_FOUND, TRIP_NOT_FOUND)

            plan = reconcile(current.trip.date_range, new_range, current.segments)
            if isinstance(plan, SegmentFailure):
                return OperationResult.from_failure(plan)

            updated = plan.updated
            if not plan.is_noop:
                ctx.repository.apply_batch(
                    MutationBatch(
                        trip_id=trip_id,
                        trip_range=plan.trip_range,
                        updates=updated,
                        deletions=plan.deleted_ids,
                    )
                )
            if plan.deleted_ids:
                ctx.logger.warning(
                    "update_trip_dates",
                    "segments dropped by trip date change",
                    trip_id=trip_id,
                    deleted_segment_ids=plan.deleted_ids,
                )

        trip = current.trip.model_copy(update={"start_date": new_range.start, "end_date": new_range.end})
        return OperationResult.ok(
            trip=trip,
            segments=plan.segments,
            updated_segment_ids=[seg.id for seg in updated],
            deleted_segment_ids=list(plan.deleted_ids),
        )

    return run_operation(ctx, "update_trip_dates", "Failed to update trip dates", body, trip_id=trip_id)


__all__ = ["update_trip_dates"]
