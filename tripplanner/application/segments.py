"""Segment use-cases: create, update and delete a trip segment."""

from __future__ import annotations

from typing import Optional

from tripplanner.application.context import AppContext
from tripplanner.application.contracts import OperationResult
from tripplanner.application.inputs import DateInput, clean_notes, clean_place_name, parse_date_pair
from tripplanner.application.runner import run_operation
from tripplanner.domain.enums import ErrorCode
from tripplanner.domain.models import Segment, SegmentCandidate
from tripplanner.domain.segments import validate_candidate
from tripplanner.persistence.models import MutationBatch

TRIP_NOT_FOUND = "Trip not found"
SEGMENT_NOT_FOUND = "Segment not found"


def _build_candidate(
    place_name: str,
    start_date: DateInput,
    end_date: DateInput,
    notes: Optional[str],
) -> SegmentCandidate | OperationResult:
    name = clean_place_name(place_name)
    if isinstance(name, OperationResult):
        return name
    dates = parse_date_pair(start_date, end_date)
    if isinstance(dates, OperationResult):
        return dates
    cleaned_notes = clean_notes(notes)
    if isinstance(cleaned_notes, OperationResult):
        return cleaned_notes
    start, end = dates
    return SegmentCandidate(place_name=name, start_date=start, end_date=end, notes=cleaned_notes)


def create_segment(
    ctx: AppContext,
    trip_id: str,
    place_name: str,
    start_date: DateInput,
    end_date: DateInput,
    notes: Optional[str] = None,
) -> OperationResult:
    def body() -> OperationResult:
        candidate = _build_candidate(place_name, start_date, end_date, notes)
        if isinstance(candidate, OperationResult):
            return candidate

        with ctx.repository.trip_guard(trip_id):
            current = ctx.repository.get_trip(trip_id)
            if current is None:
                return OperationResult.fail(ErrorCode.NOT_FOUND, TRIP_NOT_FOUND)

            failure = validate_candidate(current.trip.date_range, current.segments, candidate)
            if failure is not None:
                return OperationResult.from_failure(failure)

            segment = Segment(
                id=ctx.id_factory(),
                trip_id=trip_id,
                place_name=candidate.place_name,
                start_date=candidate.start_date,
                end_date=candidate.end_date,
                notes=candidate.notes,
            )
            ctx.repository.apply_batch(MutationBatch(trip_id=trip_id, inserts=[segment]))
        return OperationResult.ok(segment=segment)

    return run_operation(ctx, "create_segment", "Failed to create segment", body, trip_id=trip_id)


def update_segment(
    ctx: AppContext,
    segment_id: str,
    place_name: str,
    start_date: DateInput,
    end_date: DateInput,
    notes: Optional[str] = None,
) -> OperationResult:
    def body() -> OperationResult:
        existing = ctx.repository.get_segment(segment_id)
        if existing is None:
            return OperationResult.fail(ErrorCode.NOT_FOUND, SEGMENT_NOT_FOUND)

        candidate = _build_candidate(place_name, start_date, end_date, notes)
        if isinstance(candidate, OperationResult):
            return candidate

        with ctx.repository.trip_guard(existing.trip_id):
            current = ctx.repository.get_trip(existing.trip_id)
            segment = next((seg for seg in current.segments if seg.id == segment_id), None) if current else None
            if current is None or segment is None:
                return OperationResult.fail(ErrorCode.NOT_FOUND, SEGMENT_NOT_FOUND)

            failure = validate_candidate(
                current.trip.date_range,
                current.segments,
                candidate,
                exclude_id=segment_id,
            )
            if failure is not None:
                return OperationResult.from_failure(failure)

            updated = segment.model_copy(
                update={
                    "place_name": candidate.place_name,
                    "start_date": candidate.start_date,
                    "end_date": candidate.end_date,
                    "notes": candidate.notes,
                }
            )
            ctx.repository.apply_batch(MutationBatch(trip_id=segment.trip_id, updates=[updated]))
        return OperationResult.ok(segment=updated, updated_segment_ids=[updated.id])

    return run_operation(ctx, "update_segment", "Failed to update segment", body, segment_id=segment_id)


def delete_segment(ctx: AppContext, segment_id: str) -> OperationResult:
    def body() -> OperationResult:
        existing = ctx.repository.get_segment(segment_id)
        if existing is None:
            return OperationResult.fail(ErrorCode.NOT_FOUND, SEGMENT_NOT_FOUND)

        with ctx.repository.trip_guard(existing.trip_id):
            current = ctx.repository.get_segment(segment_id)
            if current is None or current.trip_id != existing.trip_id:
                return OperationResult.fail(ErrorCode.NOT_FOUND, SEGMENT_NOT_FOUND)
            ctx.repository.apply_batch(
                MutationBatch(trip_id=current.trip_id, deletions=[segment_id])
            )
        return OperationResult.ok(segment=current, deleted_segment_ids=[segment_id])

    return run_operation(ctx, "delete_segment", "Failed to delete segment", body, segment_id=segment_id)


__all__ = ["create_segment", "delete_segment", "update_segment"]
