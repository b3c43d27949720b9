"""Trip store interface, in-memory backend and factory."""

from __future__ import annotations

import copy
import threading
from typing import ContextManager, Protocol

from tripplanner.config.settings import Settings
from tripplanner.domain.models import Segment, Trip, TripWithSegments
from tripplanner.persistence.locks import TripLocks
from tripplanner.persistence.models import MutationBatch
from tripplanner.persistence.sqlite_repository import SQLiteTripRepository
from tripplanner.shared.exceptions import StorageError


class TripRepository(Protocol):
    backend: str

    def trip_guard(self, trip_id: str) -> ContextManager[None]: ...

    def create_trip(self, trip: Trip) -> Trip: ...

    def get_trip(self, trip_id: str) -> TripWithSegments | None: ...

    def list_trips(self, limit: int = 50) -> list[Trip]: ...

    def delete_trip(self, trip_id: str) -> bool: ...

    def get_segment(self, segment_id: str) -> Segment | None: ...

    def apply_batch(self, batch: MutationBatch) -> None: ...


class InMemoryTripRepository:
    """Thread-safe in-memory trip store.

    Batches are staged on copies and swapped in only when every write succeeds.
    """

    backend = "memory"

    def __init__(self) -> None:
        self._trips: dict[str, Trip] = {}
        self._segments: dict[str, Segment] = {}
        self._order: list[str] = []
        self._lock = threading.Lock()
        self._trip_locks = TripLocks()

    def trip_guard(self, trip_id: str):
        return self._trip_locks.guard(trip_id)

    def create_trip(self, trip: Trip) -> Trip:
        with self._lock:
            if trip.id in self._trips:
                raise StorageError("create_trip", f"duplicate trip id {trip.id}")
            self._trips[trip.id] = trip.model_copy(deep=True)
            self._order.append(trip.id)
        return trip

    def get_trip(self, trip_id: str) -> TripWithSegments | None:
        with self._lock:
            trip = self._trips.get(trip_id)
            if trip is None:
                return None
            segments = [seg for seg in self._segments.values() if seg.trip_id == trip_id]
            segments.sort(key=lambda seg: (seg.start_date, seg.end_date))
            return TripWithSegments(
                trip=trip.model_copy(deep=True),
                segments=[seg.model_copy(deep=True) for seg in segments],
            )

    def list_trips(self, limit: int = 50) -> list[Trip]:
        safe_limit = max(1, min(limit, 200))
        with self._lock:
            newest_first = list(reversed(self._order))[:safe_limit]
            return [self._trips[trip_id].model_copy(deep=True) for trip_id in newest_first]

    def delete_trip(self, trip_id: str) -> bool:
        with self._lock:
            if self._trips.pop(trip_id, None) is None:
                return False
            self._order.remove(trip_id)
            self._segments = {
                seg_id: seg for seg_id, seg in self._segments.items() if seg.trip_id != trip_id
            }
            return True

    def get_segment(self, segment_id: str) -> Segment | None:
        with self._lock:
            segment = self._segments.get(segment_id)
            return segment.model_copy(deep=True) if segment is not None else None

    def apply_batch(self, batch: MutationBatch) -> None:
        if batch.is_empty:
            return
        with self._lock:
            trips = dict(self._trips)
            segments = copy.copy(self._segments)

            trip = trips.get(batch.trip_id)
            if trip is None:
                raise StorageError("apply_batch", f"trip {batch.trip_id} no longer exists")
            if batch.trip_range is not None:
                trips[batch.trip_id] = trip.model_copy(
                    update={"start_date": batch.trip_range.start, "end_date": batch.trip_range.end}
                )

            for segment_id in batch.deletions:
                current = segments.get(segment_id)
                if current is not None and current.trip_id == batch.trip_id:
                    del segments[segment_id]

            for segment in batch.updates:
                current = segments.get(segment.id)
                if current is None or current.trip_id != batch.trip_id:
                    raise StorageError("apply_batch", f"segment {segment.id} no longer exists")
                segments[segment.id] = segment.model_copy(update={"trip_id": batch.trip_id}, deep=True)

            for segment in batch.inserts:
                if segment.id in segments:
                    raise StorageError("apply_batch", f"duplicate segment id {segment.id}")
                segments[segment.id] = segment.model_copy(update={"trip_id": batch.trip_id}, deep=True)

            self._trips = trips
            self._segments = segments


def get_trip_repository(settings: Settings) -> TripRepository:
    if settings.store_backend == "memory":
        return InMemoryTripRepository()
    return SQLiteTripRepository(settings.db_path)


__all__ = [
    "InMemoryTripRepository",
    "TripRepository",
    "get_trip_repository",
]
