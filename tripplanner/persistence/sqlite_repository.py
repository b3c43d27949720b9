"""SQLite implementation of the trip store."""

from __future__ import annotations

import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from tripplanner.domain.dates import parse_ymd, to_ymd
from tripplanner.domain.enums import TripStatus
from tripplanner.domain.models import Segment, Trip, TripWithSegments
from tripplanner.persistence.locks import TripLocks
from tripplanner.persistence.migration_runner import apply_sqlite_migrations
from tripplanner.persistence.models import MutationBatch
from tripplanner.shared.exceptions import StorageError

_TRIP_COLUMNS = "id, name, destination, start_date, end_date, status, requirements, created_at"
_SEGMENT_COLUMNS = "id, trip_id, place_name, start_date, end_date, notes, lat, lng, timezone"


def _trip_from_row(row: tuple[Any, ...]) -> Trip:
    return Trip(
        id=row[0],
        name=row[1],
        destination=row[2],
        start_date=parse_ymd(row[3]),
        end_date=parse_ymd(row[4]),
        status=TripStatus(row[5]),
        requirements=row[6],
        created_at=row[7],
    )


def _segment_from_row(row: tuple[Any, ...]) -> Segment:
    return Segment(
        id=row[0],
        trip_id=row[1],
        place_name=row[2],
        start_date=parse_ymd(row[3]),
        end_date=parse_ymd(row[4]),
        notes=row[5],
        lat=row[6],
        lng=row[7],
        timezone=row[8],
    )


def _segment_params(segment: Segment) -> tuple[Any, ...]:
    return (
        segment.place_name,
        to_ymd(segment.start_date),
        to_ymd(segment.end_date),
        segment.notes,
        segment.lat,
        segment.lng,
        segment.timezone,
    )


class SQLiteTripRepository:
    """SQLite trip store.

    Outside ``trip_guard`` every call is its own short transaction. Inside it,
    reads and writes made by the guarding thread share one connection holding
    the DB write lock (``BEGIN IMMEDIATE``), so a plan computed from those reads
    commits before any other connection, in this process or another, can write.
    """

    backend = "sqlite"

    def __init__(self, db_path: str | Path, busy_timeout: float = 5.0) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._busy_timeout = busy_timeout
        self._lock = threading.Lock()
        self._trip_locks = TripLocks()
        self._guarded = threading.local()
        self._init_schema()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path, timeout=self._busy_timeout)
        conn.execute("PRAGMA journal_mode=WAL;")
        conn.execute("PRAGMA foreign_keys=ON;")
        return conn

    @contextmanager
    def _session(self, operation: str) -> Iterator[sqlite3.Connection]:
        """Connection for one call: the guard's if one is open on this thread."""
        guarded = getattr(self._guarded, "conn", None)
        if guarded is not None:
            try:
                yield guarded
            except sqlite3.Error as exc:
                raise StorageError(operation, str(exc)) from exc
            return

        with self._lock:
            try:
                conn = self._connect()
            except sqlite3.Error as exc:
                raise StorageError(operation, str(exc)) from exc
            try:
                with conn:
                    yield conn
            except sqlite3.Error as exc:
                raise StorageError(operation, str(exc)) from exc
            finally:
                conn.close()

    def _init_schema(self) -> None:
        try:
            conn = self._connect()
        except sqlite3.Error as exc:
            raise StorageError("migrate", str(exc)) from exc
        try:
            apply_sqlite_migrations(conn)
        except sqlite3.Error as exc:
            raise StorageError("migrate", str(exc)) from exc
        finally:
            conn.close()

    @contextmanager
    def trip_guard(self, trip_id: str) -> Iterator[None]:
        """Serialise read-plan-commit for ``trip_id`` across threads and processes.

        Commits when the block exits normally and rolls back when it raises.
        """
        if getattr(self._guarded, "conn", None) is not None:
            yield
            return

        with self._trip_locks.guard(trip_id):
            try:
                conn = self._connect()
            except sqlite3.Error as exc:
                raise StorageError("trip_guard", str(exc)) from exc
            try:
                conn.execute("BEGIN IMMEDIATE")
            except sqlite3.Error as exc:
                conn.close()
                raise StorageError("trip_guard", str(exc)) from exc
            self._guarded.conn = conn
            try:
                yield
            except BaseException:
                conn.rollback()
                raise
            else:
                try:
                    conn.commit()
                except sqlite3.Error as exc:
                    conn.rollback()
                    raise StorageError("trip_guard", str(exc)) from exc
            finally:
                self._guarded.conn = None
                conn.close()

    def create_trip(self, trip: Trip) -> Trip:
        with self._session("create_trip") as conn:
            conn.execute(
                f"INSERT INTO trips ({_TRIP_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    trip.id,
                    trip.name,
                    trip.destination,
                    to_ymd(trip.start_date),
                    to_ymd(trip.end_date),
                    trip.status.value,
                    trip.requirements,
                    trip.created_at,
                ),
            )
        return trip

    def get_trip(self, trip_id: str) -> TripWithSegments | None:
        with self._session("get_trip") as conn:
            row = conn.execute(
                f"SELECT {_TRIP_COLUMNS} FROM trips WHERE id = ? LIMIT 1",
                (trip_id,),
            ).fetchone()
            if row is None:
                return None
            segment_rows = conn.execute(
                f"""
                SELECT {_SEGMENT_COLUMNS}
                FROM trip_segments
                WHERE trip_id = ?
                ORDER BY start_date ASC, end_date ASC
                """,
                (trip_id,),
            ).fetchall()

        return TripWithSegments(
            trip=_trip_from_row(row),
            segments=[_segment_from_row(item) for item in segment_rows],
        )

    def list_trips(self, limit: int = 50) -> list[Trip]:
        safe_limit = max(1, min(limit, 200))
        with self._session("list_trips") as conn:
            rows = conn.execute(
                f"""
                SELECT {_TRIP_COLUMNS}
                FROM trips
                ORDER BY created_at DESC, rowid DESC
                LIMIT ?
                """,
                (safe_limit,),
            ).fetchall()
        return [_trip_from_row(row) for row in rows]

    def delete_trip(self, trip_id: str) -> bool:
        with self._session("delete_trip") as conn:
            cursor = conn.execute("DELETE FROM trips WHERE id = ?", (trip_id,))
        return cursor.rowcount > 0

    def get_segment(self, segment_id: str) -> Segment | None:
        with self._session("get_segment") as conn:
            row = conn.execute(
                f"SELECT {_SEGMENT_COLUMNS} FROM trip_segments WHERE id = ? LIMIT 1",
                (segment_id,),
            ).fetchone()
        return _segment_from_row(row) if row is not None else None

    def apply_batch(self, batch: MutationBatch) -> None:
        if batch.is_empty:
            return
        with self._session("apply_batch") as conn:
            if batch.trip_range is not None:
                cursor = conn.execute(
                    "UPDATE trips SET start_date = ?, end_date = ? WHERE id = ?",
                    (to_ymd(batch.trip_range.start), to_ymd(batch.trip_range.end), batch.trip_id),
                )
                if cursor.rowcount == 0:
                    raise sqlite3.IntegrityError(f"trip {batch.trip_id} no longer exists")

            if batch.deletions:
                placeholders = ",".join("?" for _ in batch.deletions)
                conn.execute(
                    f"DELETE FROM trip_segments WHERE trip_id = ? AND id IN ({placeholders})",
                    (batch.trip_id, *batch.deletions),
                )

            for segment in batch.updates:
                cursor = conn.execute(
                    """
                    UPDATE trip_segments
                    SET place_name = ?, start_date = ?, end_date = ?, notes = ?,
                        lat = ?, lng = ?, timezone = ?
                    WHERE id = ? AND trip_id = ?
                    """,
                    (*_segment_params(segment), segment.id, batch.trip_id),
                )
                if cursor.rowcount == 0:
                    raise sqlite3.IntegrityError(f"segment {segment.id} no longer exists")

            for segment in batch.inserts:
                conn.execute(
                    f"INSERT INTO trip_segments ({_SEGMENT_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                    (segment.id, batch.trip_id, *_segment_params(segment)),
                )


__all__ = ["SQLiteTripRepository"]
