"""Per-trip locks serialising read-plan-commit sequences within one process."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class TripLocks:
    def __init__(self) -> None:
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, trip_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(trip_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[trip_id] = lock
            return lock

    @contextmanager
    def guard(self, trip_id: str) -> Iterator[None]:
        lock = self._lock_for(trip_id)
        with lock:
            yield


__all__ = ["TripLocks"]
