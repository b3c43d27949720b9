"""Persistence package exports."""

from tripplanner.persistence.migration_runner import apply_sqlite_migrations
from tripplanner.persistence.models import MutationBatch
from tripplanner.persistence.repository import (
    InMemoryTripRepository,
    TripRepository,
    get_trip_repository,
)
from tripplanner.persistence.sqlite_repository import SQLiteTripRepository

__all__ = [
    "InMemoryTripRepository",
    "MutationBatch",
    "SQLiteTripRepository",
    "TripRepository",
    "apply_sqlite_migrations",
    "get_trip_repository",
]
