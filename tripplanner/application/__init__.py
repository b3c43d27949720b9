"""Caller-facing operations over trips and their segments."""

from tripplanner.application.context import AppContext, make_app_context
from tripplanner.application.contracts import OperationResult
from tripplanner.application.segments import create_segment, delete_segment, update_segment
from tripplanner.application.trip_dates import update_trip_dates
from tripplanner.application.trips import create_trip, delete_trip, get_trip, list_trips

__all__ = [
    "AppContext",
    "OperationResult",
    "create_segment",
    "create_trip",
    "delete_segment",
    "delete_trip",
    "get_trip",
    "list_trips",
    "make_app_context",
    "update_segment",
    "update_trip_dates",
]
