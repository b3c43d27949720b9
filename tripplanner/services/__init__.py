"""Presentation services."""

from tripplanner.services.trip_presenter import present_trip

__all__ = ["present_trip"]
