"""Collaborative trip planning service: trip segments and date-range reconciliation."""

__version__ = "1.0.0"
