"""Shared cross-layer types and exceptions."""

from tripplanner.shared.exceptions import ConfigurationError, StorageError

__all__ = ["ConfigurationError", "StorageError"]
