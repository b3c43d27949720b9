"""Runtime configuration helpers."""

from tripplanner.config.settings import Settings, resolve_settings

__all__ = ["Settings", "resolve_settings"]
