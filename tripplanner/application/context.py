"""Application context for dependency injection."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Callable

from tripplanner.config.settings import Settings, resolve_settings
from tripplanner.infrastructure.logging import StructuredLogger, get_logger
from tripplanner.persistence.repository import TripRepository, get_trip_repository


def _new_id() -> str:
    return uuid.uuid4().hex


def _utc_now() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


@dataclass
class AppContext:
    repository: TripRepository
    logger: StructuredLogger
    settings: Settings = field(default_factory=Settings)
    id_factory: Callable[[], str] = _new_id
    clock: Callable[[], str] = _utc_now


def make_app_context(settings: Settings | None = None) -> AppContext:
    resolved = settings or resolve_settings()
    return AppContext(
        repository=get_trip_repository(resolved),
        logger=get_logger(enabled=resolved.structured_logs),
        settings=resolved,
    )


__all__ = ["AppContext", "make_app_context"]
