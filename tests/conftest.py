"""pytest fixtures: environment isolation and in-memory application context."""

from __future__ import annotations

import io
import itertools
import json

import pytest

from tripplanner.application.context import AppContext
from tripplanner.config.settings import Settings
from tripplanner.infrastructure.logging import StructuredLogger
from tripplanner.persistence.repository import InMemoryTripRepository


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests off the real DB and quiet on stderr."""
    monkeypatch.setenv("TRIP_STORE_BACKEND", "memory")
    monkeypatch.setenv("TRIP_STORE_DB", str(tmp_path / "tripplanner.sqlite3"))
    monkeypatch.setenv("STRUCTURED_LOGS", "false")
    monkeypatch.delenv("ENABLE_DOCS", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    yield


class LogCapture:
    def __init__(self) -> None:
        self.stream = io.StringIO()

    @property
    def events(self) -> list[dict]:
        return [json.loads(line) for line in self.stream.getvalue().splitlines() if line.strip()]

    def of(self, event: str) -> list[dict]:
        return [item for item in self.events if item["event"] == event]


@pytest.fixture
def log_capture() -> LogCapture:
    return LogCapture()


@pytest.fixture
def ctx(log_capture) -> AppContext:
    counter = itertools.count(1)
    return AppContext(
        repository=InMemoryTripRepository(),
        logger=StructuredLogger(trace_id="test", output=log_capture.stream),
        settings=Settings(store_backend="memory", structured_logs=True),
        id_factory=lambda: f"id{next(counter)}",
        clock=lambda: "2026-05-01T00:00:00Z",
    )
