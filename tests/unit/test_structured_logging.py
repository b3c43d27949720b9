"""Structured logger tests."""

from __future__ import annotations

import io
import json

from tripplanner.infrastructure.logging import StructuredLogger


def _lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_operation_events_are_json_lines():
    stream = io.StringIO()
    logger = StructuredLogger(trace_id="abc", output=stream)

    logger.operation_start("update_trip_dates", trip_id="t1")
    logger.rejected("update_trip_dates", "CLAMP_WOULD_OVERLAP", "adjust first", trip_id="t1")
    logger.operation_end("update_trip_dates", success=False, trip_id="t1")

    events = _lines(stream)
    assert [item["event"] for item in events] == ["operation_start", "rejected", "operation_end"]
    assert all(item["trace_id"] == "abc" for item in events)
    assert events[1]["code"] == "CLAMP_WOULD_OVERLAP"
    assert events[2]["success"] is False
    assert events[2]["duration_ms"] >= 0


def test_disabled_logger_writes_nothing():
    stream = io.StringIO()
    logger = StructuredLogger(output=stream, enabled=False)
    logger.error("create_segment", "boom")
    assert stream.getvalue() == ""
