"""Structured logging: one JSON object per line for operation events."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


class StructuredLogger:
    """Emits operation lifecycle events as JSON lines.

    Validation rejections are expected user-input outcomes and are written as
    ``rejected`` events; only storage failures are written as ``error``.
    """

    def __init__(self, trace_id: Optional[str] = None, output=None, enabled: bool = True):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self.enabled = enabled
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        if not self.enabled:
            return
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(line + "\n")
            self._output.flush()
        except Exception as exc:
            # Last-resort fallback to avoid silent logger failures.
            try:
                fallback = {
                    "event": "logger_internal_error",
                    "trace_id": self.trace_id,
                    "timestamp": time.time(),
                    "error": str(exc),
                }
                sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
                sys.stderr.flush()
            except Exception:
                return

    def operation_start(self, operation: str, **extra: Any) -> None:
        self._timers[operation] = time.time()
        self._emit({"event": "operation_start", "operation": operation, **extra})

    def operation_end(self, operation: str, *, success: bool, **extra: Any) -> None:
        start = self._timers.pop(operation, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({
            "event": "operation_end",
            "operation": operation,
            "success": success,
            "duration_ms": duration_ms,
            **extra,
        })

    def rejected(self, operation: str, code: str, message: str, **extra: Any) -> None:
        self._emit({"event": "rejected", "operation": operation, "code": code, "message": message, **extra})

    def error(self, operation: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "operation": operation, "error": error, **extra})

    def warning(self, operation: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "operation": operation, "message": message, **extra})

    def summary(self, **extra: Any) -> None:
        self._emit({"event": "summary", **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None, *, enabled: bool | None = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        _logger = StructuredLogger(trace_id=trace_id, enabled=True if enabled is None else enabled)
    elif enabled is not None:
        _logger.enabled = enabled
    return _logger


__all__ = ["StructuredLogger", "get_logger"]
