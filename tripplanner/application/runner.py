"""Shared execution wrapper for caller-facing operations."""

from __future__ import annotations

import logging
from typing import Any, Callable

from tripplanner.application.context import AppContext
from tripplanner.application.contracts import OperationResult
from tripplanner.domain.enums import ErrorCode
from tripplanner.shared.exceptions import StorageError

_logger = logging.getLogger("tripplanner.app")


def run_operation(
    ctx: AppContext,
    operation: str,
    failure_message: str,
    body: Callable[[], OperationResult],
    **fields: Any,
) -> OperationResult:
    """Run ``body`` and turn storage failures into a non-specific ``INTERNAL_ERROR``.

    Validation failures returned by ``body`` are logged as rejections, not errors.
    """
    ctx.logger.operation_start(operation, **fields)
    try:
        result = body()
    except StorageError as exc:
        _logger.error("%s failed: %s", operation, exc)
        ctx.logger.error(operation, str(exc), **fields)
        result = OperationResult.fail(ErrorCode.INTERNAL_ERROR, failure_message)
    else:
        if not result.success and result.code is not None:
            ctx.logger.rejected(operation, result.code.value, result.error, **fields)
    ctx.logger.operation_end(operation, success=result.success, **fields)
    return result


__all__ = ["run_operation"]
