"""LoggingMiddleware — logs every record/undo/redo step."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from ..ports.middleware import IHistoryMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable, Collection

    from ..ports.middleware import HistoryStep, Operation

_log = logging.getLogger("reversible_edit.middleware")


class LoggingMiddleware(IHistoryMiddleware):
    """Logs each step — operation, action kind, target field, duration."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
        *,
        operations: Collection[Operation] | None = None,
    ) -> None:
        self._log = logger or _log
        self._level = level
        self.operations = frozenset(operations) if operations is not None else None

    def __call__(
        self,
        step: HistoryStep,
        next_handler: Callable[[HistoryStep], None],
    ) -> None:
        routed = step.routed
        label = f"{step.operation} {routed.action.kind}@{routed.target}"
        self._log.log(
            self._level, "Running %s (action_id=%s)", label, routed.action.action_id
        )
        start = time.perf_counter()
        try:
            next_handler(step)
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            self._log.exception("%s failed after %.2fms", label, elapsed)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        self._log.log(self._level, "%s completed in %.2fms", label, elapsed)
