"""History — linear undo/redo stack over a document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..middleware.pipeline import build_pipeline
from ..ports.middleware import HistoryStep
from ..primitives.exceptions import ActionStateError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..ports.middleware import IHistoryMiddleware, Operation
    from .routing import FieldRouter, RoutedAction

logger = logging.getLogger("reversible_edit.history")


class History:
    """Records applied actions and replays them backwards and forwards.

    The history never holds on to the document: it is passed to every call,
    and the router narrows it down to the one field an action targets.

    * ``record`` applies an action, pushes it onto the undo stack and
      discards the redo stack (there is no branching).
    * ``undo`` / ``redo`` move the most recent action between the two stacks,
      reversing or re-applying it on the way. Both are no-ops on an empty
      stack.

    If an apply or undo step raises, the stacks are left as they were before
    the call and the error propagates.

    The stacks are unbounded.

    Parameters
    ----------
    router:
        :class:`~reversible_edit.edits.routing.FieldRouter` resolving action
        targets on the document.
    middlewares:
        Optional middleware chain wrapped around every step, outermost first.

    Usage::

        history = History(FieldRouter.from_attributes("nums", "strs"))
        history.record(project, RoutedAction.delete("nums", 0))
        history.undo(project)
        history.redo(project)
    """

    def __init__(
        self,
        router: FieldRouter,
        *,
        middlewares: Sequence[IHistoryMiddleware] | None = None,
    ) -> None:
        self._router = router
        self._middlewares = list(middlewares or [])
        self._undo_stack: list[RoutedAction] = []
        self._redo_stack: list[RoutedAction] = []

    # ── Public API ───────────────────────────────────────────────

    def record(self, document: Any, routed: RoutedAction) -> None:
        """Apply *routed* to *document* and push it onto the undo stack.

        Raises:
            ActionStateError: If *routed* is already applied or already held
                by this history. Applying it again would overwrite the data
                its pending undo needs.
        """
        if routed.is_applied or self._holds(routed):
            raise ActionStateError(
                f"{type(routed.action).__name__} on field {routed.target!r}"
                f" (action_id={routed.action.action_id}) is already recorded"
            )
        self._run(document, "record", routed)
        self._undo_stack.append(routed)
        if self._redo_stack:
            logger.debug("Discarding %d redoable action(s)", len(self._redo_stack))
            self._redo_stack.clear()

    def undo(self, document: Any) -> RoutedAction | None:
        """Reverse the most recent action. Returns it, or *None* if empty."""
        if not self._undo_stack:
            return None

        routed = self._undo_stack.pop()
        try:
            self._run(document, "undo", routed)
        except Exception:
            self._undo_stack.append(routed)
            raise
        self._redo_stack.append(routed)
        return routed

    def redo(self, document: Any) -> RoutedAction | None:
        """Re-apply the most recently undone action. Returns it, or *None*."""
        if not self._redo_stack:
            return None

        routed = self._redo_stack.pop()
        try:
            self._run(document, "redo", routed)
        except Exception:
            self._redo_stack.append(routed)
            raise
        self._undo_stack.append(routed)
        return routed

    def can_undo(self) -> bool:
        return len(self._undo_stack) > 0

    def can_redo(self) -> bool:
        return len(self._redo_stack) > 0

    @property
    def undo_stack(self) -> tuple[RoutedAction, ...]:
        """Applied actions, oldest first."""
        return tuple(self._undo_stack)

    @property
    def redo_stack(self) -> tuple[RoutedAction, ...]:
        """Undone actions, oldest undo first; the last one is redone next."""
        return tuple(self._redo_stack)

    def clear(self) -> None:
        """Forget all recorded actions. The document is not touched."""
        self._undo_stack.clear()
        self._redo_stack.clear()

    def __len__(self) -> int:
        return len(self._undo_stack)

    # ── Internals ────────────────────────────────────────────────

    def _holds(self, routed: RoutedAction) -> bool:
        return any(
            held is routed for held in (*self._undo_stack, *self._redo_stack)
        )

    def _run(
        self, document: Any, operation: Operation, routed: RoutedAction
    ) -> None:
        # Middleware sees the step; the innermost call always acts on *routed*.
        def _innermost(_step: HistoryStep) -> None:
            if operation == "undo":
                routed.undo(document, self._router)
            else:
                routed.apply(document, self._router)

        pipeline = build_pipeline(self._middlewares, _innermost)
        pipeline(HistoryStep(operation, routed))
        logger.debug("%s %s on field %r", operation, routed.action.kind, routed.target)
