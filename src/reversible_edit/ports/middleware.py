"""IHistoryMiddleware — wrapper protocol around a single history step."""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Literal,
    Protocol,
    runtime_checkable,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from reversible_edit.ports.action import IRoutedAction

Operation = Literal["record", "undo", "redo"]


@dataclass(frozen=True)
class HistoryStep:
    """One record/undo/redo step as seen by the middleware chain."""

    operation: Operation
    routed: IRoutedAction


@runtime_checkable
class IHistoryMiddleware(Protocol):
    """Protocol for middleware around history steps.

    Middleware wraps the apply/undo call of a step and can inspect it,
    or short-circuit it by not calling *next_handler*. The step that reaches
    the history is always the one it started with.
    The first middleware in the chain is the outermost one.

    A middleware may also define an ``operations`` attribute (a collection of
    operation names); the chain then skips it for every other operation.
    """

    def __call__(
        self,
        step: HistoryStep,
        next_handler: Callable[[HistoryStep], None],
    ) -> None:
        """Execute middleware logic and call next_handler to proceed.

        Parameters
        ----------
        step:
            The step being performed.
        next_handler:
            Callable representing the rest of the chain.
        """
        ...
