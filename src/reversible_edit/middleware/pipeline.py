"""build_pipeline — chain middleware around a history step."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from ..ports.middleware import HistoryStep, IHistoryMiddleware


def handles(middleware: IHistoryMiddleware, step: HistoryStep) -> bool:
    """Return True if *middleware* wants to see *step*.

    A middleware without an ``operations`` attribute (or with ``None``)
    sees every operation.
    """
    operations = getattr(middleware, "operations", None)
    return operations is None or step.operation in operations


def build_pipeline(
    middlewares: Sequence[IHistoryMiddleware],
    handler_fn: Callable[[HistoryStep], None],
) -> Callable[[HistoryStep], None]:
    """Build a middleware chain ending at *handler_fn*.

    The first middleware in the list is the **outermost** wrapper. Middleware
    whose ``operations`` exclude the step's operation is skipped for that step.
    """
    chain = list(middlewares)
    if not chain:
        return handler_fn

    def _dispatch(step: HistoryStep, index: int = 0) -> None:
        while index < len(chain) and not handles(chain[index], step):
            index += 1
        if index == len(chain):
            handler_fn(step)
            return
        chain[index](step, lambda s: _dispatch(s, index + 1))

    return _dispatch
