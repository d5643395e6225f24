"""Exceptions raised by the reversible-edit engine."""

from __future__ import annotations

from typing import Any


class ReversibleEditError(Exception):
    """Root exception for the reversible-edit package."""


class KeyOutOfRangeError(ReversibleEditError, IndexError):
    """Raised by ``insert`` when the key is outside ``[0, length]``."""

    def __init__(self, key: Any, length: int) -> None:
        self.key = key
        self.length = length
        super().__init__(f"Key {key!r} out of range for insert (length={length})")


class ActionStateError(ReversibleEditError):
    """Raised when an action is used in a state that would lose its undo data.

    For example applying an action that is already applied, or recording an
    action that the history already holds.
    """


class InvariantViolationError(ReversibleEditError):
    """Raised when an inverse step finds the document out of sync.

    The action's own bookkeeping says its key was valid when it was applied,
    but the collection now rejects it. This means the document was mutated
    outside the history between apply and undo.
    """

    def __init__(self, action: Any, reason: str) -> None:
        self.action = action
        self.reason = reason
        super().__init__(
            f"Cannot undo {type(action).__name__}"
            f" (action_id={action.action_id}): {reason}"
        )


class RoutingError(ReversibleEditError):
    """Base class for field routing errors (registration, lookup)."""


class UnknownFieldError(RoutingError):
    """Raised when a routed action targets a field the router cannot resolve."""

    def __init__(self, field: str, reason: str | None = None) -> None:
        self.field = field
        msg = f"Unknown document field {field!r}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class FieldRegistrationError(RoutingError):
    """Raised when a second accessor is registered under an existing field name."""
