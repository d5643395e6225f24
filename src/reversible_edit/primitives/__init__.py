"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    ActionStateError,
    FieldRegistrationError,
    InvariantViolationError,
    KeyOutOfRangeError,
    ReversibleEditError,
    RoutingError,
    UnknownFieldError,
)

__all__ = [
    "ActionStateError",
    "FieldRegistrationError",
    "InvariantViolationError",
    "KeyOutOfRangeError",
    "ReversibleEditError",
    "RoutingError",
    "UnknownFieldError",
]
