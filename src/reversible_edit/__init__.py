"""reversible-edit — undo/redo history over editable document fields.

Depends only on pydantic for the action models.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import EditableSequence

# ── Edits ────────────────────────────────────────────────────────
from .edits import (
    Action,
    AddAction,
    BaseAction,
    Captured,
    DeleteAction,
    EditAction,
    FieldRouter,
    History,
    RoutedAction,
)

# ── Middleware ───────────────────────────────────────────────────
from .middleware import LoggingMiddleware, build_pipeline

# ── Ports ────────────────────────────────────────────────────────
from .ports import (
    MISSING,
    HistoryStep,
    IAction,
    IEditable,
    IHistoryMiddleware,
    IRoutedAction,
    Missing,
    MissingType,
    Operation,
)

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    ActionStateError,
    FieldRegistrationError,
    InvariantViolationError,
    KeyOutOfRangeError,
    ReversibleEditError,
    RoutingError,
    UnknownFieldError,
)

__all__: list[str] = [
    # Edits
    "Action",
    "AddAction",
    "BaseAction",
    "Captured",
    "DeleteAction",
    "EditAction",
    "FieldRouter",
    "History",
    "RoutedAction",
    # Ports
    "MISSING",
    "HistoryStep",
    "IAction",
    "IEditable",
    "IHistoryMiddleware",
    "IRoutedAction",
    "Missing",
    "MissingType",
    "Operation",
    # Middleware
    "LoggingMiddleware",
    "build_pipeline",
    # Primitives
    "ActionStateError",
    "FieldRegistrationError",
    "InvariantViolationError",
    "KeyOutOfRangeError",
    "ReversibleEditError",
    "RoutingError",
    "UnknownFieldError",
    # Adapters
    "EditableSequence",
]
