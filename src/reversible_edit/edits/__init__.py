"""Reversible edits: actions, routing and the undo/redo history."""

from __future__ import annotations

from .actions import (
    Action,
    AddAction,
    BaseAction,
    Captured,
    DeleteAction,
    EditAction,
)
from .history import History
from .routing import FieldRouter, RoutedAction

__all__ = [
    "Action",
    "AddAction",
    "BaseAction",
    "Captured",
    "DeleteAction",
    "EditAction",
    "FieldRouter",
    "History",
    "RoutedAction",
]
