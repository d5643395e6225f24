from reversible_edit.ports.action import IAction, IRoutedAction
from reversible_edit.ports.editable import MISSING, IEditable, Missing, MissingType
from reversible_edit.ports.middleware import HistoryStep, IHistoryMiddleware, Operation

__all__ = [
    "MISSING",
    "HistoryStep",
    "IAction",
    "IEditable",
    "IHistoryMiddleware",
    "IRoutedAction",
    "Missing",
    "MissingType",
    "Operation",
]
