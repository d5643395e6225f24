"""IAction / IRoutedAction — what middleware may see of an action."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from reversible_edit.ports.editable import IEditable


@runtime_checkable
class IAction(Protocol):
    """Port for a reversible action applied to one editable collection."""

    @property
    def action_id(self) -> str: ...

    @property
    def kind(self) -> str: ...

    @property
    def is_applied(self) -> bool:
        """True between a successful apply and the matching undo."""
        ...

    def apply(self, target: IEditable[Any, Any]) -> None: ...

    def undo(self, target: IEditable[Any, Any]) -> None: ...


@runtime_checkable
class IRoutedAction(Protocol):
    """Port for an action tagged with the document field it targets."""

    @property
    def target(self) -> str: ...

    @property
    def action(self) -> IAction: ...

    @property
    def is_applied(self) -> bool: ...
