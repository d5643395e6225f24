"""Reversible actions — the three primitive edits and their inverses.

Each action stores only the one piece of data needed to reverse itself (the
*inversion slot*): the removed element, the assigned key, or the replaced
element. The slot is ``None`` before the action is applied and again after it
has been undone, so an undone action can be applied again as-is. While the
action is applied the slot holds a :class:`Captured` wrapper, which keeps a
captured ``None`` element distinct from an empty slot.
"""

from __future__ import annotations

import uuid
from abc import abstractmethod
from typing import TYPE_CHECKING, Annotated, Any, Generic, Literal

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeVar

from ..ports.editable import MISSING
from ..primitives.exceptions import (
    ActionStateError,
    InvariantViolationError,
    KeyOutOfRangeError,
)

if TYPE_CHECKING:
    from ..ports.editable import IEditable

E = TypeVar("E", default=Any)  # Element type
K = TypeVar("K", default=Any)  # Key type


class Captured(BaseModel):
    """Inversion data captured when an action was applied."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any


class BaseAction(BaseModel):
    """
    Base for all actions.

    Intent fields are frozen once the action is built; only the inversion
    slot changes, and only the action itself changes it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    action_id: str = Field(default_factory=lambda: str(uuid.uuid4()), frozen=True)

    @property
    @abstractmethod
    def is_applied(self) -> bool:
        """True while the inversion slot is populated."""

    @abstractmethod
    def apply(self, target: IEditable[Any, Any]) -> None:
        """Perform the edit on *target* and capture the inversion data."""

    @abstractmethod
    def undo(self, target: IEditable[Any, Any]) -> None:
        """Reverse the edit on *target* and clear the inversion data."""

    def _ensure_not_applied(self) -> None:
        if self.is_applied:
            raise ActionStateError(
                f"{type(self).__name__} (action_id={self.action_id}) is already"
                " applied; undo it before applying it again"
            )


class DeleteAction(BaseAction, Generic[E, K]):
    """Remove the element at ``key``; undo puts it back at the same key.

    Usage::

        action = DeleteAction(key=0)
        action.apply(numbers)      # numbers: [1, 2, 3] -> [2, 3]
        assert action.result == Captured(value=1)
        action.undo(numbers)       # numbers: [2, 3] -> [1, 2, 3]
    """

    kind: Literal["delete"] = Field(default="delete", frozen=True)
    key: K = Field(frozen=True)
    result: Captured | None = None

    @property
    def is_applied(self) -> bool:
        return self.result is not None

    def apply(self, target: IEditable[E, K]) -> None:
        self._ensure_not_applied()
        removed = target.delete(self.key)
        # An invalid key leaves the slot empty, which turns undo into a no-op.
        if removed is not MISSING:
            self.result = Captured(value=removed)

    def undo(self, target: IEditable[E, K]) -> None:
        if self.result is None:
            return
        try:
            target.insert(self.key, self.result.value)
        except KeyOutOfRangeError as exc:
            raise InvariantViolationError(self, str(exc)) from exc
        self.result = None


class AddAction(BaseAction, Generic[E, K]):
    """Append ``element``; undo deletes it again by the key it was given."""

    kind: Literal["add"] = Field(default="add", frozen=True)
    element: E = Field(frozen=True)
    key: Captured | None = None

    @property
    def is_applied(self) -> bool:
        return self.key is not None

    def apply(self, target: IEditable[E, K]) -> None:
        self._ensure_not_applied()
        self.key = Captured(value=target.add(self.element))

    def undo(self, target: IEditable[E, K]) -> None:
        if self.key is None:
            return
        if target.delete(self.key.value) is MISSING:
            raise InvariantViolationError(
                self, f"assigned key {self.key.value!r} is no longer in range"
            )
        self.key = None


class EditAction(BaseAction, Generic[E, K]):
    """Replace the element at ``key`` with ``new``; undo restores ``prev``."""

    kind: Literal["edit"] = Field(default="edit", frozen=True)
    key: K = Field(frozen=True)
    new: E = Field(frozen=True)
    prev: Captured | None = None

    @property
    def is_applied(self) -> bool:
        return self.prev is not None

    def apply(self, target: IEditable[E, K]) -> None:
        self._ensure_not_applied()
        replaced = target.edit(self.key, self.new)
        if replaced is not MISSING:
            self.prev = Captured(value=replaced)

    def undo(self, target: IEditable[E, K]) -> None:
        if self.prev is None:
            return
        if target.edit(self.key, self.prev.value) is MISSING:
            raise InvariantViolationError(
                self, f"key {self.key!r} was valid when applied but is not now"
            )
        self.prev = None


#: Closed union of every action kind, discriminated on ``kind``.
Action = Annotated[
    DeleteAction | AddAction | EditAction,
    Field(discriminator="kind"),
]
