"""EditableSequence — list-backed editable collection for examples and tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from ...ports.editable import MISSING, IEditable, MissingType
from ...primitives.exceptions import KeyOutOfRangeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

E = TypeVar("E")


class EditableSequence(IEditable[E, int], Generic[E]):
    """In-memory implementation of ``IEditable[E, int]``.

    Keys are 0-based list positions. Negative keys are out of range rather
    than counting from the end.
    """

    def __init__(self, elements: Iterable[E] = ()) -> None:
        self._items: list[E] = list(elements)

    def _in_range(self, key: int) -> bool:
        return 0 <= key < len(self._items)

    def add(self, element: E) -> int:
        self._items.append(element)
        return len(self._items) - 1

    def delete(self, key: int) -> E | MissingType:
        if not self._in_range(key):
            return MISSING
        return self._items.pop(key)

    def edit(self, key: int, new: E) -> E | MissingType:
        if not self._in_range(key):
            return MISSING
        old = self._items[key]
        self._items[key] = new
        return old

    def insert(self, key: int, element: E) -> None:
        if not 0 <= key <= len(self._items):
            raise KeyOutOfRangeError(key, len(self._items))
        self._items.insert(key, element)

    # ── Read access ──────────────────────────────────────────────

    def to_list(self) -> list[E]:
        """Return a shallow copy of the elements."""
        return list(self._items)

    def __getitem__(self, key: int) -> E:
        return self._items[key]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EditableSequence):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
