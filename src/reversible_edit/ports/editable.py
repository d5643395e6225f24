"""IEditable — the capability a collection needs to take part in undo/redo."""

from __future__ import annotations

import enum
from typing import Final, Literal, Protocol, TypeVar, runtime_checkable

E = TypeVar("E")  # Element type
K = TypeVar("K")  # Key type


class Missing(enum.Enum):
    """Type of :data:`MISSING`."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


#: Returned by ``delete``/``edit`` for a key that is out of range. Elements
#: themselves may be ``None``, so ``None`` cannot signal an invalid key.
MISSING: Final = Missing.MISSING

MissingType = Literal[Missing.MISSING]


@runtime_checkable
class IEditable(Protocol[E, K]):
    """
    Port for an ordered collection addressed by positional keys.

    The history engine only ever talks to a document field through these four
    primitives. ``delete`` and ``edit`` report an invalid key by returning
    :data:`MISSING` and must leave the collection untouched in that case.
    """

    def add(self, element: E) -> K:
        """Append *element* and return the key it now occupies."""
        ...

    def delete(self, key: K) -> E | MissingType:
        """Remove and return the element at *key*, or ``MISSING`` if out of range.

        Elements after *key* shift down by one.
        """
        ...

    def edit(self, key: K, new: E) -> E | MissingType:
        """Replace the element at *key* and return the old one.

        Returns ``MISSING`` (and changes nothing) if *key* is out of range.
        """
        ...

    def insert(self, key: K, element: E) -> None:
        """Insert *element* at *key*, shifting later elements up by one.

        Valid keys are ``0..length`` inclusive; the one-past-end key appends.

        Raises:
            KeyOutOfRangeError: If *key* is outside that range.
        """
        ...
