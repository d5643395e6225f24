"""Routed actions and the field router that resolves their target."""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from ..ports.editable import IEditable
from ..primitives.exceptions import FieldRegistrationError, UnknownFieldError
from .actions import Action, AddAction, DeleteAction, EditAction

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class FieldRouter:
    """Maps field names to the editable collection they designate on a document.

    A document is any object; the router is the only place that knows its
    shape. Each registered accessor takes the document and returns one of its
    editable fields. Adding a field to a document means registering one more
    accessor here.

    **Conflict detection:** registering a different accessor under a name that
    is already taken raises :class:`FieldRegistrationError`.

    Usage::

        router = FieldRouter()
        router.register("nums", lambda project: project.nums)

        # Or, when the field names match attribute names:
        router = FieldRouter.from_attributes("nums", "strs")
    """

    def __init__(self) -> None:
        self._accessors: dict[str, Callable[[Any], IEditable[Any, Any]]] = {}

    @classmethod
    def from_attributes(cls, *names: str) -> FieldRouter:
        """Build a router whose fields are plain attributes of the document."""
        router = cls()
        for name in names:
            router.register(name, operator.attrgetter(name))
        return router

    # ── Registration ─────────────────────────────────────────────

    def register(
        self, name: str, accessor: Callable[[Any], IEditable[Any, Any]]
    ) -> None:
        existing = self._accessors.get(name)
        if existing is not None and existing is not accessor:
            msg = f"Duplicate accessor for field {name!r}: already registered"
            raise FieldRegistrationError(msg)
        self._accessors[name] = accessor
        logger.debug("Registered document field %r", name)

    # ── Lookup ───────────────────────────────────────────────────

    def resolve(self, document: Any, name: str) -> IEditable[Any, Any]:
        """Return the editable field *name* of *document*.

        Raises:
            UnknownFieldError: If *name* is not registered, or its accessor
                does not return an editable collection.
        """
        accessor = self._accessors.get(name)
        if accessor is None:
            raise UnknownFieldError(name)
        try:
            field = accessor(document)
        except AttributeError as exc:
            raise UnknownFieldError(name, str(exc)) from exc
        if not isinstance(field, IEditable):
            raise UnknownFieldError(
                name, f"{type(field).__name__} is not an editable collection"
            )
        return field

    def has_field(self, name: str) -> bool:
        return name in self._accessors

    def fields(self) -> list[str]:
        """Return registered field names in registration order."""
        return list(self._accessors)

    # ── Cleanup ──────────────────────────────────────────────────

    def clear(self) -> None:
        """Remove all registrations (testing utility)."""
        self._accessors.clear()


class RoutedAction(BaseModel):
    """An action tagged with the document field it targets.

    Apply and undo resolve the field through a :class:`FieldRouter` and
    delegate to the wrapped action, so the actions themselves never see the
    document's shape.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    target: str = Field(frozen=True)
    action: Action = Field(frozen=True)

    @classmethod
    def delete(cls, target: str, key: Any) -> RoutedAction:
        return cls(target=target, action=DeleteAction(key=key))

    @classmethod
    def add(cls, target: str, element: Any) -> RoutedAction:
        return cls(target=target, action=AddAction(element=element))

    @classmethod
    def edit(cls, target: str, key: Any, new: Any) -> RoutedAction:
        return cls(target=target, action=EditAction(key=key, new=new))

    @property
    def is_applied(self) -> bool:
        return self.action.is_applied

    def apply(self, document: Any, router: FieldRouter) -> None:
        self.action.apply(router.resolve(document, self.target))

    def undo(self, document: Any, router: FieldRouter) -> None:
        self.action.undo(router.resolve(document, self.target))
