"""Shared fixtures for reversible-edit tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from reversible_edit.adapters.memory import EditableSequence
from reversible_edit.edits import FieldRouter, History


@dataclass
class Project:
    """Two-field document: a numeric sequence and a string sequence."""

    nums: EditableSequence[int] = field(
        default_factory=lambda: EditableSequence([1, 2, 3])
    )
    strs: EditableSequence[str] = field(
        default_factory=lambda: EditableSequence(["a", "b", "c"])
    )


@pytest.fixture
def project() -> Project:
    return Project()


@pytest.fixture
def router() -> FieldRouter:
    return FieldRouter.from_attributes("nums", "strs")


@pytest.fixture
def history(router: FieldRouter) -> History:
    return History(router)
