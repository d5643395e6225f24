"""Tests for FieldRouter and RoutedAction."""

from __future__ import annotations

import logging

import pytest

from reversible_edit.edits.actions import (
    AddAction,
    Captured,
    DeleteAction,
    EditAction,
)
from reversible_edit.edits.routing import FieldRouter, RoutedAction
from reversible_edit.ports import IRoutedAction
from reversible_edit.primitives.exceptions import (
    FieldRegistrationError,
    RoutingError,
    UnknownFieldError,
)

# ============================================================================
# Tests: FieldRouter
# ============================================================================


class TestFieldRouter:
    def test_register_and_resolve(self, project, caplog) -> None:
        caplog.set_level(logging.DEBUG)
        router = FieldRouter()

        router.register("numbers", lambda doc: doc.nums)

        assert router.resolve(project, "numbers") is project.nums
        assert "Registered document field 'numbers'" in caplog.text

    def test_from_attributes(self, project) -> None:
        router = FieldRouter.from_attributes("nums", "strs")

        assert router.fields() == ["nums", "strs"]
        assert router.resolve(project, "strs") is project.strs

    def test_duplicate_registration(self) -> None:
        router = FieldRouter()

        def accessor(doc):
            return doc.nums

        router.register("nums", accessor)
        # Same accessor again is fine
        router.register("nums", accessor)

        with pytest.raises(FieldRegistrationError, match="Duplicate accessor"):
            router.register("nums", lambda doc: doc.strs)

    def test_unknown_field(self, project, router) -> None:
        with pytest.raises(UnknownFieldError) as exc:
            router.resolve(project, "missing")

        assert exc.value.field == "missing"
        assert isinstance(exc.value, RoutingError)

    def test_missing_attribute_is_unknown_field(self, project) -> None:
        router = FieldRouter.from_attributes("colours")

        with pytest.raises(UnknownFieldError, match="colours"):
            router.resolve(project, "colours")

    def test_non_editable_field_is_rejected(self) -> None:
        router = FieldRouter()
        router.register("plain", lambda doc: doc)

        with pytest.raises(UnknownFieldError, match="not an editable collection"):
            router.resolve([1, 2, 3], "plain")

    def test_has_field_and_clear(self, router) -> None:
        assert router.has_field("nums")
        assert not router.has_field("other")

        router.clear()

        assert router.fields() == []


# ============================================================================
# Tests: RoutedAction
# ============================================================================


class TestRoutedAction:
    def test_apply_touches_only_target_field(self, project, router) -> None:
        routed = RoutedAction.delete("nums", 0)

        routed.apply(project, router)

        assert project.nums == [2, 3]
        assert project.strs == ["a", "b", "c"]

    def test_undo_touches_only_target_field(self, project, router) -> None:
        routed = RoutedAction.edit("strs", 1, "B")

        routed.apply(project, router)
        assert project.strs == ["a", "B", "c"]
        routed.undo(project, router)

        assert project.strs == ["a", "b", "c"]
        assert project.nums == [1, 2, 3]

    def test_shortcuts_build_matching_actions(self) -> None:
        assert isinstance(RoutedAction.delete("nums", 0).action, DeleteAction)
        assert isinstance(RoutedAction.add("nums", 4).action, AddAction)
        assert isinstance(RoutedAction.edit("nums", 0, 9).action, EditAction)

    def test_wraps_given_action(self, project, router) -> None:
        action = AddAction(element="d")
        routed = RoutedAction(target="strs", action=action)

        routed.apply(project, router)

        assert routed.action.key == Captured(value=3)
        assert routed.is_applied

    def test_validates_from_plain_data(self) -> None:
        routed = RoutedAction.model_validate(
            {"target": "nums", "action": {"kind": "edit", "key": 0, "new": 10}}
        )

        assert isinstance(routed.action, EditAction)
        assert routed.action.new == 10

    def test_rejects_unknown_action_kind(self) -> None:
        with pytest.raises(Exception, match="kind"):
            RoutedAction.model_validate(
                {"target": "nums", "action": {"kind": "move", "key": 0}}
            )

    def test_target_is_frozen(self) -> None:
        routed = RoutedAction.delete("nums", 0)
        with pytest.raises(Exception, match="frozen"):
            routed.target = "strs"

    def test_satisfies_routed_action_port(self) -> None:
        assert isinstance(RoutedAction.delete("nums", 0), IRoutedAction)
