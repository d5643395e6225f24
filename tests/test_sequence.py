import pytest

from reversible_edit.adapters.memory import EditableSequence
from reversible_edit.ports.editable import MISSING, IEditable
from reversible_edit.primitives.exceptions import KeyOutOfRangeError


def test_sequence_satisfies_editable_protocol() -> None:
    assert isinstance(EditableSequence([1]), IEditable)


def test_add_returns_new_last_key() -> None:
    seq = EditableSequence([1, 2, 3])
    assert seq.add(0) == 3
    assert seq == [1, 2, 3, 0]


def test_add_to_empty_sequence() -> None:
    seq: EditableSequence[str] = EditableSequence()
    assert seq.add("x") == 0
    assert seq.to_list() == ["x"]


def test_delete_shifts_following_keys_down() -> None:
    seq = EditableSequence(["a", "b", "c"])
    assert seq.delete(0) == "a"
    assert seq == ["b", "c"]
    assert seq[0] == "b"


@pytest.mark.parametrize("key", [3, 10, -1])
def test_delete_out_of_range_returns_missing(key: int) -> None:
    seq = EditableSequence([1, 2, 3])
    assert seq.delete(key) is MISSING
    assert seq == [1, 2, 3]


def test_edit_returns_previous_element() -> None:
    seq = EditableSequence([1, 2, 3])
    assert seq.edit(1, 20) == 2
    assert seq == [1, 20, 3]


@pytest.mark.parametrize("key", [3, -1])
def test_edit_out_of_range_returns_missing(key: int) -> None:
    seq = EditableSequence([1, 2, 3])
    assert seq.edit(key, 99) is MISSING
    assert seq == [1, 2, 3]


def test_insert_shifts_following_keys_up() -> None:
    seq = EditableSequence(["b", "c"])
    seq.insert(0, "a")
    assert seq == ["a", "b", "c"]


def test_insert_at_one_past_end_appends() -> None:
    seq = EditableSequence([1, 2])
    seq.insert(2, 3)
    assert seq == [1, 2, 3]


@pytest.mark.parametrize("key", [3, -1])
def test_insert_out_of_range_raises(key: int) -> None:
    seq = EditableSequence([1, 2])

    with pytest.raises(KeyOutOfRangeError) as exc:
        seq.insert(key, 0)

    assert exc.value.key == key
    assert exc.value.length == 2
    assert seq == [1, 2]


def test_out_of_range_error_is_an_index_error() -> None:
    with pytest.raises(IndexError):
        EditableSequence().insert(1, "x")


def test_sequence_equality_and_repr() -> None:
    assert EditableSequence([1, 2]) == EditableSequence([1, 2])
    assert EditableSequence([1, 2]) != EditableSequence([2, 1])
    assert repr(EditableSequence([1])) == "EditableSequence([1])"
    assert list(EditableSequence("ab")) == ["a", "b"]
    assert len(EditableSequence([1, 2, 3])) == 3
