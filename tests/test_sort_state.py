import pytest

from dashboard.services.errors import InvalidSpecListError
from dashboard.services.multi_column_sort import make_spec
from dashboard.services.sort_comparators import CustomComparator, SortDirection, compare_numbers
from dashboard.services.sort_state import Activate, Clear, Replace, SortStateStore, reduce


def _keys(specs):
    return [(s.key, s.direction.value) for s in specs]


def test_three_activation_cycle():
    state = ()
    state = reduce(state, Activate("name"))
    assert _keys(state) == [("name", "asc")]
    state = reduce(state, Activate("name"))
    assert _keys(state) == [("name", "desc")]
    state = reduce(state, Activate("name"))
    assert state == ()


def test_new_column_becomes_primary():
    store = SortStateStore()
    store.activate("a")
    store.activate("b")
    assert _keys(store.current()) == [("b", "asc"), ("a", "asc")]


def test_direction_flip_keeps_rank():
    store = SortStateStore()
    store.activate("a")
    store.activate("b")
    store.activate("a")
    assert _keys(store.current()) == [("b", "asc"), ("a", "desc")]


def test_removal_keeps_relative_order():
    store = SortStateStore()
    for key in ("a", "b", "c"):
        store.activate(key)
    store.activate("b")
    store.activate("b")
    assert _keys(store.current()) == [("c", "asc"), ("a", "asc")]


def test_reducer_returns_new_tuples():
    before = reduce((), Activate("a"))
    after = reduce(before, Activate("b"))
    assert after is not before
    assert _keys(before) == [("a", "asc")]


def test_comparator_kept_across_flip():
    store = SortStateStore()
    store.activate("qty", "number")
    store.activate("qty", "string")
    (spec,) = store.current()
    assert spec.comparator is compare_numbers
    assert spec.direction is SortDirection.DESC


def test_custom_comparator_selection():
    def by_len(a, b, d):
        return len(a) - len(b)

    store = SortStateStore()
    store.activate("name", CustomComparator(by_len))
    assert store.current()[0].comparator is by_len


def test_clear_and_replace():
    store = SortStateStore()
    store.activate("a")
    assert store.clear() == ()
    specs = (make_spec("created_at", "desc", "date"), make_spec("name"))
    assert store.replace(specs) == specs
    assert store.current() == specs


def test_replace_rejects_duplicates():
    store = SortStateStore()
    with pytest.raises(InvalidSpecListError) as exc:
        store.replace([make_spec("a"), make_spec("a", "desc")])
    assert exc.value.context["duplicates"] == ["a"]
    assert store.current() == ()


def test_replace_rejects_foreign_entries():
    with pytest.raises(InvalidSpecListError):
        reduce((), Replace(({"key": "a"},)))


def test_initial_state_validated():
    with pytest.raises(InvalidSpecListError):
        SortStateStore([make_spec("a"), make_spec("a")])


def test_clear_action():
    assert reduce((make_spec("a"),), Clear()) == ()


def test_unknown_action():
    with pytest.raises(TypeError):
        reduce((), "activate")
