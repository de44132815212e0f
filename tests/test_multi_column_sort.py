from dashboard.services.multi_column_sort import MultiColumnSorter, make_spec, sort_rows
from dashboard.services.sort_comparators import CustomComparator, SortDirection


def test_single_key_ascending():
    rows = [{"v": 5}, {"v": 1}, {"v": 3}]
    assert [r["v"] for r in sort_rows(rows, [make_spec("v", "asc", "number")])] == [1, 3, 5]


def test_single_key_descending():
    rows = [{"v": 5}, {"v": 1}, {"v": 3}]
    result = MultiColumnSorter.single(rows, "v", SortDirection.DESC, "number")
    assert [r["v"] for r in result] == [5, 3, 1]


def test_numeric_strings_sort_by_value():
    rows = [{"qty": "10"}, {"qty": "2"}, {"qty": "3"}]
    result = sort_rows(rows, [make_spec("qty", "asc", "number")])
    assert [r["qty"] for r in result] == ["2", "3", "10"]


def test_multi_key_tie_break():
    rows = [
        {"points": 10, "name": "B"},
        {"points": 12, "name": "A"},
        {"points": 10, "name": "A"},
    ]
    sorted_rows = MultiColumnSorter(rows).sort(
        [make_spec("points", "desc", "number"), make_spec("name")]
    )
    assert [r["points"] for r in sorted_rows] == [12, 10, 10]
    assert [r["name"] for r in sorted_rows] == ["A", "A", "B"]


def test_stable_for_equal_rows():
    rows = [{"id": i, "status": "active" if i % 2 else "ACTIVE"} for i in range(8)]
    result = sort_rows(rows, [make_spec("status")])
    assert [r["id"] for r in result] == list(range(8))


def test_stable_with_custom_comparator_reporting_equal():
    rows = [{"id": i} for i in range(5)]
    always_equal = CustomComparator(lambda a, b, d: 0)
    assert sort_rows(rows, [make_spec("id", "desc", always_equal)]) == rows


def test_input_not_mutated():
    rows = [{"v": 2}, {"v": 1}]
    snapshot = list(rows)
    result = sort_rows(rows, [make_spec("v", "asc", "number")])
    assert rows == snapshot
    assert result is not rows


def test_empty_specs_returns_copy():
    rows = [{"v": 2}, {"v": 1}]
    result = sort_rows(rows, [])
    assert result == rows and result is not rows
    assert sort_rows([], [make_spec("v")]) == []


def test_missing_values_sort_last_both_directions():
    rows = [{"id": 1}, {"id": 2, "price": "5"}, {"id": 3, "price": "1"}]
    asc = sort_rows(rows, [make_spec("price", "asc", "currency")])
    desc = sort_rows(rows, [make_spec("price", "desc", "currency")])
    assert [r["id"] for r in asc] == [3, 2, 1]
    assert [r["id"] for r in desc] == [2, 3, 1]


def test_nested_key_with_missing_parent():
    rows = [
        {"id": 1, "parent": None},
        {"id": 2, "parent": {"title": "beta"}},
        {"id": 3, "parent": {"title": "Alpha"}},
    ]
    result = sort_rows(rows, [make_spec("parent.title")])
    assert [r["id"] for r in result] == [3, 2, 1]


def test_idempotent():
    rows = [{"a": n % 3, "b": str(n)} for n in (5, 1, 4, 2, 3, 0)]
    specs = [make_spec("a", "desc", "number"), make_spec("b")]
    once = sort_rows(rows, specs)
    assert sort_rows(once, specs) == once


def test_missing_primary_values_fall_through_to_next_key():
    rows = [
        {"id": 1, "name": "cherry"},
        {"id": 2, "price": "5", "name": "banana"},
        {"id": 3, "name": "apple"},
    ]
    result = sort_rows(rows, [make_spec("price", "asc", "currency"), make_spec("name")])
    assert [r["id"] for r in result] == [2, 3, 1]


def test_out_of_range_numbers_sort():
    rows = [{"v": 10**400}, {"v": 1}]
    assert sort_rows(rows, [make_spec("v", "asc", "number")]) == [{"v": 1}, {"v": 10**400}]
