"""Multi-column sorting engine.

Sorts table rows by an ordered list of ``SortSpec`` entries. Index 0 is the
primary key; later entries only break ties left by the ones before them.
The sort is stable by construction: every row is decorated with its original
index, which serves as the final tie-break once the whole chain reports
equality. Input sequences are never mutated; a new list is always returned.

Missing values (``None``, including paths that could not be resolved) are
placed after all present values for that key, independent of direction.
Comparators are only invoked when both values are present.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Generic, Iterable, List, Sequence, Tuple, TypeVar

from .field_path import FieldPath, compile_path
from .sort_comparators import (
    Comparator,
    ComparatorSelection,
    ComparatorRegistry,
    ComparatorType,
    SortDirection,
    default_registry,
)

__all__ = ["SortSpec", "SortSpecList", "make_spec", "sort_rows", "MultiColumnSorter"]

_log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SortSpec:
    """One active column: key path, direction and comparator.

    The key is compiled into a ``FieldPath`` once, when the spec is created.
    """

    key: str
    direction: SortDirection
    comparator: Comparator
    path: FieldPath = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SortDirection(self.direction))
        object.__setattr__(self, "path", compile_path(self.key))

    def with_direction(self, direction: SortDirection) -> "SortSpec":
        return SortSpec(self.key, direction, self.comparator)


SortSpecList = Tuple[SortSpec, ...]


def make_spec(
    key: str,
    direction: SortDirection | str = SortDirection.ASC,
    comparator: ComparatorSelection = ComparatorType.STRING,
    *,
    registry: ComparatorRegistry = default_registry,
) -> SortSpec:
    """Build a spec, resolving ``comparator`` through ``registry``."""
    return SortSpec(key, SortDirection(direction), registry.resolve(comparator))


def _compare_decorated(
    left: Tuple[int, Tuple[Any, ...]],
    right: Tuple[int, Tuple[Any, ...]],
    chain: SortSpecList,
) -> int:
    left_index, left_values = left
    right_index, right_values = right
    for spec, a, b in zip(chain, left_values, right_values):
        if a is None or b is None:
            if a is None and b is None:
                continue
            return 1 if a is None else -1
        result = spec.comparator(a, b, spec.direction)
        if result:
            return result
    return left_index - right_index


def sort_rows(rows: Iterable[T], specs: Sequence[SortSpec]) -> List[T]:
    items = list(rows)
    if not specs or len(items) < 2:
        return items
    chain: SortSpecList = tuple(specs)
    # Resolve each key once per row instead of once per comparison
    decorated = [
        (index, tuple(spec.path.resolve(row) for spec in chain)) for index, row in enumerate(items)
    ]
    decorated.sort(key=cmp_to_key(lambda a, b: _compare_decorated(a, b, chain)))
    _log.debug("sorted %d rows by %s", len(items), [(s.key, s.direction.value) for s in chain])
    return [items[index] for index, _ in decorated]


class MultiColumnSorter(Generic[T]):
    """Convenience wrapper binding a row set to the sorting engine.

    Usage:
        sorter = MultiColumnSorter(rows)
        rows_sorted = sorter.sort([
            make_spec("price", "desc", "currency"),
            make_spec("parent.title"),
        ])
    """

    def __init__(self, rows: Iterable[T]):
        self._rows: List[T] = list(rows)

    def sort(self, specs: Sequence[SortSpec]) -> List[T]:
        return sort_rows(self._rows, specs)

    @staticmethod
    def single(
        rows: Iterable[T],
        key: str,
        direction: SortDirection | str = SortDirection.ASC,
        comparator: ComparatorSelection = ComparatorType.STRING,
    ) -> List[T]:
        return sort_rows(rows, [make_spec(key, direction, comparator)])
