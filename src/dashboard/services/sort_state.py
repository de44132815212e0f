"""Sort state machine for interactive table headers.

The state is a plain ``SortSpecList`` (tuple of ``SortSpec``). ``reduce``
is a pure transition function over three actions:

 - ``Activate(key, comparator)`` cycles a column:
     inactive   -> ascending  (new spec prepended, becomes primary)
     ascending  -> descending (direction flips, rank unchanged)
     descending -> inactive   (spec removed, remaining order kept)
 - ``Clear()`` drops every spec.
 - ``Replace(specs)`` installs a validated list (e.g. a default sort).

``SortStateStore`` wraps the reducer with a current value for callers that
prefer an object API.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Union

from .errors import InvalidSpecListError
from .multi_column_sort import SortSpec, SortSpecList, make_spec
from .sort_comparators import (
    ComparatorRegistry,
    ComparatorSelection,
    ComparatorType,
    SortDirection,
    default_registry,
)

__all__ = [
    "Activate",
    "Clear",
    "Replace",
    "SortAction",
    "reduce",
    "validate_specs",
    "SortStateStore",
]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Activate:
    key: str
    comparator: ComparatorSelection = ComparatorType.STRING


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Replace:
    specs: SortSpecList


SortAction = Union[Activate, Clear, Replace]


def validate_specs(specs: Iterable[SortSpec]) -> SortSpecList:
    """Return ``specs`` as a tuple, rejecting foreign entries and duplicate keys."""
    result = tuple(specs)
    for spec in result:
        if not isinstance(spec, SortSpec):
            raise InvalidSpecListError(
                f"Sort list entries must be SortSpec, got {type(spec)!r}",
                context={"entry": spec},
            )
    duplicates = sorted(k for k, n in Counter(s.key for s in result).items() if n > 1)
    if duplicates:
        _log.warning("rejected sort list with duplicate keys: %s", duplicates)
        raise InvalidSpecListError(
            f"Duplicate sort keys: {', '.join(duplicates)}", context={"duplicates": duplicates}
        )
    return result


def _activate(
    state: SortSpecList, action: Activate, registry: ComparatorRegistry
) -> SortSpecList:
    index = next((i for i, spec in enumerate(state) if spec.key == action.key), None)
    if index is None:
        return (make_spec(action.key, SortDirection.ASC, action.comparator, registry=registry),) + state
    existing = state[index]
    if existing.direction is SortDirection.ASC:
        return state[:index] + (existing.with_direction(SortDirection.DESC),) + state[index + 1 :]
    return state[:index] + state[index + 1 :]


def reduce(
    state: SortSpecList,
    action: SortAction,
    *,
    registry: ComparatorRegistry = default_registry,
) -> SortSpecList:
    if isinstance(action, Activate):
        return _activate(state, action, registry)
    if isinstance(action, Clear):
        return ()
    if isinstance(action, Replace):
        return validate_specs(action.specs)
    raise TypeError(f"Unknown sort action: {action!r}")


class SortStateStore:
    """Holds the current sort list and applies actions through ``reduce``."""

    def __init__(
        self,
        initial: Iterable[SortSpec] = (),
        *,
        registry: ComparatorRegistry = default_registry,
    ) -> None:
        self._registry = registry
        self._state: SortSpecList = validate_specs(initial)

    def dispatch(self, action: SortAction) -> SortSpecList:
        self._state = reduce(self._state, action, registry=self._registry)
        _log.debug("%s -> %s", action, [(s.key, s.direction.value) for s in self._state])
        return self._state

    def activate(
        self, column_key: str, comparator: ComparatorSelection = ComparatorType.STRING
    ) -> SortSpecList:
        return self.dispatch(Activate(column_key, comparator))

    def clear(self) -> SortSpecList:
        return self.dispatch(Clear())

    def replace(self, specs: Iterable[SortSpec]) -> SortSpecList:
        return self.dispatch(Replace(tuple(specs)))

    def current(self) -> SortSpecList:
        return self._state
