"""Table sort controller.

Facade used by every sortable table: it owns the externally supplied rows,
a ``SortStateStore`` and a memoised sorted view, and publishes
``TableEvent.SORT_CHANGED`` / ``TableEvent.ROWS_CHANGED`` on its EventBus.

Events are published once per actual transition: clearing an empty sort,
replacing the list with an equal one, or handing over the same row sequence
object again publishes nothing. The sorted view is recomputed only when the
rows or the sort list changed since the last read.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .event_bus import EventBus, EventHandler, Subscription, TableEvent
from .multi_column_sort import SortSpec, SortSpecList, sort_rows
from .sort_comparators import (
    ComparatorRegistry,
    ComparatorSelection,
    ComparatorType,
    default_registry,
)
from .sort_indicator import HeaderSortProps, SortIndicator, header_props, indicator_for
from .sort_state import SortStateStore

__all__ = ["TableSortController"]

_log = logging.getLogger(__name__)


class TableSortController:
    def __init__(
        self,
        rows: Iterable[Any] = (),
        default_sorting: Iterable[SortSpec] = (),
        *,
        bus: Optional[EventBus] = None,
        registry: ComparatorRegistry = default_registry,
    ) -> None:
        self.bus = bus or EventBus()
        self._store = SortStateStore(default_sorting, registry=registry)
        self._source: Any = rows
        self._rows: Tuple[Any, ...] = tuple(rows)
        self._rows_version = 0
        self._cache_key: Optional[Tuple[int, SortSpecList]] = None
        self._cache: Tuple[Any, ...] = ()

    # Dataset ----------------------------------------------------------
    @property
    def rows(self) -> List[Any]:
        return list(self._rows)

    def set_rows(self, rows: Iterable[Any]) -> None:
        if rows is self._source:
            return
        self._source = rows
        self._rows = tuple(rows)
        self._rows_version += 1
        self.bus.publish(TableEvent.ROWS_CHANGED, len(self._rows))

    @property
    def sorted_rows(self) -> List[Any]:
        key = (self._rows_version, self._store.current())
        if self._cache_key != key:
            self._cache = tuple(sort_rows(self._rows, key[1]))
            self._cache_key = key
            _log.debug("recomputed sorted view (%d rows)", len(self._cache))
        return list(self._cache)

    # Sort state -------------------------------------------------------
    def current(self) -> SortSpecList:
        return self._store.current()

    def activate(
        self, column_key: str, comparator: ComparatorSelection = ComparatorType.STRING
    ) -> SortSpecList:
        before = self._store.current()
        return self._publish_if_changed(before, self._store.activate(column_key, comparator))

    def clear(self) -> SortSpecList:
        return self._publish_if_changed(self._store.current(), self._store.clear())

    def replace(self, specs: Sequence[SortSpec]) -> SortSpecList:
        return self._publish_if_changed(self._store.current(), self._store.replace(specs))

    def _publish_if_changed(self, before: SortSpecList, after: SortSpecList) -> SortSpecList:
        if after != before:
            self.bus.publish(TableEvent.SORT_CHANGED, after)
        return after

    # Rendering helpers ------------------------------------------------
    def indicator_for(self, column_key: str) -> Optional[SortIndicator]:
        return indicator_for(self._store.current(), column_key)

    def header_props(self, column_key: str) -> HeaderSortProps:
        return header_props(self._store.current(), column_key)

    def subscribe(
        self, handler: EventHandler, event: TableEvent = TableEvent.SORT_CHANGED
    ) -> Subscription:
        return self.bus.subscribe(event, handler)
