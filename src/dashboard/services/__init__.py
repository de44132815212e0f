"""Service layer exports.

Responsibilities:
 - Comparator registry and typed comparators
 - Multi-column sorting engine and sort state machine
 - Header indicators and the table sort controller facade
 - EventBus publish/subscribe core
"""

from .errors import (  # noqa: F401
    SortingError,
    InvalidSpecListError,
    UnknownComparatorError,
    RegistryFrozenError,
)
from .event_bus import EventBus, TableEvent  # noqa: F401
from .sort_comparators import (  # noqa: F401
    SortDirection,
    ComparatorType,
    CustomComparator,
    ComparatorRegistry,
    default_registry,
)
from .multi_column_sort import SortSpec, make_spec, sort_rows, MultiColumnSorter  # noqa: F401
from .sort_state import SortStateStore, Activate, Clear, Replace, reduce  # noqa: F401
from .sort_indicator import SortIndicator, HeaderSortProps, indicator_for, header_props  # noqa: F401
from .table_sort_controller import TableSortController  # noqa: F401

__all__ = [
    "SortingError",
    "InvalidSpecListError",
    "UnknownComparatorError",
    "RegistryFrozenError",
    "EventBus",
    "TableEvent",
    "SortDirection",
    "ComparatorType",
    "CustomComparator",
    "ComparatorRegistry",
    "default_registry",
    "SortSpec",
    "make_spec",
    "sort_rows",
    "MultiColumnSorter",
    "SortStateStore",
    "Activate",
    "Clear",
    "Replace",
    "reduce",
    "SortIndicator",
    "HeaderSortProps",
    "indicator_for",
    "header_props",
    "TableSortController",
]
