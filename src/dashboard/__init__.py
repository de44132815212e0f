"""Admin dashboard table sorting public API.

Curated surface for views and tests. Qt widgets live in ``dashboard.views``
and are not imported here, so the sorting core stays importable without a GUI.
"""

from .services import (  # noqa: F401
    SortDirection,
    ComparatorType,
    CustomComparator,
    SortSpec,
    make_spec,
    sort_rows,
    TableSortController,
)

__all__ = [
    "SortDirection",
    "ComparatorType",
    "CustomComparator",
    "SortSpec",
    "make_spec",
    "sort_rows",
    "TableSortController",
]
