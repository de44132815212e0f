"""Global configuration for dashboard table sorting."""

from __future__ import annotations

import locale
import logging
import os
from typing import Final

from dashboard.services.multi_column_sort import SortSpecList, make_spec
from dashboard.services.sort_comparators import ComparatorType

_log = logging.getLogger(__name__)

# Empty means "keep the process locale" (C / POSIX unless the host sets one)
COLLATION_LOCALE: Final = os.environ.get("DASHBOARD_COLLATION_LOCALE", "")
DEFAULT_SORT_KEY: Final = os.environ.get("DASHBOARD_DEFAULT_SORT_KEY", "created_at")
DEFAULT_SORT_DIRECTION: Final = os.environ.get("DASHBOARD_DEFAULT_SORT_DIRECTION", "desc")


def apply_collation_locale(name: str | None = None) -> bool:
    """Set ``LC_COLLATE`` for the string comparator; returns True when applied."""
    target = COLLATION_LOCALE if name is None else name
    if not target:
        return False
    try:
        locale.setlocale(locale.LC_COLLATE, target)
    except locale.Error as exc:
        _log.warning("collation locale %r unavailable, keeping process locale: %s", target, exc)
        return False
    _log.debug("collation locale set to %r", target)
    return True


_collation_checked = False


def ensure_collation_locale() -> None:
    """Apply the configured collation locale once per process."""
    global _collation_checked
    if _collation_checked:
        return
    _collation_checked = True
    apply_collation_locale()


def default_sorting() -> SortSpecList:
    """Initial sort applied to freshly loaded admin tables (newest first)."""
    if not DEFAULT_SORT_KEY:
        return ()
    return (make_spec(DEFAULT_SORT_KEY, DEFAULT_SORT_DIRECTION, ComparatorType.DATE),)
