"""Typed, direction-aware comparators for table sorting.

Every comparator has the signature ``(a, b, direction) -> int`` and receives
already-resolved field values (never whole records). A negative result means
``a`` sorts before ``b``. For ``SortDirection.DESC`` the natural result is
negated.

Built-ins (tags in parentheses):
 - ``string``   case-insensitive, locale-aware collation (``locale.strcoll``)
 - ``number``   leading numeric prefix parsed as float, otherwise 0
 - ``date``     datetimes, epoch milliseconds, ISO-8601 or common slash/dotted
                text, otherwise epoch
 - ``currency`` like ``number`` after stripping ``$`` and ``,`` from text

The module-level ``default_registry`` holds the built-ins and is frozen at
import time; it is shared process-wide. Callers needing extra named
comparators create their own ``ComparatorRegistry``.
"""

from __future__ import annotations

import locale
import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, List, Union

from .errors import RegistryFrozenError, UnknownComparatorError

__all__ = [
    "SortDirection",
    "ComparatorType",
    "Comparator",
    "CustomComparator",
    "ComparatorSelection",
    "ComparatorRegistry",
    "compare_strings",
    "compare_numbers",
    "compare_dates",
    "compare_currency",
    "default_registry",
]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class ComparatorType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    CURRENCY = "currency"


Comparator = Callable[[Any, Any, SortDirection], int]


@dataclass(frozen=True)
class CustomComparator:
    """Caller supplied comparator used instead of a built-in type."""

    fn: Comparator

    def __call__(self, a: Any, b: Any, direction: SortDirection) -> int:
        return self.fn(a, b, direction)


ComparatorSelection = Union[ComparatorType, str, CustomComparator, Comparator]

# Same prefix grammar as a browser's parseFloat: "12px" -> 12, "abc" -> invalid
_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")
_CURRENCY_NOISE = re.compile(r"[$,]")
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M:%S",
    "%d.%m.%Y",
    "%d.%m.%Y %H:%M",
)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _directed(result: int, direction: SortDirection) -> int:
    return -result if direction == SortDirection.DESC else result


def _to_float(value: Any) -> float:
    try:
        number = float(value)
    except OverflowError:  # ints beyond float range
        return math.inf if value > 0 else -math.inf
    except ValueError:  # Decimal("sNaN")
        return 0.0
    return 0.0 if math.isnan(number) else number


def _parse_float(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        return _to_float(value)
    match = _NUMERIC_PREFIX.match(str(value))
    if match is None:
        return 0.0
    return _to_float(match.group(1).replace("Infinity", "inf"))


def _parse_currency(value: Any) -> float:
    if isinstance(value, str):
        return _parse_float(_CURRENCY_NOISE.sub("", value))
    return _parse_float(value)


def _parse_date_text(text: str) -> datetime | None:
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _parse_timestamp(value: Any) -> float:
    """Return epoch milliseconds; naive values are read as UTC.

    Text is read as ISO-8601 first, then with the slash and dotted layouts
    in ``_DATE_FORMATS``.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float, Decimal)):
        return _to_float(value)
    elif isinstance(value, str):
        parsed = _parse_date_text(value.strip())
        if parsed is None:
            return 0.0
        dt = parsed
    else:
        return 0.0
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp() * 1000.0


def compare_strings(a: Any, b: Any, direction: SortDirection) -> int:
    left = "" if a is None else str(a).lower()
    right = "" if b is None else str(b).lower()
    return _directed(_sign(locale.strcoll(left, right)), direction)


def compare_numbers(a: Any, b: Any, direction: SortDirection) -> int:
    return _directed(_sign(_parse_float(a) - _parse_float(b)), direction)


def compare_dates(a: Any, b: Any, direction: SortDirection) -> int:
    return _directed(_sign(_parse_timestamp(a) - _parse_timestamp(b)), direction)


def compare_currency(a: Any, b: Any, direction: SortDirection) -> int:
    return _directed(_sign(_parse_currency(a) - _parse_currency(b)), direction)


_BUILTINS: Dict[ComparatorType, Comparator] = {
    ComparatorType.STRING: compare_strings,
    ComparatorType.NUMBER: compare_numbers,
    ComparatorType.DATE: compare_dates,
    ComparatorType.CURRENCY: compare_currency,
}


class ComparatorRegistry:
    """Maps comparator tags to comparator functions.

    Built-in tags are always present. Additional tags can be registered
    until ``freeze()`` is called; afterwards the registry is read-only.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Comparator] = {t.value: fn for t, fn in _BUILTINS.items()}
        self._frozen = False

    def register(self, tag: str, fn: Comparator, *, allow_override: bool = False) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register comparator '{tag}' on a frozen registry", context={"tag": tag}
            )
        if not callable(fn):
            raise TypeError(f"Comparator for '{tag}' must be callable, got {type(fn)!r}")
        if tag in self._entries and not allow_override:
            raise ValueError(f"Comparator '{tag}' already registered")
        self._entries[tag] = fn

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def tags(self) -> List[str]:
        return list(self._entries.keys())

    def get(self, tag: str | ComparatorType) -> Comparator:
        key = tag.value if isinstance(tag, ComparatorType) else tag
        try:
            return self._entries[key]
        except KeyError:
            raise UnknownComparatorError(
                f"Unknown comparator type '{key}'", context={"tag": key, "known": self.tags()}
            ) from None

    def resolve(self, selection: ComparatorSelection) -> Comparator:
        """Turn a comparator selection into a comparator function.

        Accepts a ``ComparatorType``, its string tag, a ``CustomComparator``
        or any bare callable with the comparator signature.
        """
        if isinstance(selection, (ComparatorType, str)):
            return self.get(selection)
        if isinstance(selection, CustomComparator):
            return selection.fn
        if callable(selection):
            return selection
        raise TypeError(f"Unsupported comparator selection: {selection!r}")


default_registry = ComparatorRegistry()
default_registry.freeze()
