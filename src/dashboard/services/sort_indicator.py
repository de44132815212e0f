"""Per-column sort indicators for table headers.

Pure projections of a ``SortSpecList``: the rendering layer asks for a
column's indicator (direction, rank, primary flag) or ready-made header props
without touching the sort store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .multi_column_sort import SortSpec
from .sort_comparators import SortDirection

__all__ = ["SortIndicator", "HeaderSortProps", "indicator_for", "header_props"]

_GLYPHS = {SortDirection.ASC: "▲", SortDirection.DESC: "▼"}


@dataclass(frozen=True)
class SortIndicator:
    direction: SortDirection
    is_primary: bool
    rank: int  # 1-based, 1 = primary


@dataclass(frozen=True)
class HeaderSortProps:
    indicator: Optional[SortIndicator]
    sort_order: Optional[str]  # "ascend" / "descend" / None
    css_class: str
    glyph: str
    badge: str

    @property
    def active(self) -> bool:
        return self.indicator is not None

    def label(self, title: str) -> str:
        """Header caption such as ``"Price ▼2"``."""
        if not self.active:
            return title
        return f"{title} {self.glyph}{self.badge}"


def indicator_for(specs: Sequence[SortSpec], column_key: str) -> Optional[SortIndicator]:
    for index, spec in enumerate(specs):
        if spec.key == column_key:
            return SortIndicator(direction=spec.direction, is_primary=index == 0, rank=index + 1)
    return None


def header_props(specs: Sequence[SortSpec], column_key: str) -> HeaderSortProps:
    indicator = indicator_for(specs, column_key)
    if indicator is None:
        return HeaderSortProps(None, None, "", "", "")
    # Rank badge only disambiguates when several columns are sorted
    badge = str(indicator.rank) if len(specs) > 1 else ""
    return HeaderSortProps(
        indicator=indicator,
        sort_order="ascend" if indicator.direction is SortDirection.ASC else "descend",
        css_class="column-sorted",
        glyph=_GLYPHS[indicator.direction],
        badge=badge,
    )
