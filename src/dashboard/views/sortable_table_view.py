"""SortableTableView

QTableWidget-based view shared by the category, product and location
screens. Column headers drive a ``TableSortController``: each click cycles
that column through ascending, descending and unsorted, and header captions
show the direction glyph plus a rank badge when several columns are sorted.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence

from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
)

from config import settings
from dashboard.services.event_bus import Event, TableEvent
from dashboard.services.field_path import FieldPath, compile_path
from dashboard.services.multi_column_sort import SortSpec
from dashboard.services.sort_comparators import ComparatorSelection, ComparatorType
from dashboard.services.table_sort_controller import TableSortController

__all__ = ["ColumnSpec", "SortableTableView"]


def _default_format(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class ColumnSpec:
    key: str  # dot path into the record, e.g. "parent.title"
    title: str
    comparator: ComparatorSelection = ComparatorType.STRING
    formatter: Callable[[Any], str] = _default_format

    @property
    def path(self) -> FieldPath:
        return compile_path(self.key)


class SortableTableView(QWidget):
    def __init__(
        self,
        columns: Sequence[ColumnSpec],
        *,
        title: str = "",
        default_sorting: Optional[Iterable[SortSpec]] = None,
        controller: Optional[TableSortController] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.columns: List[ColumnSpec] = list(columns)
        self._paths = [c.path for c in self.columns]
        settings.ensure_collation_locale()
        if controller is None:
            if default_sorting is None:
                default_sorting = settings.default_sorting()
            controller = TableSortController(default_sorting=default_sorting)
        self.controller = controller
        self._build_ui(title)
        self.controller.subscribe(self._on_controller_event, TableEvent.SORT_CHANGED)
        self.controller.subscribe(self._on_controller_event, TableEvent.ROWS_CHANGED)
        self._refresh()

    def _build_ui(self, title: str):
        root = QVBoxLayout(self)
        bar = QHBoxLayout()
        self.title_label = QLabel(title)
        self.title_label.setObjectName("viewTitleLabel")
        bar.addWidget(self.title_label)
        bar.addStretch(1)
        self.reset_button = QPushButton("Reset sorting")
        self.reset_button.clicked.connect(lambda: self.controller.clear())  # type: ignore
        bar.addWidget(self.reset_button)
        root.addLayout(bar)
        self.table = QTableWidget(0, len(self.columns))
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)
        header.setSectionsClickable(True)
        header.sectionClicked.connect(self._on_header_clicked)  # type: ignore
        root.addWidget(self.table)

    def set_rows(self, rows: Sequence[Any]):
        self.controller.set_rows(rows)

    def _on_controller_event(self, _event: Event):
        self._refresh()

    def _on_header_clicked(self, logical_index: int):
        column = self.columns[logical_index]
        self.controller.activate(column.key, column.comparator)

    def _refresh(self):
        self.table.setHorizontalHeaderLabels(
            [self.controller.header_props(c.key).label(c.title) for c in self.columns]
        )
        rows = self.controller.sorted_rows
        self.table.setRowCount(len(rows))
        for r, record in enumerate(rows):
            for c, (column, path) in enumerate(zip(self.columns, self._paths)):
                self.table.setItem(r, c, QTableWidgetItem(column.formatter(path.resolve(record))))
        self.reset_button.setEnabled(bool(self.controller.current()))

    # Testing helpers -------------------------------------------------
    def header_labels(self) -> List[str]:
        labels = []
        for c in range(self.table.columnCount()):
            item = self.table.horizontalHeaderItem(c)
            labels.append(item.text() if item else "")
        return labels

    def visible_values(self, column: int) -> List[str]:
        values = []
        for r in range(self.table.rowCount()):
            item = self.table.item(r, column)
            values.append(item.text() if item else "")
        return values
