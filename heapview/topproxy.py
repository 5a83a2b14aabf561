"""Flat view of the top-level rows with the highest cost of one kind."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from heapview.treemodel import Column, Role, RowData, TreeModel


class TopProxyType(Enum):
    PEAK = Column.PEAK
    LEAKED = Column.LEAKED
    ALLOCATIONS = Column.ALLOCATIONS
    TEMPORARY = Column.TEMPORARY

    @property
    def column(self) -> Column:
        return self.value


class TopProxy:
    """Filters a tree model down to its interesting top-level rows for one cost."""

    def __init__(self, proxy_type: TopProxyType, source: TreeModel) -> None:
        self.type = proxy_type
        self.source = source
        self.cost_threshold = 0
        source.add_reset_listener(self.update_cost_threshold)
        self.update_cost_threshold()

    def accepts_column(self, column: int) -> bool:
        return column == Column.LOCATION or column == self.type.column

    def accepts_row(self, row: RowData, parent: Optional[RowData] = None) -> bool:
        """Only top rows whose cost is non-zero and reaches the threshold."""
        if parent is not None:
            return False
        cost = self.source.data(row, self.type.column, Role.SORT)
        return bool(cost) and cost >= self.cost_threshold

    def update_cost_threshold(self) -> None:
        """Hide anything below 1% of the maximum cost."""
        if self.source.row_count() == 0:
            self.cost_threshold = 0
            return
        max_cost = self.source.data(None, self.type.column, Role.MAX_COST)
        self.cost_threshold = int(max_cost * 0.01)

    def rows(self) -> list[RowData]:
        """Accepted top-level rows, highest cost first."""
        accepted = [row for row in self.source.rows if self.accepts_row(row)]
        return sorted(
            accepted,
            key=lambda row: self.source.data(row, self.type.column, Role.SORT),
            reverse=True,
        )