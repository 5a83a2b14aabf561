"""Histogram of allocation counts by requested size, split by top call sites."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass, field, replace
from typing import ClassVar, Iterable, Optional

from heapview.location import Symbol

_SIZE_BUCKETS = (
    (8, "0B to 8B"),
    (16, "9B to 16B"),
    (32, "17B to 32B"),
    (64, "33B to 64B"),
    (128, "65B to 128B"),
    (256, "129B to 256B"),
    (512, "257B to 512B"),
    (1024, "512B to 1KB"),
    (2**64 - 1, "more than 1KB"),
)

_BLACK = (0, 0, 0)


@dataclass
class HistogramColumn:
    """Number of allocations attributed to one symbol, or to all of them."""

    allocations: int = 0
    symbol: Symbol = field(default_factory=Symbol)


@dataclass
class HistogramRow:
    """One size bucket: the total in column 0, the top symbols after it."""

    NUM_COLUMNS: ClassVar[int] = 10 + 1

    size_label: str = ""
    size: int = 0
    columns: list[HistogramColumn] = field(
        default_factory=lambda: [HistogramColumn() for _ in range(HistogramRow.NUM_COLUMNS)]
    )

    def _copy(self) -> HistogramRow:
        return HistogramRow(self.size_label, self.size, [replace(column) for column in self.columns])


@dataclass
class CountedAllocation:
    """How often an allocation of ``size`` bytes was made at ``symbol``."""

    size: int
    allocations: int
    symbol: Symbol = field(default_factory=Symbol)


def color_for_column(column: int, column_count: int) -> tuple[int, int, int]:
    """The RGB colour of a histogram column, spread over the hue circle."""
    hue_degrees = int((column / column_count) * 255)
    red, green, blue = colorsys.hsv_to_rgb((hue_degrees % 360) / 360.0, 1.0, 1.0)
    return round(red * 255), round(green * 255), round(blue * 255)


def build_size_histogram(counted_allocations: Iterable[CountedAllocation]) -> list[HistogramRow]:
    """Group allocations into size buckets, keeping the ten busiest symbols per bucket."""
    infos = sorted(counted_allocations, key=lambda info: (info.size, info.allocations))
    if not infos:
        return []

    result: list[HistogramRow] = []
    bucket_index = 0
    row = HistogramRow()
    row.size, row.size_label = _SIZE_BUCKETS[bucket_index]
    column_data: dict[Symbol, int] = {}

    def insert_columns() -> None:
        ranked = sorted(sorted(column_data.items()), key=lambda item: item[1], reverse=True)
        for position, (symbol, allocations) in enumerate(ranked[: HistogramRow.NUM_COLUMNS - 1], start=1):
            row.columns[position] = HistogramColumn(allocations, symbol)

    for info in infos:
        if info.size > row.size:
            insert_columns()
            column_data.clear()
            result.append(row._copy())
            bucket_index += 1
            row.size, row.size_label = _SIZE_BUCKETS[bucket_index]
            row.columns[0] = HistogramColumn(info.allocations, Symbol())
        else:
            row.columns[0].allocations += info.allocations
        column_data[info.symbol] = column_data.get(info.symbol, 0) + info.allocations

    insert_columns()
    result.append(row._copy())
    return result


class HistogramModel:
    """Table of histogram rows; roles are ``display``, ``tooltip``, ``brush`` and ``pen``."""

    def __init__(self) -> None:
        self._data: list[HistogramRow] = []

    def reset_data(self, data: list[HistogramRow]) -> None:
        self._data = list(data)

    def clear_data(self) -> None:
        self._data = []

    def header_data(self, section: int, vertical: bool = True, role: str = "display") -> Optional[str]:
        """The size label of a row, for the vertical header only."""
        if vertical and role == "display" and 0 <= section < len(self._data):
            return self._data[section].size_label
        return None

    def data(self, row: int, column: int, role: str = "display"):
        if not (0 <= row < self.row_count() and 0 <= column < self.column_count()):
            return None
        if role == "brush":
            return color_for_column(column, self.column_count())
        if role == "pen":
            return _BLACK
        if role not in ("display", "tooltip"):
            return None
        cell = self._data[row].columns[column]
        if role == "tooltip":
            if column == 0:
                return f"{cell.allocations} allocations in total"
            symbol = cell.symbol
            return f"{cell.allocations} allocations from {symbol.symbol} in {symbol.binary} ({symbol.path})"
        return cell.allocations

    def row_count(self) -> int:
        return len(self._data)

    def column_count(self) -> int:
        return HistogramRow.NUM_COLUMNS