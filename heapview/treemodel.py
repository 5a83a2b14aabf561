"""Tree of allocation costs per call site, with display data for each column."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Callable, Optional

from heapview.allocationdata import AllocationData
from heapview.location import Symbol
from heapview.util import format_bytes, format_cost_relative

DESCENDING = "descending"

_HEADERS = {
    "FUNCTION": "Function",
    "MODULE": "Module",
    "ALLOCATIONS": "Allocations",
    "TEMPORARY": "Temporary",
    "PEAK": "Peak",
    "LEAKED": "Leaked",
    "LOCATION": "Location",
}

_TOOLTIPS = {
    "FUNCTION": (
        "<qt>The parent function that called an allocation function. "
        "May be unknown when debug information is missing.</qt>"
    ),
    "MODULE": (
        "<qt>The module, i.e. executable or shared library, from which an allocation "
        "function was called.</qt>"
    ),
    "ALLOCATIONS": "<qt>The number of times an allocation function was called from this location.</qt>",
    "TEMPORARY": (
        "<qt>The number of temporary allocations. These allocations are directly followed "
        "by a free without any other allocations in-between.</qt>"
    ),
    "PEAK": (
        "<qt>The contributions from a given location to the maximum heap memory consumption "
        "in bytes. This takes deallocations into account.</qt>"
    ),
    "LEAKED": "<qt>The bytes allocated at this location that have not been deallocated.</qt>",
    "LOCATION": (
        "<qt>The location from which an allocation function was called. Function symbol and "
        "file information may be unknown when debug information was missing when heaptrack "
        "was run.</qt>"
    ),
}


def _escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


@dataclass(eq=False)
class RowData:
    """One node of the cost tree."""

    cost: AllocationData = field(default_factory=AllocationData)
    symbol: Symbol = field(default_factory=Symbol)
    parent: Optional[RowData] = field(default=None, repr=False)
    children: list[RowData] = field(default_factory=list)


class Column(IntEnum):
    PEAK = 0
    LEAKED = 1
    ALLOCATIONS = 2
    TEMPORARY = 3
    FUNCTION = 4
    MODULE = 5
    LOCATION = 6

    @classmethod
    def count(cls) -> int:
        return len(cls)


class Role(Enum):
    DISPLAY = auto()
    TOOLTIP = auto()
    INITIAL_SORT_ORDER = auto()
    SORT = auto()
    MAX_COST = auto()
    SYMBOL = auto()


_COST_ATTRS = {
    Column.PEAK: "peak",
    Column.LEAKED: "leaked",
    Column.ALLOCATIONS: "allocations",
    Column.TEMPORARY: "temporary",
}


def _symbol_lines(symbol: Symbol) -> str:
    return "{}\n  in {} ({})".format(
        _escape_html(symbol.symbol), _escape_html(symbol.binary), _escape_html(symbol.path)
    )


class TreeModel:
    """Holds the cost tree and answers display queries for its rows."""

    def __init__(self) -> None:
        self._data: list[RowData] = []
        self._max_cost = RowData()
        self._reset_listeners: list[Callable[[], None]] = []

    @property
    def rows(self) -> list[RowData]:
        """The top-level rows."""
        return self._data

    @property
    def max_cost(self) -> AllocationData:
        """The summary cost used as the total in relative figures."""
        return self._max_cost.cost

    def add_reset_listener(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` whenever the model contents are reset."""
        if callback not in self._reset_listeners:
            self._reset_listeners.append(callback)

    def _reset(self) -> None:
        for callback in self._reset_listeners:
            callback()

    def reset_data(self, data: list[RowData]) -> None:
        self._data = list(data)
        self._reset()

    def set_summary(self, cost: AllocationData) -> None:
        self._max_cost.cost = AllocationData(cost.allocations, cost.temporary, cost.leaked, cost.peak)
        self._reset()

    def clear_data(self) -> None:
        self._data = []
        self._max_cost = RowData()
        self._reset()

    def header_data(self, section: int, role: Role = Role.DISPLAY):
        """Header text, tooltip or initial sort order of a column; None otherwise."""
        if not 0 <= section < Column.count():
            return None
        column = Column(section)
        if role is Role.INITIAL_SORT_ORDER:
            return DESCENDING if column in _COST_ATTRS else None
        if role is Role.DISPLAY:
            return _HEADERS[column.name]
        if role is Role.TOOLTIP:
            return _TOOLTIPS[column.name]
        return None

    def data(self, row: Optional[RowData], column: int, role: Role = Role.DISPLAY):
        """The value shown for ``row`` in ``column`` under ``role``."""
        if not 0 <= column < Column.count():
            return None
        target = self._max_cost if role is Role.MAX_COST else row
        if target is None:
            return None
        col = Column(column)
        if role in (Role.DISPLAY, Role.SORT, Role.MAX_COST):
            if col in _COST_ATTRS:
                value = getattr(target.cost, _COST_ATTRS[col])
                if role is not Role.DISPLAY:
                    return abs(value)
                if col in (Column.PEAK, Column.LEAKED):
                    return format_bytes(value)
                return value
            if col is Column.FUNCTION:
                return target.symbol.symbol
            if col is Column.MODULE:
                return target.symbol.binary
            sym = target.symbol
            return f"{sym.symbol} in {sym.binary} ({sym.path})"
        if role is Role.TOOLTIP:
            return self.tooltip(target)
        if role is Role.SYMBOL:
            return target.symbol
        return None

    def tooltip(self, row: RowData) -> str:
        """HTML tooltip describing the costs and backtrace of ``row``."""
        total = self._max_cost.cost
        cost = row.cost
        parts = ["<qt><pre style='font-family:monospace;'>", _symbol_lines(row.symbol), "\n\n"]
        parts.append(
            "peak contribution: {} ({}% of total)\n".format(
                format_bytes(cost.peak), format_cost_relative(cost.peak, total.peak)
            )
        )
        parts.append(
            "leaked: {} ({}% of total)\n".format(
                format_bytes(cost.leaked), format_cost_relative(cost.leaked, total.leaked)
            )
        )
        parts.append(
            "allocations: {} ({}% of total)\n".format(
                cost.allocations, format_cost_relative(cost.allocations, total.allocations)
            )
        )
        parts.append(
            "temporary: {} ({}% of allocations, {}% of total)\n".format(
                cost.temporary,
                format_cost_relative(cost.temporary, cost.allocations),
                format_cost_relative(cost.temporary, total.temporary),
            )
        )
        if row.children:
            child = row
            remaining = 5
            if len(child.children) == 1:
                parts.append("\nbacktrace:\n")
            while len(child.children) == 1 and remaining > 0:
                remaining -= 1
                parts.append("\n")
                parts.append(_symbol_lines(child.symbol))
                child = child.children[0]
            count = len(child.children)
            if count > 1:
                parts.append("\n")
                parts.append(f"called from {count} locations")
        parts.append("</pre></qt>")
        return "".join(parts)

    def row_count(self, parent: Optional[RowData] = None) -> int:
        """Number of children of ``parent``, or of top-level rows when None."""
        if parent is None:
            return len(self._data)
        return len(parent.children)

    def column_count(self) -> int:
        return Column.count()

    def row_of(self, row: RowData) -> int:
        """Position of ``row`` among its siblings."""
        siblings = row.parent.children if row.parent is not None else self._data
        for position, sibling in enumerate(siblings):
            if sibling is row:
                return position
        raise ValueError("row is not part of this model")