"""Turning a bottom-up cost tree into a top-down one."""

from __future__ import annotations

from typing import Optional

from heapview.allocationdata import AllocationData
from heapview.treemodel import RowData


def set_parents(rows: list[RowData], parent: Optional[RowData]) -> None:
    """Point every row in ``rows``, recursively, at its parent row."""
    for row in rows:
        row.parent = parent
        set_parents(row.children, row)


def find_by_symbol(row: RowData, rows: list[RowData]) -> Optional[RowData]:
    """The first entry of ``rows`` with the same symbol as ``row``, or None."""
    return next((candidate for candidate in rows if candidate.symbol == row.symbol), None)


def build_top_down(bottom_up_data: list[RowData], top_down_data: list[RowData]) -> AllocationData:
    """Add the leaf costs of ``bottom_up_data`` into ``top_down_data``.

    The bottom-up rows must have their parents set. Returns the summed cost
    of ``bottom_up_data``.
    """
    total_cost = AllocationData()
    for row in bottom_up_data:
        child_cost = build_top_down(row.children, top_down_data)
        if child_cost != row.cost:
            # this row is (partially) a leaf
            cost = row.cost - child_cost
            node: Optional[RowData] = row
            stack = top_down_data
            while node is not None:
                entry = find_by_symbol(node, stack)
                if entry is None:
                    entry = RowData(AllocationData(), node.symbol, None, [])
                    stack.append(entry)
                # propagate the leaf cost so no node is counted twice
                entry.cost += cost
                stack = entry.children
                node = node.parent
        total_cost += row.cost
    return total_cost


def to_top_down_data(bottom_up_data: list[RowData]) -> list[RowData]:
    """A new top-down tree built from ``bottom_up_data``, with parents set."""
    top_rows: list[RowData] = []
    build_top_down(bottom_up_data, top_rows)
    set_parents(top_rows, None)
    return top_rows