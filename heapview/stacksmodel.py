"""List of the full backtraces below a selected tree row."""

from __future__ import annotations

from typing import Callable, Optional

from heapview.treemodel import Column, Role, RowData, TreeModel


def _find_leafs(row: RowData) -> list[RowData]:
    if not row.children:
        return [row]
    return [leaf for child in row.children for leaf in _find_leafs(child)]


class StacksModel:
    """Backtraces from the root to every leaf beneath a row, one shown at a time."""

    def __init__(self, source: TreeModel) -> None:
        self.source = source
        self.stacks: list[list[RowData]] = []
        self.stack_index = 0
        self._listeners: list[Callable[[int], None]] = []

    def add_stacks_found_listener(self, callback: Callable[[int], None]) -> None:
        """Call ``callback`` with the number of stacks whenever they change."""
        self._listeners.append(callback)

    def _emit_stacks_found(self, count: int) -> None:
        for callback in self._listeners:
            callback(count)

    def set_stack_index(self, index: int) -> None:
        """Select the stack by its one-based ``index``."""
        self.stack_index = index - 1

    def fill_from_row(self, row: RowData) -> None:
        """Collect one root-to-leaf stack for each leaf below ``row``."""
        stacks = []
        for leaf in _find_leafs(row):
            stack = []
            node: Optional[RowData] = leaf
            while node is not None:
                stack.append(node)
                node = node.parent
            stack.reverse()
            stacks.append(stack)
        self.stacks = stacks
        self.stack_index = 0
        self._emit_stacks_found(len(self.stacks))

    def clear(self) -> None:
        self.stacks = []
        self._emit_stacks_found(0)

    def _current(self) -> list[RowData]:
        if 0 <= self.stack_index < len(self.stacks):
            return self.stacks[self.stack_index]
        return []

    def row_count(self) -> int:
        return len(self._current())

    def data(self, row: int) -> Optional[str]:
        """Location text of frame ``row`` in the selected stack, or None."""
        stack = self._current()
        if not 0 <= row < len(stack):
            return None
        return self.source.data(stack[row], Column.LOCATION, Role.DISPLAY)

    def header_data(self, section: int, role: Role = Role.DISPLAY) -> Optional[str]:
        if section == 0 and role is Role.DISPLAY:
            return "Backtrace"
        return None