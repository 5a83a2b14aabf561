"""Text filter on function and module columns of a cost tree."""

from __future__ import annotations

from typing import Any, Optional

from heapview.treemodel import RowData


def _contains(haystack: Any, needle: str) -> bool:
    text = "" if haystack is None else str(haystack)
    return needle.casefold() in text.casefold()


class TreeProxy:
    """Keeps rows whose function and module match the filters, or with a matching descendant."""

    def __init__(self, function_column: int, module_column: int, source: Optional[Any] = None) -> None:
        self.function_column = function_column
        self.module_column = module_column
        self.source = source
        self.function_filter = ""
        self.module_filter = ""

    def set_function_filter(self, text: str) -> None:
        self.function_filter = text

    def set_module_filter(self, text: str) -> None:
        self.module_filter = text

    def accept_row(self, row: RowData) -> bool:
        """Whether ``row`` itself matches both filters, case-insensitively."""
        if self.source is None:
            return False
        if self.function_filter and not _contains(
            self.source.data(row, self.function_column), self.function_filter
        ):
            return False
        if self.module_filter and not _contains(
            self.source.data(row, self.module_column), self.module_filter
        ):
            return False
        return True

    def accepts(self, row: RowData) -> bool:
        """Whether ``row`` or any of its descendants matches."""
        return self.accept_row(row) or any(self.accepts(child) for child in row.children)

    def filtered_rows(self, rows: list[RowData]) -> list[RowData]:
        """The entries of ``rows`` that are shown."""
        return [row for row in rows if self.accepts(row)]