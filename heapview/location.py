"""Symbols and source locations of allocation sites."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Symbol:
    """A function in a binary; ordered by symbol, binary, then path."""

    symbol: str = ""
    binary: str = ""
    path: str = ""

    def is_valid(self) -> bool:
        """True if any of the three fields is set."""
        return bool(self.symbol or self.binary or self.path)


@dataclass(frozen=True, order=True)
class FileLine:
    """A source file and line number."""

    file: str = ""
    line: int = 0

    def __str__(self) -> str:
        return f"{self.file}:{self.line}" if self.file else "??"


def unresolved_function_name() -> str:
    """The label used for frames without a function name."""
    return "<unresolved function>"