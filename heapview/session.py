"""Helpers for opening profile files and presenting what is loaded."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable

_WORD_RUN = re.compile(r"(\w{50})")
_ZERO_WIDTH_SPACE = "\u200b"
_APP_TITLE = "Heaptrack"


class InputError(ValueError):
    """An input file that cannot be opened for reading."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


def insert_word_wrap_markers(text: str) -> str:
    """Put a zero-width space after every run of 50 word characters.

    This lets long identifiers wrap in the middle of a word.
    """
    return _WORD_RUN.sub(lambda match: match.group(1) + _ZERO_WIDTH_SPACE, text)


def validate_input_file(path: str, allow_empty: bool = False) -> bool:
    """Check that ``path`` names a readable regular file.

    An empty path is accepted only when ``allow_empty`` is set; otherwise
    False is returned. Raises InputError when the path is missing, is not
    a file, or cannot be read.
    """
    if not path:
        return allow_empty
    file = Path(path)
    if not file.exists():
        raise InputError(f"Input data {path} does not exist.", path)
    if not file.is_file():
        raise InputError(f"Input data {path} is not a file.", path)
    if not os.access(file, os.R_OK):
        raise InputError(f"Input data {path} is not readable.", path)
    return True


def window_title(file: str = "", diff_base: str = "") -> str:
    """The window title for ``file``, optionally compared to ``diff_base``."""
    if not file:
        return _APP_TITLE
    name = Path(file).name
    if not diff_base:
        return f"{_APP_TITLE} - {name}"
    return f"{_APP_TITLE} - {name} compared to {Path(diff_base).name}"


def selection_to_text(rows: Iterable[Iterable[object]]) -> str:
    """Selected table cells as text: tab-separated cells, one line per row."""
    return "".join("\t".join(str(cell) for cell in row) + "\n" for row in rows)