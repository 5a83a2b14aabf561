"""Opening a source location in an editor or IDE."""

from __future__ import annotations

import shlex
import shutil
import subprocess
import webbrowser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

CUSTOM_IDE = -1


@dataclass(frozen=True)
class IdeSettings:
    """An editor: executable name, argument template and display name."""

    app: str
    args: str
    name: str


IDE_SETTINGS: tuple[IdeSettings, ...] = (
    IdeSettings("kdevelop", "%f:%l:%c", "KDevelop"),
    IdeSettings("kate", "%f --line %l --column %c", "Kate"),
    IdeSettings("kwrite", "%f --line %l --column %c", "KWrite"),
    IdeSettings("gedit", "%f +%l:%c", "gedit"),
    IdeSettings("gvim", "%f +%l", "gvim"),
    IdeSettings("qtcreator", "-client %f:%l", "Qt Creator"),
)


def is_app_available(app: str) -> bool:
    """Whether an executable named ``app`` is found on the search path."""
    return shutil.which(app) is not None


def first_available_ide() -> int:
    """Index of the first installed editor in ``IDE_SETTINGS``, or -1."""
    return next(
        (index for index, ide in enumerate(IDE_SETTINGS) if is_app_available(ide.app)),
        CUSTOM_IDE,
    )


def build_navigation_command(
    ide_index: int,
    file_path: str,
    line: int,
    column: int = -1,
    custom_command: str = "",
) -> str:
    """The command line that opens ``file_path`` at ``line`` and ``column``.

    ``ide_index`` selects an entry of ``IDE_SETTINGS``; -1 selects
    ``custom_command``. Returns an empty string when no command applies.
    """
    if 0 <= ide_index < len(IDE_SETTINGS):
        ide = IDE_SETTINGS[ide_index]
        command = f"{ide.app} {ide.args}"
    elif ide_index == CUSTOM_IDE:
        command = custom_command
    else:
        command = ""

    if not command:
        return ""
    return (
        command.replace("%f", file_path)
        .replace("%l", str(max(1, line)))
        .replace("%c", str(max(1, column)))
    )


def navigate_to_code(
    file_path: str,
    line: int,
    column: int = -1,
    ide_index: Optional[int] = None,
    custom_command: str = "",
) -> Optional[list[str]]:
    """Open ``file_path`` in the configured editor, or the desktop default.

    When ``ide_index`` is None the first installed editor is used. Returns
    the argument list of the started editor, or None when the file was
    handed to the desktop instead.
    """
    if ide_index is None:
        ide_index = first_available_ide()
    command = build_navigation_command(ide_index, file_path, line, column, custom_command)
    if command:
        argv = shlex.split(command)
        subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        return argv
    webbrowser.open(Path(file_path).absolute().as_uri())
    return None