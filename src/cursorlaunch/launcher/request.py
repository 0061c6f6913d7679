"""Launch requests and Cursor command-line argument formatting.

Cursor follows the VS Code CLI: a plain path opens a file or folder, and
``-g <path>:<line>[:<column>]`` opens a file with the caret at a position.

Arguments are kept as an argv list; ``format_arguments`` renders them as a
single string only where a command line is needed (Windows, log output).
"""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from pathlib import PurePath
from typing import Sequence

from cursorlaunch.discovery.install_registry import current_platform

GOTO_FLAG = "-g"


def format_arguments(argv: Sequence[str], system: str | None = None) -> str:
    """Join argv into one command-line string for ``system``.

    Windows uses the MSVC runtime quoting rules; elsewhere POSIX shell
    quoting is used, so ``shlex.split`` recovers ``argv`` exactly.
    """
    if current_platform(system) == "windows":
        return subprocess.list2cmdline(list(argv))
    return shlex.join(argv)


@dataclass(frozen=True)
class LaunchRequest:
    """A target to open, optionally at a line and column.

    Attributes:
        target: File or directory to open.
        line: 1-based line number, or None.
        column: 1-based column number. Ignored when ``line`` is None.
    """

    target: PurePath | str
    line: int | None = None
    column: int | None = None

    def __post_init__(self) -> None:
        for label, value in (("line", self.line), ("column", self.column)):
            if value is not None and value < 1:
                raise ValueError(f"{label} must be a positive integer, got {value}")

    @property
    def has_position(self) -> bool:
        return self.line is not None

    def goto_token(self) -> str:
        """Return ``path``, ``path:line`` or ``path:line:column``."""
        token = str(self.target)
        if self.line is not None:
            token += f":{self.line}"
            if self.column is not None:
                token += f":{self.column}"
        return token

    def argv(self) -> list[str]:
        """Return the arguments handed to the Cursor executable."""
        if self.has_position:
            return [GOTO_FLAG, self.goto_token()]
        return [self.goto_token()]

    def arguments(self, system: str | None = None) -> str:
        """Return ``argv()`` as a single quoted argument string."""
        return format_arguments(self.argv(), system)
