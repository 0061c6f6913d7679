"""Cursor command-line construction and process launching."""

from __future__ import annotations

from cursorlaunch.launcher.process import ProcessLauncher
from cursorlaunch.launcher.request import GOTO_FLAG, LaunchRequest, format_arguments

__all__ = [
    "GOTO_FLAG",
    "LaunchRequest",
    "ProcessLauncher",
    "format_arguments",
]
