"""Fire-and-forget process launcher.

Starts the editor without a console window and without keeping any handle
on it: stdio goes to ``DEVNULL``, the child gets its own session (POSIX) or
process group with ``CREATE_NO_WINDOW`` (Windows), and the caller never
waits for it.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import PurePath
from typing import Sequence

from cursorlaunch.discovery.install_registry import current_platform
from cursorlaunch.exceptions import LaunchError

logger = logging.getLogger(__name__)

# Win32 process creation flags (absent from ``subprocess`` on POSIX).
_CREATE_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0x08000000)
_CREATE_NEW_PROCESS_GROUP = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0x00000200)


class ProcessLauncher:
    """Starts an executable with a list of arguments or an argument string.

    Args:
        system: Platform name controlling command-line handling. Defaults
            to the running platform.
    """

    def __init__(self, system: str | None = None) -> None:
        self._platform = current_platform(system)

    def build_command(
        self, executable: PurePath | str, args: Sequence[str] | str,
    ) -> list[str] | str:
        """Combine executable and arguments into a ``Popen`` command.

        An argv list is used verbatim on POSIX and quoted with the MSVC
        runtime rules on Windows. A pre-built argument string is taken as
        a command-line tail on Windows and split with POSIX shell rules
        elsewhere.
        """
        if self._platform == "windows":
            command = subprocess.list2cmdline([str(executable)])
            tail = args if isinstance(args, str) else subprocess.list2cmdline(list(args))
            return f"{command} {tail}" if tail else command
        if isinstance(args, str):
            return [str(executable), *shlex.split(args)]
        return [str(executable), *args]

    def _popen_kwargs(self) -> dict:
        kwargs: dict = {
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.DEVNULL,
            "stderr": subprocess.DEVNULL,
            "close_fds": True,
        }
        if self._platform == "windows":
            kwargs["creationflags"] = _CREATE_NO_WINDOW | _CREATE_NEW_PROCESS_GROUP
        else:
            kwargs["start_new_session"] = True
        return kwargs

    def launch(self, executable: PurePath | str, args: Sequence[str] | str) -> None:
        """Start ``executable`` with ``args`` and return immediately.

        Raises:
            LaunchError: The operating system could not start the process.
        """
        try:
            command = self.build_command(executable, args)
            process = subprocess.Popen(command, **self._popen_kwargs())
        except (OSError, ValueError) as exc:
            logger.error("Failed to launch Cursor: %s", exc)
            raise LaunchError(f"Failed to launch {executable}: {exc}") from exc
        logger.info("Launched %s %s (pid %s)", executable, args, process.pid)
