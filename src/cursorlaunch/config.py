"""Process-wide launcher configuration.

``LauncherConfig`` gathers the few knobs the launcher exposes and owns the
single ``InstallationLocator`` for the process. The locator is created on
first access and handed to collaborators by reference, so the executable
lookup happens at most once per configuration object.

Environment Variables:
    CURSORLAUNCH_EXECUTABLE -- explicit path to the Cursor executable.
    CURSORLAUNCH_WORKSPACE_NAME -- stem of the generated workspace file.
    CURSORLAUNCH_WRITE_WORKSPACE -- set to 0/false/no/off to open the
        solution directory instead of generating a workspace manifest.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from cursorlaunch.discovery.locator import InstallationLocator

ENV_EXECUTABLE = "CURSORLAUNCH_EXECUTABLE"
ENV_WORKSPACE_NAME = "CURSORLAUNCH_WORKSPACE_NAME"
ENV_WRITE_WORKSPACE = "CURSORLAUNCH_WRITE_WORKSPACE"

DEFAULT_WORKSPACE_NAME = "cursorlaunch"
WORKSPACE_SUFFIX = ".code-workspace"

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass
class LauncherConfig:
    """Configuration shared by the editor facade and the CLI.

    Attributes:
        executable: Explicit executable path. When set, it replaces the
            platform candidate list during lookup.
        workspace_name: File stem of the generated workspace manifest.
        write_workspace: Whether ``open_solution`` generates a manifest.
    """

    executable: Path | None = None
    workspace_name: str = DEFAULT_WORKSPACE_NAME
    write_workspace: bool = True
    _locator: InstallationLocator | None = field(
        default=None, init=False, repr=False, compare=False,
    )
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False,
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LauncherConfig:
        """Build a configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            A new ``LauncherConfig``; unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        executable = env.get(ENV_EXECUTABLE) or None
        write_flag = env.get(ENV_WRITE_WORKSPACE, "").strip().lower()
        return cls(
            executable=Path(executable).expanduser() if executable else None,
            workspace_name=env.get(ENV_WORKSPACE_NAME) or DEFAULT_WORKSPACE_NAME,
            write_workspace=write_flag not in _FALSE_VALUES,
        )

    @property
    def locator(self) -> InstallationLocator:
        """Return the locator owned by this configuration, creating it once."""
        if self._locator is None:
            with self._lock:
                if self._locator is None:
                    self._locator = InstallationLocator(override=self.executable)
        return self._locator

    def workspace_path(self, root: Path) -> Path:
        """Return where the workspace manifest for ``root`` is written."""
        return root / f"{self.workspace_name}{WORKSPACE_SUFFIX}"
