"""Cursor code-editor integration.

``CursorEditor`` is the surface a host application talks to: it answers
"is the editor installed" and turns open-file, open-solution and
open-addon requests into fire-and-forget launches. Component failures
never escape; each request returns an ``OpenResult`` describing what
happened, and the failure is logged.

Usage::

    editor = CursorEditor()
    if editor.is_installed():
        result = editor.open_file("Code/Player.cs", line=42, column=7)
        if not result.ok:
            print(result.error)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePath

from cursorlaunch.config import LauncherConfig
from cursorlaunch.discovery.locator import InstallationLocator
from cursorlaunch.exceptions import CursorLaunchError
from cursorlaunch.launcher.process import ProcessLauncher
from cursorlaunch.launcher.request import LaunchRequest
from cursorlaunch.workspace.models import ProjectRef, ProjectSource
from cursorlaunch.workspace.writer import ManifestWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenResult:
    """Outcome of a single open request.

    Attributes:
        action: "file", "solution" or "addon".
        ok: True when the editor process was started.
        arguments: The argument string passed to Cursor, if one was built.
        workspace: Manifest written for this request, if any.
        error: The failure, when ``ok`` is False.
    """

    action: str
    ok: bool
    arguments: str | None = None
    workspace: Path | None = None
    error: CursorLaunchError | None = None

    @property
    def message(self) -> str:
        """Human-readable summary for logs and CLI output."""
        if self.ok:
            return f"Opened {self.action}: {self.arguments}"
        return str(self.error) if self.error else f"Could not open {self.action}"

    def to_dict(self) -> dict:
        return {
            "action": self.action,
            "ok": self.ok,
            "arguments": self.arguments,
            "workspace": str(self.workspace) if self.workspace else None,
            "error": str(self.error) if self.error else None,
        }


class CursorEditor:
    """Opens files, solutions and addons in Cursor.

    Args:
        config: Launcher configuration. Defaults to ``LauncherConfig.from_env()``.
        locator: Executable locator. Defaults to the one owned by ``config``.
        launcher: Process launcher.
        writer: Workspace manifest writer.
        project_source: Host collaborator listing active projects. Without
            one, ``open_solution`` opens the root directory directly.
    """

    def __init__(
        self,
        config: LauncherConfig | None = None,
        locator: InstallationLocator | None = None,
        launcher: ProcessLauncher | None = None,
        writer: ManifestWriter | None = None,
        project_source: ProjectSource | None = None,
    ) -> None:
        self.config = config if config is not None else LauncherConfig.from_env()
        self.locator = locator if locator is not None else self.config.locator
        self.launcher = launcher if launcher is not None else ProcessLauncher()
        self.writer = writer if writer is not None else ManifestWriter()
        self.project_source = project_source

    def is_installed(self) -> bool:
        return self.locator.is_installed()

    def _launch(
        self,
        action: str,
        request: LaunchRequest,
        workspace: Path | None = None,
        executable: Path | None = None,
    ) -> OpenResult:
        args = request.arguments()
        try:
            if executable is None:
                executable = self.locator.locate()
            self.launcher.launch(executable, request.argv())
        except CursorLaunchError as exc:
            logger.warning("Cannot open %s in Cursor: %s", action, exc)
            return OpenResult(action, ok=False, arguments=args, workspace=workspace, error=exc)
        return OpenResult(action, ok=True, arguments=args, workspace=workspace)

    def open_file(
        self, path: PurePath | str, line: int | None = None, column: int | None = None,
    ) -> OpenResult:
        """Open a file, optionally at ``line`` and ``column``."""
        return self._launch("file", LaunchRequest(path, line=line, column=column))

    def open_solution(self, root: PurePath | str | None = None) -> OpenResult:
        """Open the host's project set.

        When a project source is configured and workspace generation is
        enabled, a fresh manifest is written under ``root`` and opened.
        Otherwise ``root`` itself is opened.

        Args:
            root: Solution directory. Defaults to the current directory.
        """
        root_dir = Path(root) if root is not None else Path.cwd()
        if self.project_source is None or not self.config.write_workspace:
            return self._launch("solution", LaunchRequest(root_dir))

        # Locate before writing so a missing install leaves no manifest behind.
        target = self.config.workspace_path(root_dir)
        try:
            executable = self.locator.locate()
            self.writer.write_for(self.project_source, target)
        except CursorLaunchError as exc:
            logger.warning("Cannot open solution in Cursor: %s", exc)
            return OpenResult("solution", ok=False, error=exc)
        return self._launch(
            "solution", LaunchRequest(target), workspace=target, executable=executable,
        )

    def open_addon(self, addon: ProjectRef | None) -> OpenResult:
        """Open a single project's root directory."""
        if addon is None:
            logger.warning("Cannot open null addon")
            return OpenResult(
                "addon", ok=False, error=CursorLaunchError("No addon given"),
            )
        return self._launch("addon", LaunchRequest(addon.root_path))
