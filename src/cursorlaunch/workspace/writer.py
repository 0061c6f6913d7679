"""Workspace manifest writer.

Turns the host's active projects into a ``.code-workspace`` file. Every
write is a full regeneration: the target is overwritten unconditionally
and never merged with what was there before.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath, PureWindowsPath
from typing import Iterable

from cursorlaunch.discovery.install_registry import current_platform
from cursorlaunch.exceptions import ManifestWriteError
from cursorlaunch.workspace.models import (
    ProjectRef,
    ProjectSource,
    WorkspaceFolder,
    WorkspaceManifest,
)

logger = logging.getLogger(__name__)


def format_folder_path(path: PurePath | str, system: str | None = None) -> str:
    """Render a project root the way the workspace file expects it.

    Windows paths are written with forward slashes so the manifest stays
    readable and needs no backslash escaping; POSIX paths are unchanged.

    Args:
        path: Project root directory.
        system: Platform name. Defaults to the running platform.
    """
    if current_platform(system) == "windows":
        return PureWindowsPath(path).as_posix()
    return str(path)


def build_manifest(
    projects: Iterable[ProjectRef], system: str | None = None,
) -> WorkspaceManifest:
    """Map projects to manifest folders, keeping the input order."""
    folders = [
        WorkspaceFolder(name=p.name, path=format_folder_path(p.root_path, system))
        for p in projects
    ]
    return WorkspaceManifest(folders=folders)


class ManifestWriter:
    """Writes workspace manifests to disk.

    Args:
        system: Platform name used for path formatting. Defaults to the
            running platform.
    """

    def __init__(self, system: str | None = None) -> None:
        self._system = system

    def write_manifest(
        self, projects: Iterable[ProjectRef], target_path: Path,
    ) -> WorkspaceManifest:
        """Write a manifest for ``projects`` to ``target_path``.

        Creates parent directories if they do not exist and replaces any
        existing file.

        Returns:
            The manifest that was written.

        Raises:
            ManifestWriteError: The file could not be written.
        """
        manifest = build_manifest(projects, system=self._system)
        target = Path(target_path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(manifest.to_json(), encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write workspace manifest %s: %s", target, exc)
            raise ManifestWriteError(
                f"Cannot write workspace manifest {target}: {exc}"
            ) from exc
        logger.info(
            "Wrote workspace manifest %s (%d folders)", target, len(manifest.folders),
        )
        return manifest

    def write_for(self, source: ProjectSource, target_path: Path) -> WorkspaceManifest:
        """Query ``source`` for active projects and write their manifest."""
        return self.write_manifest(source.active_projects(), target_path)
