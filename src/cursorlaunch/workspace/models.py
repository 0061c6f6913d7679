"""Workspace manifest data models.

Defines the fixed-schema records behind a ``.code-workspace`` file and the
host-side project reference they are built from. These are pure data
holders (dataclasses) so the manifest shape cannot drift silently.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any, Protocol

# ---------------------------------------------------------------------------
# Static metadata written into every manifest
# ---------------------------------------------------------------------------

RECOMMENDED_EXTENSIONS: tuple[str, ...] = (
    "ms-dotnettools.csharp",
    "ms-dotnettools.csdevkit",
    "editorconfig.editorconfig",
)


def default_settings() -> dict[str, Any]:
    """Return a fresh copy of the fixed workspace settings block."""
    return {
        "files.exclude": {
            "**/.vs": True,
            "**/bin": True,
            "**/obj": True,
        },
        "search.exclude": {
            "**/.sbox": True,
        },
        "dotnet.automaticallyBuildProjects": False,
        "omnisharp.enableRoslynAnalyzers": True,
    }


# ---------------------------------------------------------------------------
# Host collaborator
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProjectRef:
    """A project currently active in the host application.

    Attributes:
        name: Stable project identifier, shown as the folder name.
        root_path: Root directory of the project.
    """

    name: str
    root_path: PurePath


class ProjectSource(Protocol):
    """Anything that can report the host's active projects."""

    def active_projects(self) -> list[ProjectRef]:
        ...


class StaticProjectSource:
    """A ``ProjectSource`` backed by a fixed list of projects."""

    def __init__(self, projects: list[ProjectRef] | None = None) -> None:
        self._projects = list(projects or [])

    def active_projects(self) -> list[ProjectRef]:
        return list(self._projects)


# ---------------------------------------------------------------------------
# Manifest records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WorkspaceFolder:
    """One ``folders`` entry: a display name and an already-formatted path."""

    name: str
    path: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "path": self.path}


@dataclass
class WorkspaceManifest:
    """A complete workspace descriptor.

    Attributes:
        folders: Project folders in host order.
        recommendations: Extension identifiers recommended to the user.
        settings: Workspace-level editor settings.
    """

    folders: list[WorkspaceFolder] = field(default_factory=list)
    recommendations: list[str] = field(
        default_factory=lambda: list(RECOMMENDED_EXTENSIONS)
    )
    settings: dict[str, Any] = field(default_factory=default_settings)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dict with fixed top-level field order."""
        return {
            "folders": [f.to_dict() for f in self.folders],
            "extensions": {"recommendations": list(self.recommendations)},
            "settings": self.settings,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize to indented JSON terminated by a newline.

        Field order is fixed by ``to_dict``, so identical manifests always
        produce byte-identical text.
        """
        return json.dumps(self.to_dict(), indent=indent) + "\n"
