"""Workspace manifest generation for multi-project sessions."""

from __future__ import annotations

from cursorlaunch.workspace.models import (
    RECOMMENDED_EXTENSIONS,
    ProjectRef,
    ProjectSource,
    StaticProjectSource,
    WorkspaceFolder,
    WorkspaceManifest,
    default_settings,
)
from cursorlaunch.workspace.writer import (
    ManifestWriter,
    build_manifest,
    format_folder_path,
)

__all__ = [
    "ManifestWriter",
    "ProjectRef",
    "ProjectSource",
    "RECOMMENDED_EXTENSIONS",
    "StaticProjectSource",
    "WorkspaceFolder",
    "WorkspaceManifest",
    "build_manifest",
    "default_settings",
    "format_folder_path",
]
