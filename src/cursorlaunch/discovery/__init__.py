"""Discovery of the Cursor executable on the local filesystem.

Public API::

    from cursorlaunch.discovery import InstallationLocator

    locator = InstallationLocator()
    exe = locator.find()
"""

from __future__ import annotations

from cursorlaunch.discovery.install_registry import (
    InstallCandidate,
    candidate_paths,
    current_platform,
    install_candidates,
)
from cursorlaunch.discovery.locator import InstallationLocator

__all__ = [
    "InstallCandidate",
    "InstallationLocator",
    "candidate_paths",
    "current_platform",
    "install_candidates",
]
