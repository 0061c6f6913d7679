"""Static registry of conventional Cursor install locations.

Each platform has a short, ordered list of places the Cursor installer
(or a package manager) puts the editor executable. ``InstallationLocator``
walks the list in order and takes the first regular file it finds.

Platform Notes:
    Windows installs per-user under ``%LOCALAPPDATA%\\Programs\\cursor``
    and machine-wide under ``%ProgramFiles%``. Candidates whose base
    environment variable is unset are skipped.
    macOS ships an app bundle; the executable lives in ``Contents/MacOS``.
    Linux installs vary: a launcher script in ``~/.local/bin``, a distro
    package in ``/usr/bin``, or an extracted AppImage under ``/opt``.
"""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass
from pathlib import Path, PurePath, PureWindowsPath
from typing import Mapping


@dataclass(frozen=True)
class InstallCandidate:
    """One conventional install location.

    Attributes:
        label: Short description used in log messages (e.g., "per-user").
        path: Absolute path to the executable.
    """

    label: str
    path: PurePath


def current_platform(system: str | None = None) -> str:
    """Return the platform identifier: "windows", "macos" or "linux"."""
    name = (system if system is not None else platform.system()).lower()
    if name == "darwin" or name == "macos":
        return "macos"
    return "windows" if name == "windows" else "linux"


def _windows_candidates(env: Mapping[str, str]) -> list[InstallCandidate]:
    bases = [
        ("per-user", "LOCALAPPDATA", ("Programs", "cursor", "Cursor.exe")),
        ("program files", "ProgramFiles", ("Cursor", "Cursor.exe")),
        ("program files (x86)", "ProgramFiles(x86)", ("Cursor", "Cursor.exe")),
    ]
    candidates: list[InstallCandidate] = []
    for label, var, parts in bases:
        base = env.get(var)
        if not base:
            continue
        candidates.append(InstallCandidate(label, PureWindowsPath(base).joinpath(*parts)))
    return candidates


def _macos_candidates(home: Path) -> list[InstallCandidate]:
    bundle = Path("Cursor.app", "Contents", "MacOS", "Cursor")
    return [
        InstallCandidate("applications", Path("/Applications") / bundle),
        InstallCandidate("user applications", home / "Applications" / bundle),
    ]


def _linux_candidates(home: Path) -> list[InstallCandidate]:
    return [
        InstallCandidate("user bin", home / ".local" / "bin" / "cursor"),
        InstallCandidate("system package", Path("/usr/bin/cursor")),
        InstallCandidate("local bin", Path("/usr/local/bin/cursor")),
        InstallCandidate("opt", Path("/opt/Cursor/cursor")),
        InstallCandidate("opt (lowercase)", Path("/opt/cursor/cursor")),
        InstallCandidate("appimage", home / "Applications" / "cursor.AppImage"),
    ]


def install_candidates(
    system: str | None = None,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> list[InstallCandidate]:
    """Build the ordered candidate list for a platform.

    Args:
        system: Platform name as returned by ``platform.system()``.
            Defaults to the running platform.
        env: Environment mapping used for Windows base folders.
        home: Home directory used for per-user locations.

    Returns:
        Candidates in scan order, most specific install first.
    """
    plat = current_platform(system)
    if plat == "windows":
        return _windows_candidates(os.environ if env is None else env)
    home_dir = home if home is not None else Path.home()
    if plat == "macos":
        return _macos_candidates(home_dir)
    return _linux_candidates(home_dir)


def candidate_paths(
    system: str | None = None,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> list[PurePath]:
    """Return just the paths of ``install_candidates``, in scan order."""
    return [c.path for c in install_candidates(system=system, env=env, home=home)]
