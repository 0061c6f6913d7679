"""Shared fixtures for cursorlaunch tests."""

from __future__ import annotations

import pathlib
from unittest.mock import MagicMock

import pytest

from cursorlaunch.config import LauncherConfig
from cursorlaunch.discovery.locator import InstallationLocator
from cursorlaunch.launcher.process import ProcessLauncher


@pytest.fixture
def fake_executable(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a file standing in for an installed Cursor executable."""
    exe = tmp_path / "install" / "Cursor.exe"
    exe.parent.mkdir(parents=True)
    exe.write_text("")
    return exe


@pytest.fixture
def locator(fake_executable: pathlib.Path) -> InstallationLocator:
    """A locator whose only candidate is the fake executable."""
    return InstallationLocator(candidates=[fake_executable])


@pytest.fixture
def missing_locator(tmp_path: pathlib.Path) -> InstallationLocator:
    """A locator whose candidates do not exist."""
    return InstallationLocator(candidates=[tmp_path / "nowhere" / "Cursor.exe"])


@pytest.fixture
def mock_launcher() -> MagicMock:
    """A ProcessLauncher double that records launches without spawning."""
    return MagicMock(spec=ProcessLauncher)


@pytest.fixture
def config(fake_executable: pathlib.Path) -> LauncherConfig:
    """A configuration pinned to the fake executable."""
    return LauncherConfig(executable=fake_executable)
