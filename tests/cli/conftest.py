"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def popen():
    """Patch process creation so CLI tests never spawn the editor."""
    with patch("cursorlaunch.launcher.process.subprocess.Popen") as mock_popen:
        mock_popen.return_value.pid = 4242
        yield mock_popen


@pytest.fixture
def exe_args(fake_executable: Path) -> list[str]:
    """Global options pointing the CLI at the fake executable."""
    return ["--executable", str(fake_executable)]
