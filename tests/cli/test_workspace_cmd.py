"""Tests for ``cursorlaunch workspace``."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from cursorlaunch.cli.main import cli


class TestWorkspace:

    def test_writes_manifest(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "w.code-workspace"
        result = runner.invoke(cli, ["workspace", str(output), "-p", f"core={tmp_path}"])
        assert result.exit_code == 0
        data = json.loads(output.read_text())
        assert data["folders"] == [{"name": "core", "path": str(tmp_path.resolve())}]

    def test_json_output(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "w.code-workspace"
        result = runner.invoke(cli, ["workspace", str(output), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["path"] == str(output)
        assert data["folders"] == []

    def test_rerun_is_byte_identical(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "w.code-workspace"
        args = ["workspace", str(output), "-p", f"a={tmp_path}", "-p", f"b={tmp_path}"]
        runner.invoke(cli, args)
        first = output.read_bytes()
        runner.invoke(cli, args)
        assert output.read_bytes() == first

    def test_unwritable_target(self, runner: CliRunner, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        output = blocker / "w.code-workspace"
        result = runner.invoke(cli, ["workspace", str(output), "--format", "json"])
        assert result.exit_code == 1
        assert "error" in json.loads(result.stdout)

    def test_json_output_matches_written_file(
        self, runner: CliRunner, tmp_path: Path,
    ) -> None:
        output = tmp_path / "w.code-workspace"
        result = runner.invoke(
            cli, ["workspace", str(output), "-p", f"core={tmp_path}", "--format", "json"],
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["folders"] == json.loads(output.read_text())["folders"]
