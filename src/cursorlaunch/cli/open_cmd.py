"""``cursorlaunch open|solution|addon`` -- Open targets in Cursor.

Exit Codes:
    0 -- The editor process was started.
    1 -- Cursor is not installed, the manifest could not be written, or
         the process could not be started.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from cursorlaunch.cli.options import format_option, project_option
from cursorlaunch.config import LauncherConfig
from cursorlaunch.editor import CursorEditor, OpenResult
from cursorlaunch.workspace.models import ProjectRef, StaticProjectSource


def _report(result: OpenResult, output_format: str) -> None:
    """Print ``result`` and exit with its status code."""
    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        from cursorlaunch.cli.output import print_open_result
        print_open_result(result)
    sys.exit(0 if result.ok else 1)


@click.command("open")
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--line", "-l", type=click.IntRange(min=1), help="Line to jump to.")
@click.option(
    "--column", "-c", type=click.IntRange(min=1),
    help="Column to jump to (needs --line).",
)
@format_option
@click.pass_obj
def open_command(
    config: LauncherConfig, file: str, line: int | None, column: int | None,
    output_format: str,
) -> None:
    """Open FILE in Cursor, optionally at a line and column."""
    editor = CursorEditor(config=config)
    _report(editor.open_file(Path(file).resolve(), line=line, column=column), output_format)


@click.command("solution")
@click.argument("root", required=False, type=click.Path(file_okay=False))
@project_option
@click.option(
    "--no-workspace", is_flag=True,
    help="Open ROOT directly instead of generating a workspace manifest.",
)
@format_option
@click.pass_obj
def solution_command(
    config: LauncherConfig, root: str | None, projects: tuple[ProjectRef, ...],
    no_workspace: bool, output_format: str,
) -> None:
    """Open the solution at ROOT (default: current directory).

    With one or more --project options, a workspace manifest listing them
    is written under ROOT and opened instead of the bare directory.
    """
    if no_workspace:
        config.write_workspace = False
    source = StaticProjectSource(list(projects)) if projects else None
    editor = CursorEditor(config=config, project_source=source)
    root_dir = Path(root).resolve() if root else None
    _report(editor.open_solution(root_dir), output_format)


@click.command("addon")
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.option("--name", help="Addon name (default: directory name).")
@format_option
@click.pass_obj
def addon_command(
    config: LauncherConfig, path: str, name: str | None, output_format: str,
) -> None:
    """Open the addon project at PATH."""
    root = Path(path).resolve()
    addon = ProjectRef(name=name or root.name, root_path=root)
    editor = CursorEditor(config=config)
    _report(editor.open_addon(addon), output_format)
