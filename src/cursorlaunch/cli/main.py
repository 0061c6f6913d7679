"""cursorlaunch CLI -- Open files and projects in the Cursor editor.

Entry point for the ``cursorlaunch`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    locate     -- Print the Cursor executable path.
    open       -- Open a file, optionally at a line and column.
    solution   -- Open a solution directory or generated workspace.
    addon      -- Open a single addon project.
    workspace  -- Write a workspace manifest without launching.

Usage::

    cursorlaunch locate
    cursorlaunch open Code/Player.cs --line 42 --column 7
    cursorlaunch solution . -p game=./game -p tools=./tools
    cursorlaunch addon ./addons/hud
    cursorlaunch workspace game.code-workspace -p game=./game
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from cursorlaunch import __version__
from cursorlaunch.cli.locate_cmd import locate_command
from cursorlaunch.cli.open_cmd import addon_command, open_command, solution_command
from cursorlaunch.cli.workspace_cmd import workspace_command
from cursorlaunch.config import (
    DEFAULT_WORKSPACE_NAME,
    ENV_EXECUTABLE,
    ENV_WORKSPACE_NAME,
    LauncherConfig,
)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log discovery and launch details.")
@click.option(
    "--executable",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=ENV_EXECUTABLE,
    help="Path to the Cursor executable (skips discovery).",
)
@click.option(
    "--workspace-name",
    envvar=ENV_WORKSPACE_NAME,
    default=DEFAULT_WORKSPACE_NAME,
    show_default=True,
    help="File stem of generated workspace manifests.",
)
@click.pass_context
def cli(
    ctx: click.Context, verbose: bool, executable: Path | None, workspace_name: str,
) -> None:
    """cursorlaunch: Open files, solutions and addons in Cursor.

    Finds the Cursor executable, optionally writes a workspace manifest
    for the active projects, and starts the editor without waiting for it.
    """
    _configure_logging(verbose)
    config = LauncherConfig.from_env()
    config.executable = executable
    config.workspace_name = workspace_name
    ctx.obj = config


# Register all subcommands
cli.add_command(locate_command)
cli.add_command(open_command)
cli.add_command(solution_command)
cli.add_command(addon_command)
cli.add_command(workspace_command)
