"""``cursorlaunch locate`` -- Report where the Cursor executable is.

Exit Codes:
    0 -- Cursor was found.
    1 -- No candidate path holds the executable.
"""

from __future__ import annotations

import json
import sys

import click

from cursorlaunch.cli.options import format_option
from cursorlaunch.config import LauncherConfig


@click.command("locate")
@format_option
@click.pass_obj
def locate_command(config: LauncherConfig, output_format: str) -> None:
    """Print the path of the installed Cursor executable."""
    locator = config.locator
    found = locator.find()
    if output_format == "json":
        click.echo(json.dumps({
            "installed": found is not None,
            "path": str(found) if found else None,
            "candidates": [str(c) for c in locator.candidates],
        }, indent=2))
    else:
        from cursorlaunch.cli.output import print_location
        print_location(found, locator.candidates)
    sys.exit(0 if found is not None else 1)
