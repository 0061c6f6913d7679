"""``cursorlaunch workspace <output>`` -- Write a workspace manifest.

Generates the ``.code-workspace`` file without launching the editor.
The file is regenerated in full on every run.

Exit Codes:
    0 -- Manifest written.
    1 -- Manifest could not be written.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from cursorlaunch.cli.options import format_option, project_option
from cursorlaunch.exceptions import ManifestWriteError
from cursorlaunch.workspace.models import ProjectRef
from cursorlaunch.workspace.writer import ManifestWriter


@click.command("workspace")
@click.argument("output", type=click.Path(dir_okay=False))
@project_option
@format_option
def workspace_command(
    output: str, projects: tuple[ProjectRef, ...], output_format: str,
) -> None:
    """Write a workspace manifest for the given projects to OUTPUT."""
    target = Path(output)
    writer = ManifestWriter()
    try:
        manifest = writer.write_manifest(projects, target)
    except ManifestWriteError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps({"path": str(target), **manifest.to_dict()}, indent=2))
    else:
        from cursorlaunch.cli.output import print_manifest_summary
        print_manifest_summary(manifest, target)
