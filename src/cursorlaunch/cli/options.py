"""Shared click options and parameter types."""

from __future__ import annotations

from pathlib import Path

import click

from cursorlaunch.workspace.models import ProjectRef


class ProjectParamType(click.ParamType):
    """Parses ``NAME=PATH`` (or a bare ``PATH``) into a ``ProjectRef``."""

    name = "project"

    def convert(self, value, param, ctx):
        if isinstance(value, ProjectRef):
            return value
        name, sep, path = value.partition("=")
        if not sep:
            path, name = name, ""
        if not path:
            self.fail(f"{value!r} has no path; expected NAME=PATH", param, ctx)
        root = Path(path).expanduser().resolve()
        return ProjectRef(name=name or root.name, root_path=root)


PROJECT = ProjectParamType()

format_option = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)

project_option = click.option(
    "--project", "-p", "projects",
    type=PROJECT,
    multiple=True,
    help="Active project as NAME=PATH. Repeat for several projects.",
)
