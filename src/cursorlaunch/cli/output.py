"""Rich output formatting helpers for the cursorlaunch CLI.

Paths are printed with ``soft_wrap`` so long locations stay on one line
and can be copied from the terminal.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cursorlaunch.editor import OpenResult
from cursorlaunch.workspace.models import WorkspaceManifest

console = Console()


def print_open_result(result: OpenResult) -> None:
    """Print the outcome of an open request as a one-line verdict."""
    if result.ok:
        verdict = Text("OPENED", style="bold green")
    else:
        verdict = Text("FAILED", style="bold red")
    line = Text.assemble(
        (f"{result.action}: ", "bold"), verdict, ("  ", ""),
        (result.arguments or "", "dim"),
    )
    console.print(line, soft_wrap=True)
    if result.workspace is not None:
        console.print(Text.assemble(("  Workspace: ", "bold"), str(result.workspace)), soft_wrap=True)
    if result.error is not None:
        console.print(Text(f"  {result.error}", style="red"), soft_wrap=True)


def print_location(path: Any, candidates: list[Any]) -> None:
    """Print the located executable, or the paths that were checked."""
    if path is not None:
        console.print(Text.assemble(("Cursor executable: ", "bold"), str(path)), soft_wrap=True)
        return
    console.print(Text("Cursor editor not found. Checked:", style="red"))
    for candidate in candidates:
        console.print(Text(f"  - {candidate}", style="dim"), soft_wrap=True)


def print_manifest_summary(manifest: WorkspaceManifest, target: Any) -> None:
    """Print the folders of a written manifest."""
    table = Table(title=f"Workspace {target}", show_header=True, header_style="bold")
    table.add_column("Name", style="bold")
    table.add_column("Path", overflow="fold")
    for folder in manifest.folders:
        table.add_row(folder.name, folder.path)
    console.print(table)
    if not manifest.folders:
        console.print("[dim]No projects; manifest has no folders.[/dim]")
