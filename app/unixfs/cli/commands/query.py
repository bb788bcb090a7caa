"""Read-only commands: directory listing and size calculation."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from unixfs.cli.types import OutputFormat
from unixfs.core.errors import UnixFsError
from unixfs.tree.listing import list_dir
from unixfs.tree.size import size_of
from unixfs.utils.formatting import console, format_size, print_error, print_info


def ls(
    directory: Annotated[
        Path,
        typer.Argument(help="Directory to list."),
    ] = Path("."),
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List the immediate children of a directory."""
    try:
        children = list_dir(directory)
    except UnixFsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([str(c) for c in children]))
        return

    if not children:
        print_info(f"{directory} is empty.")
        return

    _print_listing(directory, children)


def du(
    path: Annotated[
        Path,
        typer.Argument(help="File or directory to measure."),
    ],
    raw_bytes: Annotated[
        bool,
        typer.Option("--bytes", "-b", help="Print the exact byte count."),
    ] = False,
) -> None:
    """Show the recursive size of a file or directory."""
    try:
        total = size_of(path)
    except UnixFsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    size_str = str(total) if raw_bytes else format_size(total)
    typer.echo(f"{size_str}\t{path}")


# === Private helper functions ===


def _print_listing(directory: Path, children: list[Path]) -> None:
    """Display directory children as a Rich table."""
    table = Table(title=str(directory), show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Type", width=10)
    table.add_column("Size", justify="right", width=10)

    for child in children:
        if child.is_dir():
            table.add_row(f"[directory]{child.name}/[/]", "directory", "-")
            continue
        try:
            size_str = format_size(child.stat().st_size)
        except OSError:
            size_str = "?"
        table.add_row(child.name, "file", size_str)

    console.print(table)
    console.print(f"\n[dim]{len(children)} entries[/dim]")
