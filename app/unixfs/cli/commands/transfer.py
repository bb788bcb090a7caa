"""Commands that write into a destination directory: cp, mv, extract.

Each takes one or more sources followed by the destination, like the
Unix tools they are named after.
"""

from pathlib import Path
from typing import Annotated

import typer

from unixfs.cli.types import PolicyOption, resolve_policy, run_batch_command
from unixfs.tree.copier import cp as copy_paths
from unixfs.tree.extractor import extract as extract_paths
from unixfs.tree.mover import mv as move_paths
from unixfs.utils.formatting import print_error

SourcesAndDestination = Annotated[
    list[Path],
    typer.Argument(help="One or more sources followed by the destination directory."),
]


def cp(ctx: typer.Context, paths: SourcesAndDestination, policy: PolicyOption = None) -> None:
    """Copy files and directory trees into a directory."""
    sources, destination = _split_destination(paths)
    effective = resolve_policy(policy)
    run_batch_command(
        ctx,
        f"Copied into {destination}",
        lambda: copy_paths(sources, destination, policy=effective),
        show_bytes=True,
    )


def mv(
    ctx: typer.Context,
    paths: SourcesAndDestination,
    policy: PolicyOption = None,
    fast_rename: Annotated[
        bool | None,
        typer.Option(
            "--fast-rename/--no-fast-rename",
            help="Rename instead of copying when on the same volume. Defaults to the config.",
        ),
    ] = None,
) -> None:
    """Move files and directory trees into a directory."""
    sources, destination = _split_destination(paths)
    effective = resolve_policy(policy)
    run_batch_command(
        ctx,
        f"Moved into {destination}",
        lambda: move_paths(sources, destination, policy=effective, fast_rename=fast_rename),
        show_bytes=True,
    )


def extract(ctx: typer.Context, paths: SourcesAndDestination, policy: PolicyOption = None) -> None:
    """Copy every file below the source directories flat into a directory."""
    sources, destination = _split_destination(paths)
    effective = resolve_policy(policy)
    run_batch_command(
        ctx,
        f"Extracted into {destination}",
        lambda: extract_paths(sources, destination, policy=effective),
        show_bytes=True,
    )


# === Private helper functions ===


def _split_destination(paths: list[Path]) -> tuple[list[Path], Path]:
    """Split the trailing destination off the positional paths."""
    if len(paths) < 2:
        print_error("Expected at least one source and a destination directory.")
        raise typer.Exit(code=2)
    return paths[:-1], paths[-1]
