"""Commands that create or delete entries in place: rm, touch, mkdir, clean."""

from pathlib import Path
from typing import Annotated

import typer

from unixfs.cli.types import PolicyOption, resolve_policy, run_batch_command
from unixfs.tree.cleaner import clean as clean_paths
from unixfs.tree.creator import mkdir as make_directories
from unixfs.tree.creator import touch as touch_files
from unixfs.tree.remover import rm as remove_paths
from unixfs.utils.formatting import print_info

PathsArgument = Annotated[list[Path], typer.Argument(help="Paths to operate on.")]


def rm(ctx: typer.Context, paths: PathsArgument, policy: PolicyOption = None) -> None:
    """Remove files and directory trees."""
    effective = resolve_policy(policy)
    run_batch_command(ctx, "Removed", lambda: remove_paths(paths, policy=effective))


def touch(ctx: typer.Context, paths: PathsArgument, policy: PolicyOption = None) -> None:
    """Create empty files, truncating existing ones."""
    effective = resolve_policy(policy, create=True)
    run_batch_command(ctx, "Touched", lambda: touch_files(paths, policy=effective))


def mkdir(ctx: typer.Context, paths: PathsArgument, policy: PolicyOption = None) -> None:
    """Create directories together with any missing parents."""
    effective = resolve_policy(policy, create=True)
    run_batch_command(ctx, "Created", lambda: make_directories(paths, policy=effective))


def clean(
    ctx: typer.Context,
    paths: PathsArgument,
    policy: PolicyOption = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete everything inside directories, leaving them empty."""
    effective = resolve_policy(policy)

    if not yes:
        confirmed = typer.confirm(
            f"Delete all contents of {len(paths)} path(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    run_batch_command(ctx, "Cleaned", lambda: clean_paths(paths, policy=effective))
