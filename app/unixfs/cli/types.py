"""Shared types and utilities for CLI commands.

This module provides the option types and helpers used across the
command modules: error policy resolution, report display and mapping
library errors onto exit codes.
"""

from collections.abc import Callable
from enum import Enum
from typing import Annotated

import typer

from unixfs.core.config import ConfigError, load_config_or_default
from unixfs.core.errors import UnixFsError
from unixfs.tree.models import BatchReport, ErrorPolicy
from unixfs.utils.formatting import print_error, print_report


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


PolicyOption = Annotated[
    ErrorPolicy | None,
    typer.Option(
        "--policy",
        "-p",
        help="Error policy: abort on first failure or continue. Defaults to the config.",
        case_sensitive=False,
    ),
]


def resolve_policy(policy: ErrorPolicy | None, *, create: bool = False) -> ErrorPolicy:
    """Return the explicit policy, or the configured default.

    Args:
        policy: Policy given on the command line, if any.
        create: Use the default for creation commands (touch, mkdir).

    Returns:
        The policy to pass to the library call.
    """
    if policy is not None:
        return policy
    try:
        settings = load_config_or_default().batch
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    return settings.create_policy if create else settings.policy


def run_batch_command(
    ctx: typer.Context,
    title: str,
    operation: Callable[[], BatchReport],
    show_bytes: bool = False,
) -> BatchReport:
    """Run a library batch call and present its outcome.

    Library errors are printed and turned into exit code 1, as are
    reports containing failed entries.

    Args:
        ctx: Typer context carrying the global --quiet flag.
        title: Title of the results table.
        operation: Zero-argument callable performing the library call.
        show_bytes: Show the bytes copied per entry.

    Returns:
        The report, when every entry succeeded.
    """
    try:
        report = operation()
    except UnixFsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    if not quiet:
        print_report(report, title, show_bytes=show_bytes)

    if not report.ok:
        if quiet:
            for r in report.failed:
                print_error(f"{r.path}: {r.error}")
        raise typer.Exit(code=1)

    return report
