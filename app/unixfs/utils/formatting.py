"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from unixfs.tree.models import BatchReport

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "dim": "#b2bec3",
        "header": "#69B9A1",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "directory": "bold #0e8ac8",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def create_report_table(title: str, show_bytes: bool = False) -> Table:
    """Create a pre-configured table for batch operation results.

    Args:
        title: Table title.
        show_bytes: Add a column with the bytes copied per entry.

    Returns:
        Rich Table with Path, Status and Details columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="bold")
    table.add_column("Status", width=8)
    if show_bytes:
        table.add_column("Copied", style="info", justify="right", width=10)
    table.add_column("Details", style="dim")
    return table


def print_report(report: BatchReport, title: str, show_bytes: bool = False) -> None:
    """Display a batch report as a table followed by a one-line summary."""
    table = create_report_table(title, show_bytes=show_bytes)

    for r in report:
        status = "[success]ok[/]" if r.success else "[error]failed[/]"
        row = [str(r.path), status]
        if show_bytes:
            row.append(format_size(r.bytes_copied))
        row.append(r.error or "")
        table.add_row(*row)

    console.print(table)

    fail_count = len(report.failed)
    success_count = len(report.succeeded)
    if fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    else:
        print_success(f"All {success_count} path(s) processed successfully.")
