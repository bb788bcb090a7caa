"""Utility modules for unixfs.

This module exports commonly used utility functions.
"""

from unixfs.utils.formatting import (
    console,
    create_report_table,
    err_console,
    format_size,
    print_error,
    print_info,
    print_report,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_report_table",
    "err_console",
    "format_size",
    "print_error",
    "print_info",
    "print_report",
    "print_success",
    "print_warning",
]
