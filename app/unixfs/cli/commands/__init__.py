"""CLI commands for unixfs.

This package contains all subcommand implementations.
"""

from unixfs.cli.commands import config, manage, query, transfer

__all__ = ["config", "manage", "query", "transfer"]
