"""CLI package for unixfs.

This package contains the Typer application and all subcommands.
"""

from unixfs.cli.main import app

__all__ = ["app"]
