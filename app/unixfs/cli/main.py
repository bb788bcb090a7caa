"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from typing import Annotated

import typer

from unixfs import __version__
from unixfs.cli.commands import config, manage, query, transfer

# Create main Typer app
app = typer.Typer(
    name="unixfs",
    help="Unix-style file operations: ls, rm, touch, mkdir, cp, mv, clean, extract, du.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"unixfs version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Route library log records to stderr at the requested level."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("unixfs").setLevel(level)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """unixfs - Unix-style file operations over whole directory trees."""
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose, quiet)


# Register commands
app.command("ls")(query.ls)
app.command("du")(query.du)
app.command("rm")(manage.rm)
app.command("touch")(manage.touch)
app.command("mkdir")(manage.mkdir)
app.command("clean")(manage.clean)
app.command("cp")(transfer.cp)
app.command("mv")(transfer.mv)
app.command("extract")(transfer.extract)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
