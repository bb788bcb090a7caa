"""Configuration commands.

Shows, locates and initialises the user configuration file.
"""

from typing import Annotated

import tomli_w
import typer

from unixfs.core.config import ConfigError, UnixFsConfig, load_config_or_default, save_config
from unixfs.core.paths import get_config_path
from unixfs.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialise the unixfs configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Print the effective configuration as TOML."""
    try:
        config = load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(tomli_w.dumps(config.model_dump(mode="json")), highlight=False, markup=False)


@app.command()
def path() -> None:
    """Print the location of the configuration file."""
    console.print(str(get_config_path()), highlight=False)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing configuration file."),
    ] = False,
) -> None:
    """Write a configuration file with the default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        saved = save_config(UnixFsConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
