"""User configuration for unixfs.

The configuration only supplies defaults: which error policy batch
commands use, and whether moves may take the same-volume rename shortcut.
Library calls that receive explicit arguments ignore it.

Configuration is stored in ~/.config/unixfs/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from unixfs.core.errors import ErrorPolicy
from unixfs.core.paths import get_config_path

logger = logging.getLogger(__name__)


class BatchSettings(BaseModel):
    """Default error policies for batch operations.

    Attributes:
        policy: Policy for copy, move, remove, clean and extract.
        create_policy: Policy for touch and mkdir.
    """

    model_config = ConfigDict(extra="forbid")

    policy: Annotated[
        ErrorPolicy,
        Field(description="Policy for cp, mv, rm, clean and extract"),
    ] = ErrorPolicy.ABORT
    create_policy: Annotated[
        ErrorPolicy,
        Field(description="Policy for touch and mkdir"),
    ] = ErrorPolicy.CONTINUE


class MoveSettings(BaseModel):
    """Settings for move operations.

    Attributes:
        fast_rename: Rename instead of copy-then-remove when every source
            lives on the destination's volume.
    """

    model_config = ConfigDict(extra="forbid")

    fast_rename: Annotated[
        bool,
        Field(description="Use os.rename when source and destination share a volume"),
    ] = False


class UnixFsConfig(BaseModel):
    """Top-level unixfs configuration."""

    model_config = ConfigDict(extra="forbid")

    batch: BatchSettings = Field(default_factory=BatchSettings)
    move: MoveSettings = Field(default_factory=MoveSettings)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> UnixFsConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated UnixFsConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return UnixFsConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> UnixFsConfig:
    """Load configuration, falling back to defaults when no file exists.

    Parse and schema errors are still raised so a broken file is never
    silently ignored.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file, using defaults")
        return UnixFsConfig()


def save_config(config: UnixFsConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file in the same directory and then
    moved into place with os.replace().

    Args:
        config: The configuration to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config.model_dump(mode="json")

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    logger.debug("Saved config to %s", config_path)
    return config_path
