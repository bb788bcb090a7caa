"""Directory listing.

Thin wrapper over the host "read directory" call that returns full child
paths and translates failures into unixfs errors.
"""

import logging
import os
from pathlib import Path

from unixfs.core.errors import translating
from unixfs.tree.models import PathInput

logger = logging.getLogger(__name__)


def list_dir(directory: PathInput) -> list[Path]:
    """List the immediate children of a directory.

    Children are returned in the order the host filesystem reports them,
    which is not guaranteed to be sorted.

    Args:
        directory: Directory to list.

    Returns:
        Full paths of every child entry.

    Raises:
        NotFoundError: If the directory does not exist.
        PermissionDeniedError: If the directory cannot be read.
        IoFailureError: If the path is not a directory or listing fails.
    """
    directory = Path(directory)
    with translating(directory), os.scandir(directory) as entries:
        children = [directory / entry.name for entry in entries]
    logger.debug("Listed %d entries in %s", len(children), directory)
    return children


def ls(directory: PathInput) -> list[Path]:
    """List a directory, Unix style. Alias of list_dir()."""
    return list_dir(directory)
