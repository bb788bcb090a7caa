"""Recursive size calculation."""

import logging
from pathlib import Path

from unixfs.core.errors import translating
from unixfs.tree.listing import list_dir
from unixfs.tree.models import PathInput

logger = logging.getLogger(__name__)


def size_of(path: PathInput) -> int:
    """Compute the size of a file or directory tree in bytes.

    A file reports its own length. For a directory, every entry below it
    contributes its metadata length, and that includes the lengths the
    filesystem reports for subdirectories themselves, not only file
    contents. The directory passed in does not count its own length.

    Args:
        path: File or directory to measure.

    Returns:
        Size in bytes.

    Raises:
        NotFoundError: If path does not exist.
        UnixFsError: On any other filesystem failure.
    """
    path = Path(path)
    with translating(path):
        if not path.is_dir():
            return path.stat().st_size

    total = 0
    pending: list[Path] = [path]
    while pending:
        directory = pending.pop()
        for child in list_dir(directory):
            with translating(child):
                total += child.stat().st_size
            if child.is_dir():
                pending.append(child)

    logger.debug("Size of %s: %d bytes", path, total)
    return total


def du(path: PathInput) -> int:
    """Disk usage, Unix style. Alias of size_of()."""
    return size_of(path)
