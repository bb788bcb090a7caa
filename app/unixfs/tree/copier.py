"""Recursive tree copy.

Copies files and directory trees into a destination directory, mirroring
the directory structure of every source. Traversal uses an explicit
work-list of (source, destination directory) pairs, so arbitrarily deep
trees do not consume Python stack frames.
"""

import logging
import shutil
from pathlib import Path

from unixfs.core.errors import translating
from unixfs.tree.batch import run_batch
from unixfs.tree.listing import list_dir
from unixfs.tree.models import BatchReport, ErrorPolicy, PathInput, PathsArg, PathSet

logger = logging.getLogger(__name__)


def copy_file(source: PathInput, destination_dir: PathInput) -> int:
    """Copy one file into a directory, keeping its name.

    An existing file with the same name is overwritten. Permission bits
    are copied along with the content. An existing directory with the
    same name is never copied into.

    Args:
        source: File to copy.
        destination_dir: Existing directory to copy into.

    Returns:
        Number of bytes copied.

    Raises:
        NotFoundError: If source does not exist.
        IoFailureError: If the target name is taken by a directory.
    """
    source = Path(source)
    target = Path(destination_dir) / source.name
    with translating(source):
        shutil.copyfile(source, target)
        shutil.copymode(source, target)
        size = target.stat().st_size
    logger.debug("Copied %s -> %s (%d bytes)", source, target, size)
    return size


def copy_tree(source: PathInput, destination_dir: PathInput) -> int:
    """Copy a file or a whole directory tree into destination_dir.

    A directory is replicated as a same-named subdirectory of
    destination_dir, with every nested file and directory mirrored below
    it. Siblings are processed in directory listing order. The first
    failure stops the copy; whatever was already written stays in place.

    Args:
        source: File or directory to copy.
        destination_dir: Existing directory to copy into.

    Returns:
        Total number of file bytes copied.

    Raises:
        AlreadyExistsError: If a directory to be mirrored already exists
            in the destination.
        UnixFsError: On any other filesystem failure.
    """
    copied = 0
    pending: list[tuple[Path, Path]] = [(Path(source), Path(destination_dir))]

    while pending:
        src, dest = pending.pop()
        if not src.is_dir():
            copied += copy_file(src, dest)
            continue

        mirror = dest / src.name
        with translating(mirror):
            mirror.mkdir()
        logger.debug("Mirrored directory %s -> %s", src, mirror)

        # Reversed so that popping from the end visits children in listing order
        children = list_dir(src)
        pending.extend((child, mirror) for child in reversed(children))

    return copied


def cp(
    sources: PathsArg,
    destination: PathInput,
    *,
    policy: ErrorPolicy = ErrorPolicy.ABORT,
) -> BatchReport:
    """Copy files and directory trees into a destination directory.

    The destination is expected to be an existing directory; this is not
    checked up front. Nothing is cleaned up after a failure, so a failed
    copy may leave a partial tree in the destination.

    Args:
        sources: Files and directories to copy, processed in order.
        destination: Directory receiving the copies.
        policy: ABORT (default) raises the first failure; CONTINUE records
            a failing source and moves on to the next one.

    Returns:
        BatchReport with the bytes copied for every source.

    Raises:
        InvalidInputError: If sources is empty. Raised before any copying.
        UnixFsError: The first failure, when policy is ABORT.
    """
    source_set = PathSet.coerce(sources)
    destination = Path(destination)

    def _copy_one(path: Path) -> int:
        return copy_tree(path, destination)

    return run_batch(source_set, _copy_one, policy, "copy")
