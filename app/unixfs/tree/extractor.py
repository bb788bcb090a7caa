"""Flattening extraction.

Collects every file below the source directories, at any depth, into one
destination directory. Relative paths are discarded: when two files share
a basename the one copied later overwrites the earlier one.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from unixfs.tree.batch import run_batch
from unixfs.tree.copier import copy_file
from unixfs.tree.listing import list_dir
from unixfs.tree.models import BatchReport, ErrorPolicy, PathInput, PathsArg, PathSet

logger = logging.getLogger(__name__)


def extract_tree(source_dir: PathInput, destination_dir: PathInput) -> int:
    """Copy every file below source_dir directly into destination_dir.

    Returns:
        Total number of file bytes copied.

    Raises:
        UnixFsError: On the first filesystem failure, including source_dir
            not being a directory.
    """
    destination_dir = Path(destination_dir)
    copied = 0
    files = 0
    # One iterator per open directory; the innermost is walked first so
    # files are copied in the same order as a depth-first recursive walk.
    pending: list[Iterator[Path]] = [iter(list_dir(source_dir))]

    while pending:
        child = next(pending[-1], None)
        if child is None:
            pending.pop()
        elif child.is_dir():
            pending.append(iter(list_dir(child)))
        else:
            copied += copy_file(child, destination_dir)
            files += 1

    logger.debug("Extracted %d files from %s into %s", files, source_dir, destination_dir)
    return copied


def extract(
    sources: PathsArg,
    destination: PathInput,
    *,
    policy: ErrorPolicy = ErrorPolicy.ABORT,
) -> BatchReport:
    """Flatten the files of every source directory into destination.

    Args:
        sources: Directories to walk, processed in order.
        destination: Existing directory receiving the files.
        policy: ABORT (default) raises the first failure. CONTINUE records
            a failing source and goes on with the next one.

    Returns:
        BatchReport with the bytes copied for every source.

    Raises:
        InvalidInputError: If sources is empty.
        UnixFsError: The first failure, when policy is ABORT.
    """
    source_set = PathSet.coerce(sources)
    destination = Path(destination)

    def _extract_one(path: Path) -> int:
        return extract_tree(path, destination)

    return run_batch(source_set, _extract_one, policy, "extract")
