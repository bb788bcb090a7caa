"""Recursive removal of files and directory trees."""

import logging
import shutil
from pathlib import Path

from unixfs.core.errors import translating
from unixfs.tree.batch import run_batch
from unixfs.tree.models import BatchReport, ErrorPolicy, PathInput, PathsArg, PathSet

logger = logging.getLogger(__name__)


def remove_path(path: PathInput) -> None:
    """Remove a file, a symlink or a whole directory tree.

    Directories (but not symlinks to directories) are removed recursively.
    Everything else is unlinked, so a missing path fails with NotFoundError
    instead of being silently ignored.

    Raises:
        NotFoundError: If the path does not exist.
        UnixFsError: On any other filesystem failure.
    """
    path = Path(path)
    with translating(path):
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    logger.debug("Removed %s", path)


def rm(paths: PathsArg, *, policy: ErrorPolicy = ErrorPolicy.ABORT) -> BatchReport:
    """Remove files and directory trees.

    Removal is not rolled back: entries removed before a failure stay removed.

    Args:
        paths: Paths to remove, processed in order.
        policy: ABORT (default) raises the first failure; CONTINUE records
            it and carries on with the remaining paths.

    Returns:
        BatchReport with one result per path.

    Raises:
        InvalidInputError: If paths is empty.
        UnixFsError: The first failure, when policy is ABORT.
    """
    path_set = PathSet.coerce(paths)

    def _remove_one(path: Path) -> int:
        remove_path(path)
        return 0

    return run_batch(path_set, _remove_one, policy, "remove")
