"""Directory cleaning: remove a path, then recreate it empty."""

import logging
from pathlib import Path

from unixfs.tree.batch import run_batch
from unixfs.tree.creator import create_directory
from unixfs.tree.models import BatchReport, ErrorPolicy, PathsArg, PathSet
from unixfs.tree.remover import remove_path

logger = logging.getLogger(__name__)


def clean(paths: PathsArg, *, policy: ErrorPolicy = ErrorPolicy.ABORT) -> BatchReport:
    """Empty every path by removing it and recreating it as a directory.

    Paths are handled left to right. A file is replaced by an empty
    directory of the same name.

    Args:
        paths: Directories to clean.
        policy: ABORT (default) stops at the first failing path; CONTINUE
            records it and cleans the rest.

    Returns:
        BatchReport with one result per path.

    Raises:
        InvalidInputError: If paths is empty.
        UnixFsError: The first failure, when policy is ABORT.
    """
    path_set = PathSet.coerce(paths)

    def _clean_one(path: Path) -> int:
        remove_path(path)
        create_directory(path)
        logger.debug("Cleaned %s", path)
        return 0

    return run_batch(path_set, _clean_one, policy, "clean")
