"""File and directory creation.

Creates empty files ("touch") or directories including any missing
ancestors ("mkdir -p", except that an existing target is an error).
Batches default to the best-effort CONTINUE policy: one path failing does
not stop the others and the call still returns normally.
"""

import logging
from pathlib import Path

from unixfs.core.errors import translating
from unixfs.tree.ancestors import missing_ancestors
from unixfs.tree.batch import run_batch
from unixfs.tree.models import BatchReport, CreateKind, ErrorPolicy, PathInput, PathsArg, PathSet

logger = logging.getLogger(__name__)


def create_file(path: PathInput) -> None:
    """Create an empty file, truncating it if it already exists.

    Parent directories are not created.

    Raises:
        NotFoundError: If the parent directory does not exist.
        PermissionDeniedError: If the file cannot be written.
    """
    path = Path(path)
    with translating(path), open(path, "wb"):
        pass
    logger.debug("Created file %s", path)


def create_directory(path: PathInput) -> None:
    """Create a directory after creating every missing ancestor.

    Ancestors are created one at a time, outermost first, so each step's
    parent already exists.

    Raises:
        InvalidInputError: If the path has no parent component.
        AlreadyExistsError: If the directory itself already exists.
    """
    path = Path(path)
    for ancestor in missing_ancestors(path):
        with translating(ancestor):
            ancestor.mkdir()
        logger.debug("Created missing ancestor %s", ancestor)

    with translating(path):
        path.mkdir()
    logger.debug("Created directory %s", path)


def create(
    paths: PathsArg,
    kind: CreateKind,
    *,
    policy: ErrorPolicy = ErrorPolicy.CONTINUE,
) -> BatchReport:
    """Create files or directories at every path.

    Args:
        paths: Paths to create, processed in order.
        kind: Whether to create files or directories.
        policy: CONTINUE (default) records per-path failures and carries on;
            ABORT raises the first failure.

    Returns:
        BatchReport with one result per path.

    Raises:
        InvalidInputError: If paths is empty.
        UnixFsError: The first failure, when policy is ABORT.
    """
    path_set = PathSet.coerce(paths)
    kind = CreateKind(kind)
    make = create_file if kind is CreateKind.FILE else create_directory

    def _create_one(path: Path) -> int:
        make(path)
        return 0

    return run_batch(path_set, _create_one, policy, f"create {kind.value}")


def touch(
    paths: PathsArg,
    *,
    policy: ErrorPolicy = ErrorPolicy.CONTINUE,
) -> BatchReport:
    """Create empty files. See create()."""
    return create(paths, CreateKind.FILE, policy=policy)


def mkdir(
    paths: PathsArg,
    *,
    policy: ErrorPolicy = ErrorPolicy.CONTINUE,
) -> BatchReport:
    """Create directories with their missing ancestors. See create()."""
    return create(paths, CreateKind.DIRECTORY, policy=policy)
