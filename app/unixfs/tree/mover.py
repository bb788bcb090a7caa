"""Move by copy-then-remove, with an optional same-volume rename path.

The portable path copies every source into the destination first and only
removes the sources once the whole copy succeeded. A failed copy therefore
leaves the sources untouched. A failed removal leaves data in both places:
the destination holds a complete copy and nothing is corrupt, but the
caller has to reconcile the duplicates.

The rename path is only taken when requested and when every source lives
on the destination's device, so a single call never mixes both strategies.
"""

import logging
import os
from pathlib import Path

from unixfs.core.config import ConfigError, MoveSettings, load_config_or_default
from unixfs.core.errors import AlreadyExistsError, translating
from unixfs.tree.batch import run_batch
from unixfs.tree.copier import cp
from unixfs.tree.models import BatchReport, EntryResult, ErrorPolicy, PathInput, PathsArg, PathSet
from unixfs.tree.remover import rm

logger = logging.getLogger(__name__)


def same_volume(sources: PathSet, destination: Path) -> bool:
    """Check whether every source is on the same device as destination.

    Missing paths make this return False so the portable path reports the
    error.
    """
    try:
        device = destination.stat().st_dev
        return all(path.lstat().st_dev == device for path in sources)
    except OSError:
        return False


def _default_fast_rename() -> bool:
    try:
        return load_config_or_default().move.fast_rename
    except ConfigError as e:
        logger.warning("Ignoring unusable config, moving without rename: %s", e)
        return MoveSettings().fast_rename


def _rename_into(source: Path, destination: Path) -> int:
    target = destination / source.name
    # Directories never replace an existing entry, matching copy_tree
    if source.is_dir() and (target.exists() or target.is_symlink()):
        raise AlreadyExistsError(f"{target}: File exists", target)
    with translating(source):
        os.rename(source, target)
    logger.debug("Renamed %s -> %s", source, target)
    return 0


def mv(
    sources: PathsArg,
    destination: PathInput,
    *,
    policy: ErrorPolicy = ErrorPolicy.ABORT,
    fast_rename: bool | None = None,
) -> BatchReport:
    """Move files and directory trees into a destination directory.

    Args:
        sources: Files and directories to move.
        destination: Existing directory receiving them.
        policy: ABORT (default) raises the first failure. CONTINUE records
            failing sources; a source whose copy failed is not removed.
        fast_rename: Use os.rename when every source shares the destination's
            volume. None reads the default from the user configuration, and
            falls back to copy-then-remove when that file is unusable.

    Returns:
        BatchReport with one result per source.

    Raises:
        InvalidInputError: If sources is empty.
        UnixFsError: The first failure, when policy is ABORT. Sources are
            only removed after the copy of every source succeeded.
    """
    source_set = PathSet.coerce(sources)
    destination = Path(destination)

    if fast_rename is None:
        fast_rename = _default_fast_rename()

    if fast_rename and same_volume(source_set, destination):
        logger.debug("Moving %d path(s) by rename into %s", len(source_set), destination)
        return run_batch(
            source_set,
            lambda path: _rename_into(path, destination),
            policy,
            "move",
        )

    copy_report = cp(source_set, destination, policy=policy)
    copied = [r.path for r in copy_report.succeeded]
    if not copied:
        return copy_report

    remove_report = rm(copied, policy=policy)
    removal_errors = {r.path: r.error for r in remove_report.failed}

    report = BatchReport()
    for result in copy_report:
        if result.path in removal_errors:
            report.add(
                EntryResult(
                    path=result.path,
                    success=False,
                    error=f"copied but not removed: {removal_errors[result.path]}",
                    bytes_copied=result.bytes_copied,
                )
            )
        else:
            report.add(result)
    return report
