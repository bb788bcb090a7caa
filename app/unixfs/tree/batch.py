"""Batch execution under an explicit error policy.

Every public tree operation walks its top-level paths through run_batch(),
so ABORT and CONTINUE behave the same way everywhere.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from unixfs.core.errors import UnixFsError
from unixfs.tree.models import BatchReport, EntryResult, ErrorPolicy, PathSet

logger = logging.getLogger(__name__)

# Processes one top-level path and returns the number of file bytes written.
EntryAction = Callable[[Path], int]


def run_batch(
    paths: PathSet,
    action: EntryAction,
    policy: ErrorPolicy,
    operation: str,
) -> BatchReport:
    """Apply action to every path in order, honouring the error policy.

    Args:
        paths: Top-level paths to process.
        action: Callable doing the work for one path. Must raise UnixFsError
            on failure.
        policy: ABORT re-raises the first failure; CONTINUE records it and
            moves on to the next path.
        operation: Operation name used in log records.

    Returns:
        BatchReport with one EntryResult per processed path.

    Raises:
        UnixFsError: The first failure, when policy is ABORT.
    """
    policy = ErrorPolicy(policy)
    report = BatchReport()

    for path in paths:
        try:
            written = action(path)
        except UnixFsError as e:
            if policy is ErrorPolicy.ABORT:
                logger.debug("%s aborted at %s: %s", operation, path, e)
                raise
            logger.warning("%s failed for %s, continuing: %s", operation, path, e)
            report.add(EntryResult(path=path, success=False, error=str(e)))
            continue

        report.add(EntryResult(path=path, success=True, bytes_copied=written))

    return report
