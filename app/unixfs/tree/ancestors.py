"""Missing ancestor resolution for directory creation."""

import logging
from itertools import takewhile
from pathlib import Path

from unixfs.core.errors import InvalidInputError
from unixfs.tree.models import PathInput

logger = logging.getLogger(__name__)


def missing_ancestors(target: PathInput) -> list[Path]:
    """Return the ancestors of target that do not exist yet, outermost first.

    The walk starts at the target's parent and climbs until it reaches an
    existing directory or the filesystem root. The target itself is never
    included, so the result is exactly the list of directories that must be
    created, in order, before the target can be.

    Args:
        target: Path that is about to be created as a directory.

    Returns:
        Missing ancestors in creation order. Empty if the parent exists.

    Raises:
        InvalidInputError: If target has no parent component (root, "" or ".").
    """
    target = Path(target)
    if target.parent == target or not target.name:
        msg = f"Path has no parent component: {str(target)!r}"
        raise InvalidInputError(msg, path=target)

    missing = tuple(takewhile(lambda p: not p.exists(), target.parents))
    if missing:
        logger.debug("Missing ancestors of %s: %s", target, [str(p) for p in missing])
    return list(reversed(missing))
