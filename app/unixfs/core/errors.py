"""Typed errors raised by unixfs operations.

Every failure surfaced by the library is a subclass of UnixFsError and
names the path that failed. Errors coming from the host filesystem are
translated from OSError with translate_os_error() and keep the original
exception as their cause. ErrorPolicy decides whether a batch raises them
or records them.
"""

import errno
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from os import PathLike
from pathlib import Path


class UnixFsError(Exception):
    """Base exception for all unixfs errors.

    Attributes:
        path: Path the failing operation was working on, if known.
        cause: Underlying OSError, if the error came from the filesystem.
    """

    def __init__(
        self,
        message: str,
        path: str | PathLike[str] | None = None,
        cause: OSError | None = None,
    ) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.cause = cause


class InvalidInputError(UnixFsError):
    """Raised for an empty path set or a path without a parent component."""


class NotFoundError(UnixFsError):
    """Raised when a referenced path does not exist."""


class PermissionDeniedError(UnixFsError):
    """Raised when the process lacks permission for a path."""


class AlreadyExistsError(UnixFsError):
    """Raised when a directory to be created already exists."""


class IoFailureError(UnixFsError):
    """Raised for any other filesystem failure."""


class ErrorPolicy(str, Enum):
    """How a batch operation reacts to a failing entry.

    Attributes:
        ABORT: Stop at the first failure and raise it.
        CONTINUE: Record the failure, keep processing the remaining entries.
    """

    ABORT = "abort"
    CONTINUE = "continue"


_ERRNO_TO_ERROR: dict[int, type[UnixFsError]] = {
    errno.ENOENT: NotFoundError,
    errno.EACCES: PermissionDeniedError,
    errno.EPERM: PermissionDeniedError,
    errno.EEXIST: AlreadyExistsError,
}


def translate_os_error(exc: OSError, path: str | PathLike[str]) -> UnixFsError:
    """Map an OSError onto the matching UnixFsError subclass.

    The returned error is not raised; callers do ``raise translate_os_error(e, p) from e``
    so the traceback keeps the original exception.

    Args:
        exc: The error raised by the host filesystem.
        path: Path being operated on when the error happened. Used when the
            OSError itself carries no filename.

    Returns:
        A NotFoundError, PermissionDeniedError, AlreadyExistsError or
        IoFailureError wrapping exc.
    """
    failing = exc.filename if exc.filename is not None else path
    if isinstance(exc, FileNotFoundError):
        error_cls: type[UnixFsError] = NotFoundError
    elif isinstance(exc, PermissionError):
        error_cls = PermissionDeniedError
    elif isinstance(exc, FileExistsError):
        error_cls = AlreadyExistsError
    else:
        error_cls = _ERRNO_TO_ERROR.get(exc.errno or 0, IoFailureError)

    reason = exc.strerror or str(exc)
    return error_cls(f"{failing}: {reason}", path=failing, cause=exc)


@contextmanager
def translating(path: str | PathLike[str]) -> Iterator[None]:
    """Re-raise any OSError from the enclosed block as a UnixFsError.

    Example:
        >>> with translating(target):
        ...     target.unlink()
    """
    try:
        yield
    except OSError as e:
        raise translate_os_error(e, path) from e
