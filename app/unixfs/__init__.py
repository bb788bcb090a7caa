"""Unix-style filesystem operations with a uniform, composable API."""

__version__ = "0.1.0"

from unixfs.core.errors import (
    AlreadyExistsError,
    InvalidInputError,
    IoFailureError,
    NotFoundError,
    PermissionDeniedError,
    UnixFsError,
)
from unixfs.tree import (
    BatchReport,
    CreateKind,
    EntryResult,
    ErrorPolicy,
    PathSet,
    clean,
    cp,
    create,
    du,
    extract,
    ls,
    mkdir,
    mv,
    rm,
    size_of,
    touch,
)

__all__ = [
    "AlreadyExistsError",
    "BatchReport",
    "CreateKind",
    "EntryResult",
    "ErrorPolicy",
    "InvalidInputError",
    "IoFailureError",
    "NotFoundError",
    "PathSet",
    "PermissionDeniedError",
    "UnixFsError",
    "__version__",
    "clean",
    "cp",
    "create",
    "du",
    "extract",
    "ls",
    "mkdir",
    "mv",
    "rm",
    "size_of",
    "touch",
]
