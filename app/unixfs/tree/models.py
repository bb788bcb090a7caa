"""Data models shared by the tree operations.

This module defines the input collection (PathSet), the flags that steer
creation and batch error handling, and the per-entry results returned by
every batch operation.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from pathlib import Path

from unixfs.core.errors import ErrorPolicy, InvalidInputError

__all__ = [
    "BatchReport",
    "CreateKind",
    "EntryResult",
    "ErrorPolicy",
    "PathInput",
    "PathSet",
    "PathsArg",
]

PathInput = str | PathLike[str]


class CreateKind(str, Enum):
    """What Creator should create at a path.

    Attributes:
        FILE: An empty regular file.
        DIRECTORY: A directory, including any missing ancestors.
    """

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class PathSet:
    """Non-empty ordered collection of filesystem paths.

    Order is processing order. Construction fails with InvalidInputError
    when no paths are given, before any operation touches the filesystem.

    Attributes:
        paths: The paths, normalised to pathlib.Path.
    """

    paths: tuple[Path, ...]

    def __post_init__(self) -> None:
        """Validate that the set is not empty and normalise entries to Path."""
        if not self.paths:
            msg = "Path set cannot be empty"
            raise InvalidInputError(msg)
        object.__setattr__(self, "paths", tuple(Path(p) for p in self.paths))

    @classmethod
    def of(cls, *paths: PathInput) -> "PathSet":
        """Build a PathSet from positional paths."""
        return cls(tuple(Path(p) for p in paths))

    @classmethod
    def coerce(cls, value: "PathSet | PathInput | Iterable[PathInput]") -> "PathSet":
        """Build a PathSet from a PathSet, a single path or an iterable of paths.

        Strings are treated as a single path, never as an iterable of
        characters.

        Args:
            value: Anything accepted by the public operations.

        Returns:
            A PathSet preserving the input order.

        Raises:
            InvalidInputError: If value holds no paths.
        """
        if isinstance(value, PathSet):
            return value
        if isinstance(value, (str, PathLike)):
            return cls.of(value)
        return cls(tuple(Path(p) for p in value))

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __getitem__(self, index: int) -> Path:
        return self.paths[index]


@dataclass(frozen=True, slots=True)
class EntryResult:
    """Outcome of a batch operation for one top-level path.

    Attributes:
        path: The top-level path that was processed.
        success: Whether the path was processed without error.
        error: Error message if processing failed, None otherwise.
        bytes_copied: File bytes written for this entry (copy-like operations).
    """

    path: Path
    success: bool
    error: str | None = None
    bytes_copied: int = 0

    @property
    def failed(self) -> bool:
        """Check if processing this entry failed."""
        return not self.success


@dataclass(slots=True)
class BatchReport:
    """Ordered results of a batch operation, one per top-level path."""

    results: list[EntryResult] = field(default_factory=list)

    def add(self, result: EntryResult) -> None:
        """Append the result for the next processed path."""
        self.results.append(result)

    def extend(self, other: "BatchReport") -> None:
        """Append every result from another report."""
        self.results.extend(other.results)

    @property
    def succeeded(self) -> list[EntryResult]:
        """Results of entries that were processed successfully."""
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[EntryResult]:
        """Results of entries that failed."""
        return [r for r in self.results if not r.success]

    @property
    def ok(self) -> bool:
        """True when no entry failed."""
        return not self.failed

    @property
    def bytes_copied(self) -> int:
        """Total file bytes written across all entries."""
        return sum(r.bytes_copied for r in self.results)

    def __iter__(self) -> Iterator[EntryResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)


# Anything the public operations accept where a set of paths is expected.
PathsArg = PathSet | PathInput | Iterable[PathInput]
