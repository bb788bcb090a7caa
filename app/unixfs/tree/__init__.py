"""Tree operations over the host filesystem.

This package provides listing, creation, removal, copy, move, clean,
flattening extraction and size calculation for arbitrary mixes of files
and directory trees.
"""

from unixfs.tree.models import (
    BatchReport,
    CreateKind,
    EntryResult,
    ErrorPolicy,
    PathInput,
    PathsArg,
    PathSet,
)
from unixfs.tree.ancestors import missing_ancestors
from unixfs.tree.listing import list_dir, ls
from unixfs.tree.creator import create, create_directory, create_file, mkdir, touch
from unixfs.tree.copier import copy_file, copy_tree, cp
from unixfs.tree.remover import remove_path, rm
from unixfs.tree.mover import mv, same_volume
from unixfs.tree.cleaner import clean
from unixfs.tree.extractor import extract, extract_tree
from unixfs.tree.size import du, size_of

__all__ = [
    "BatchReport",
    "CreateKind",
    "EntryResult",
    "ErrorPolicy",
    "PathInput",
    "PathSet",
    "PathsArg",
    "clean",
    "copy_file",
    "copy_tree",
    "cp",
    "create",
    "create_directory",
    "create_file",
    "du",
    "extract",
    "extract_tree",
    "list_dir",
    "ls",
    "missing_ancestors",
    "mkdir",
    "mv",
    "remove_path",
    "rm",
    "same_volume",
    "size_of",
    "touch",
]
