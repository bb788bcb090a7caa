"""Unit tests for recursive removal."""

from pathlib import Path
from unittest.mock import patch

import pytest
from unixfs.core.errors import InvalidInputError, NotFoundError, PermissionDeniedError
from unixfs.tree.models import ErrorPolicy
from unixfs.tree.remover import remove_path, rm


class TestRemovePath:
    """Tests for remove_path."""

    def test_removes_file(self, tmp_path: Path) -> None:
        """A file is unlinked."""
        target = tmp_path / "f.txt"
        target.write_text("x")

        remove_path(target)

        assert not target.exists()

    def test_removes_tree(self, source_tree: Path) -> None:
        """A directory is removed with all its contents."""
        remove_path(source_tree)

        assert not source_tree.exists()

    def test_removes_symlink_not_target(self, source_tree: Path, tmp_path: Path) -> None:
        """A symlink to a directory is unlinked; the target survives."""
        link = tmp_path / "link"
        link.symlink_to(source_tree, target_is_directory=True)

        remove_path(link)

        assert not link.is_symlink()
        assert (source_tree / "file1.txt").exists()

    def test_missing_path(self, tmp_path: Path) -> None:
        """Removing a missing path raises NotFoundError."""
        with pytest.raises(NotFoundError):
            remove_path(tmp_path / "missing")


class TestRm:
    """Tests for the rm batch entry point."""

    def test_empty_rejected(self) -> None:
        """An empty input raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            rm([])

    def test_removes_mixed(self, tmp_path: Path, source_tree: Path) -> None:
        """Files and directories are removed in one call."""
        loose = tmp_path / "loose.txt"
        loose.write_text("x")

        report = rm([loose, source_tree])

        assert report.ok
        assert not loose.exists()
        assert not source_tree.exists()

    def test_second_removal_reports_not_found(self, source_tree: Path) -> None:
        """Removing an already removed path is an error, not a silent success."""
        rm([source_tree])

        with pytest.raises(NotFoundError):
            rm([source_tree])

    def test_abort_keeps_earlier_removals(self, tmp_path: Path) -> None:
        """Entries removed before a failure stay removed; later ones are kept."""
        first = tmp_path / "first.txt"
        first.write_text("1")
        last = tmp_path / "last.txt"
        last.write_text("3")

        with pytest.raises(NotFoundError):
            rm([first, tmp_path / "missing", last])

        assert not first.exists()
        assert last.exists()

    def test_continue_policy(self, tmp_path: Path) -> None:
        """With CONTINUE every path is attempted."""
        last = tmp_path / "last.txt"
        last.write_text("3")

        report = rm([tmp_path / "missing", last], policy=ErrorPolicy.CONTINUE)

        assert [r.path for r in report.failed] == [tmp_path / "missing"]
        assert not last.exists()

    def test_permission_error(self, source_tree: Path) -> None:
        """Permission failures surface as PermissionDeniedError."""
        with (
            patch(
                "unixfs.tree.remover.shutil.rmtree",
                side_effect=PermissionError(13, "Permission denied"),
            ),
            pytest.raises(PermissionDeniedError),
        ):
            rm([source_tree])
