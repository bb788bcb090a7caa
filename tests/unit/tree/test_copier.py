"""Unit tests for recursive tree copy."""

import shutil
from pathlib import Path
from unittest.mock import patch

import pytest
from unixfs.core.errors import AlreadyExistsError, InvalidInputError, IoFailureError, NotFoundError
from unixfs.tree.copier import copy_file, copy_tree, cp
from unixfs.tree.models import ErrorPolicy


def _relative_tree(root: Path) -> set[str]:
    """Return every path below root, relative to it."""
    return {str(p.relative_to(root)) for p in root.rglob("*")}


class TestCopyFile:
    """Tests for copy_file."""

    def test_copies_content(self, tmp_path: Path, dest_dir: Path) -> None:
        """File bytes are copied verbatim under the same name."""
        source = tmp_path / "blob.bin"
        source.write_bytes(bytes(range(256)))

        written = copy_file(source, dest_dir)

        assert (dest_dir / "blob.bin").read_bytes() == bytes(range(256))
        assert written == 256

    def test_overwrites_existing(self, tmp_path: Path, dest_dir: Path) -> None:
        """An existing destination file is replaced."""
        source = tmp_path / "f.txt"
        source.write_text("new")
        (dest_dir / "f.txt").write_text("old and longer")

        copy_file(source, dest_dir)

        assert (dest_dir / "f.txt").read_text() == "new"

    def test_missing_source(self, tmp_path: Path, dest_dir: Path) -> None:
        """A missing source raises NotFoundError."""
        with pytest.raises(NotFoundError):
            copy_file(tmp_path / "missing.txt", dest_dir)

    def test_directory_in_the_way(self, tmp_path: Path, dest_dir: Path) -> None:
        """A directory named like the file is not copied into."""
        source = tmp_path / "x"
        source.write_text("data")
        (dest_dir / "x").mkdir()

        with pytest.raises(IoFailureError):
            copy_file(source, dest_dir)

        assert list((dest_dir / "x").iterdir()) == []

    def test_keeps_permission_bits(self, tmp_path: Path, dest_dir: Path) -> None:
        """The copy carries the source mode."""
        source = tmp_path / "run.sh"
        source.write_text("#!/bin/sh\n")
        source.chmod(0o755)

        copy_file(source, dest_dir)

        assert (dest_dir / "run.sh").stat().st_mode & 0o777 == 0o755


class TestCopyTree:
    """Tests for copy_tree."""

    def test_mirrors_structure(self, source_tree: Path, dest_dir: Path) -> None:
        """copy([/a], /d) yields /d/a/... with the same nesting and content."""
        copy_tree(source_tree, dest_dir)

        assert (dest_dir / "a" / "file1.txt").read_text() == "one"
        assert (dest_dir / "a" / "sub" / "file2.txt").read_text() == "two"
        assert (dest_dir / "a" / "sub" / "deeper" / "file3.txt").read_text() == "three"
        assert _relative_tree(dest_dir / "a") == _relative_tree(source_tree)

    def test_returns_bytes_copied(self, source_tree: Path, dest_dir: Path) -> None:
        """The byte count covers every file in the tree."""
        assert copy_tree(source_tree, dest_dir) == len("one") + len("two") + len("three")

    def test_empty_directories_copied(self, tmp_path: Path, dest_dir: Path) -> None:
        """Empty directories are mirrored too."""
        source = tmp_path / "empty_root"
        (source / "inner").mkdir(parents=True)

        copy_tree(source, dest_dir)

        assert (dest_dir / "empty_root" / "inner").is_dir()

    def test_deep_tree(self, tmp_path: Path, dest_dir: Path) -> None:
        """Deep trees are copied without relying on recursion depth."""
        source = tmp_path / "deep"
        current = source
        for i in range(60):
            current = current / f"level{i}"
        current.mkdir(parents=True)
        (current / "leaf.txt").write_text("leaf")

        copy_tree(source, dest_dir)

        copied_leaf = dest_dir / current.relative_to(tmp_path) / "leaf.txt"
        assert copied_leaf.read_text() == "leaf"

    def test_existing_directory_conflict(self, source_tree: Path, dest_dir: Path) -> None:
        """A directory that already exists in the destination is an error."""
        (dest_dir / "a").mkdir()

        with pytest.raises(AlreadyExistsError):
            copy_tree(source_tree, dest_dir)


class TestCp:
    """Tests for the cp batch entry point."""

    def test_empty_sources_rejected_without_mutation(self, dest_dir: Path) -> None:
        """cp([], dest) raises InvalidInputError and leaves dest untouched."""
        with pytest.raises(InvalidInputError):
            cp([], dest_dir)

        assert list(dest_dir.iterdir()) == []

    def test_mixed_files_and_directories(
        self, tmp_path: Path, source_tree: Path, dest_dir: Path
    ) -> None:
        """Files and directories can be copied in one call."""
        loose = tmp_path / "loose.txt"
        loose.write_text("loose")

        report = cp([loose, source_tree], dest_dir)

        assert report.ok
        assert [r.path for r in report] == [loose, source_tree]
        assert report.results[0].bytes_copied == 5
        assert (dest_dir / "loose.txt").read_text() == "loose"
        assert (dest_dir / "a" / "sub" / "file2.txt").read_text() == "two"

    def test_single_file(self, tmp_path: Path, dest_dir: Path) -> None:
        """A lone file path is copied into the destination."""
        source = tmp_path / "only.txt"
        source.write_text("only")

        cp(source, dest_dir)

        assert (dest_dir / "only.txt").read_text() == "only"

    def test_file_onto_existing_directory(self, tmp_path: Path, dest_dir: Path) -> None:
        """Copying a file over a same-named directory fails."""
        source = tmp_path / "x"
        source.write_text("data")
        (dest_dir / "x").mkdir()

        with pytest.raises(IoFailureError):
            cp([source], dest_dir)

        assert not (dest_dir / "x" / "x").exists()

    def test_abort_on_first_failure(
        self, tmp_path: Path, source_tree: Path, dest_dir: Path
    ) -> None:
        """The first failure propagates and later sources are not copied."""
        later = tmp_path / "later.txt"
        later.write_text("later")

        with pytest.raises(NotFoundError):
            cp([tmp_path / "missing.txt", later], dest_dir)

        assert not (dest_dir / "later.txt").exists()

    def test_partial_copy_left_in_place(self, source_tree: Path, dest_dir: Path) -> None:
        """A failure mid-tree leaves already copied entries behind."""
        real_copy = shutil.copyfile

        def flaky_copy(src: Path, dst: Path) -> Path:
            if Path(src).name == "file3.txt":
                raise OSError(28, "No space left on device", str(src))
            return real_copy(src, dst)

        with (
            patch("unixfs.tree.copier.shutil.copyfile", side_effect=flaky_copy),
            pytest.raises(IoFailureError, match="No space left"),
        ):
            cp([source_tree], dest_dir)

        assert (dest_dir / "a" / "sub" / "deeper").is_dir()
        assert not (dest_dir / "a" / "sub" / "deeper" / "file3.txt").exists()

    def test_continue_policy(self, tmp_path: Path, dest_dir: Path) -> None:
        """With CONTINUE a failing source is recorded and the rest copied."""
        good = tmp_path / "good.txt"
        good.write_text("good")

        report = cp([tmp_path / "missing.txt", good], dest_dir, policy=ErrorPolicy.CONTINUE)

        assert [r.path for r in report.failed] == [tmp_path / "missing.txt"]
        assert (dest_dir / "good.txt").read_text() == "good"
        assert report.bytes_copied == 4
