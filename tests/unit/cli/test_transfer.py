"""Unit tests for the cp, mv and extract commands."""

from pathlib import Path

from typer.testing import CliRunner
from unixfs.cli.main import app

runner = CliRunner()


class TestCp:
    """Tests for unixfs cp."""

    def test_copies_tree(self, source_tree: Path, dest_dir: Path) -> None:
        """The tree is mirrored into the destination."""
        result = runner.invoke(app, ["cp", str(source_tree), str(dest_dir)])

        assert result.exit_code == 0
        assert (dest_dir / "a" / "sub" / "file2.txt").read_text() == "two"

    def test_requires_destination(self, source_tree: Path) -> None:
        """A single path is not enough."""
        result = runner.invoke(app, ["cp", str(source_tree)])

        assert result.exit_code == 2
        assert "destination" in result.output

    def test_conflict_fails(self, source_tree: Path, dest_dir: Path) -> None:
        """An existing directory in the destination fails the copy."""
        (dest_dir / "a").mkdir()

        result = runner.invoke(app, ["cp", str(source_tree), str(dest_dir)])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestMv:
    """Tests for unixfs mv."""

    def test_moves_tree(self, source_tree: Path, dest_dir: Path) -> None:
        """Sources are removed after copying."""
        result = runner.invoke(app, ["mv", str(source_tree), str(dest_dir)])

        assert result.exit_code == 0
        assert not source_tree.exists()
        assert (dest_dir / "a" / "file1.txt").read_text() == "one"

    def test_fast_rename_flag(self, source_tree: Path, dest_dir: Path) -> None:
        """--fast-rename moves by rename."""
        result = runner.invoke(app, ["mv", "--fast-rename", str(source_tree), str(dest_dir)])

        assert result.exit_code == 0
        assert not source_tree.exists()
        assert (dest_dir / "a" / "sub" / "deeper" / "file3.txt").exists()


class TestExtract:
    """Tests for unixfs extract."""

    def test_flattens(self, source_tree: Path, dest_dir: Path) -> None:
        """Every file ends up directly in the destination."""
        result = runner.invoke(app, ["extract", str(source_tree), str(dest_dir)])

        assert result.exit_code == 0
        assert sorted(p.name for p in dest_dir.iterdir()) == ["file1.txt", "file2.txt", "file3.txt"]
