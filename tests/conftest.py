"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so no user config leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a small source tree and return its root directory.

    Layout::

        a/
            file1.txt        "one"
            sub/
                file2.txt    "two"
                deeper/
                    file3.txt  "three"
    """
    root = tmp_path / "a"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "file1.txt").write_text("one")
    (root / "sub" / "file2.txt").write_text("two")
    (root / "sub" / "deeper" / "file3.txt").write_text("three")
    return root


@pytest.fixture
def dest_dir(tmp_path: Path) -> Path:
    """Create an empty destination directory."""
    dest = tmp_path / "d"
    dest.mkdir()
    return dest
