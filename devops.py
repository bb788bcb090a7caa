"""DevOps tasks for unixfs.

Usage: uv run devops.py <task>
Tasks: fmt, test, clean
"""

import subprocess
import sys
from pathlib import Path


def _run(commands: list[list[str]]) -> None:
    """Execute a sequence of shell commands, exiting on first failure."""
    for cmd in commands:
        try:
            subprocess.run(cmd, check=True)  # nosec: B603, B607
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def format_code() -> None:
    """Format the codebase with Ruff."""
    _run(
        [
            ["ruff", "format", "."],
            ["ruff", "check", "--fix", "."],
        ]
    )


def test() -> None:
    """Run tests with PyTest."""
    _run([["uv", "run", "pytest", "-q"]])


def clean() -> None:
    """Remove caches and build artifacts, using unixfs itself."""
    from unixfs import ErrorPolicy, rm

    root = Path(__file__).parent
    targets = [
        *root.rglob("__pycache__"),
        root / ".pytest_cache",
        root / ".ruff_cache",
        root / "dist",
        root / "build",
    ]
    existing = [t for t in targets if t.exists()]
    if not existing:
        print("Nothing to clean.")
        return

    report = rm(existing, policy=ErrorPolicy.CONTINUE)
    for result in report.failed:
        print(f"Could not remove {result.path}: {result.error}", file=sys.stderr)
    print(f"Removed {len(report.succeeded)} path(s).")


TASKS = {"fmt": format_code, "test": test, "clean": clean}


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    TASKS[sys.argv[1]]()
