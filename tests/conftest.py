"""Pytest fixtures and helpers for txtfile-reader tests."""
from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Iterable, Iterator, List

import pytest


def make_files(root: Path, relpaths: Iterable[str], content: str = "x\n") -> List[Path]:
    """Create files (and parent directories) below ``root``.

    Parameters
    ----------
    root: Path
        Directory the relative paths are anchored at.
    relpaths: Iterable[str]
        POSIX-style relative paths; a trailing ``/`` creates an empty directory.
    content: str
        Text written to every file.

    Returns
    -------
    List[Path]
        Paths of the created files (directories excluded).
    """
    created: List[Path] = []
    for relpath in relpaths:
        target = root / relpath
        if relpath.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        created.append(target)
    return created


def require_permission_checks() -> None:
    """Skip test when running as root, where mode bits do not restrict access."""
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("permission checks are bypassed for root")


def run_cli(args: list[str], timeout_sec: int = 60) -> subprocess.CompletedProcess:
    """Run the CLI module in a subprocess and return CompletedProcess.

    Parameters
    ----------
    args: list[str]
        CLI arguments (without 'txtfile-reader')
    timeout_sec: int
        Timeout in seconds
    """
    cmd = [sys.executable, "-m", "txtfile_reader.cli"] + args
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        timeout=timeout_sec,
    )


@pytest.fixture
def data_tree(tmp_path: Path) -> Path:
    """A small input tree used by resolver tests.

    Layout::

        data/a.txt
        data/b.txt
        data/c.log
        data/1.log
        data/12.log
        data/sub/z.txt
        data/sub/deeper/y.txt
        data/empty/
    """
    root = tmp_path / "data"
    make_files(
        root,
        [
            "a.txt",
            "b.txt",
            "c.log",
            "1.log",
            "12.log",
            "sub/z.txt",
            "sub/deeper/y.txt",
            "empty/",
        ],
    )
    return root


@pytest.fixture(autouse=True)
def reset_package_logging() -> Iterator[None]:
    """Drop handlers installed by CLI runs so they do not outlive captured streams."""
    yield
    for handler in list(logging.getLogger("txtfile_reader").handlers):
        handler.close()
    logging.getLogger("txtfile_reader").handlers.clear()
