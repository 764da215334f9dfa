"""Directory traversal collecting the files selected by one path specification."""

from __future__ import annotations

import os
from typing import FrozenSet, List, Set, Tuple

from .errors import PathNotFound, PermissionDenied
from .logging_utils import get_logger
from .pattern import PathPattern

logger = get_logger(__name__)


def _list_directory(directory: str) -> List[str]:
    # os.access first: an unreadable directory must never look like an empty one
    if not os.access(directory, os.R_OK | os.X_OK):
        logger.error("Permission denied while listing directory: [%s]", directory)
        raise PermissionDenied(directory)
    try:
        with os.scandir(directory) as entries:
            return [entry.path for entry in entries]
    except PermissionError as exc:
        logger.error("Permission denied while listing directory: [%s]", directory)
        raise PermissionDenied(directory) from exc
    except FileNotFoundError as exc:
        logger.error("Directory disappeared during traversal: [%s]", directory)
        raise PathNotFound(directory) from exc


def walk(root: str, pattern: PathPattern, accumulator: Set[str]) -> None:
    """Add every regular file under ``root`` matching ``pattern`` to ``accumulator``.

    ``root`` may name a file or a directory. Directories are walked with an
    explicit stack; symlinked directories are followed, and a directory that
    is already one of its own ancestors (by device and inode) is not entered
    again. Two links to the same directory are both walked. Paths are added in
    absolute form.

    Raises
    ------
    PathNotFound
        If ``root`` does not exist, or a directory below it vanishes mid-walk.
    PermissionDenied
        If ``root`` or any directory below it cannot be listed.
    """
    start = os.path.abspath(root)
    if not os.path.exists(start):
        logger.error("Path does not exist: [%s]", root)
        raise PathNotFound(root)

    stack: List[Tuple[str, FrozenSet[Tuple[int, int]]]] = [(start, frozenset())]
    while stack:
        current, ancestors = stack.pop()
        if os.path.isdir(current):
            try:
                stat = os.stat(current)
            except FileNotFoundError as exc:
                logger.error("Directory disappeared during traversal: [%s]", current)
                raise PathNotFound(current) from exc
            key = (stat.st_dev, stat.st_ino)
            if key in ancestors:
                logger.debug("Directory loops back to an ancestor, skipping: [%s]", current)
                continue
            branch = ancestors | {key}
            # Reverse order so that popping yields children in name order
            stack.extend((child, branch) for child in sorted(_list_directory(current), reverse=True))
        elif os.path.isfile(current):
            if pattern.matches(current):
                accumulator.add(current)
                logger.debug("Add file [%s] as a candidate to be read", current)
        else:
            logger.debug("Skipping entry that is not a regular file: [%s]", current)
