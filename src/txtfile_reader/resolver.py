"""Resolve path specifications into a deduplicated list of readable files.

Each specification is handled as:

- Literal file: included when it is a regular file.
- Literal directory: walked recursively, every regular file is included.
- Wildcard pattern: the literal directory before the wildcard is walked and
  files whose absolute path matches the pattern are included.

All specifications of one call share a single accumulator set, so a file
selected by several overlapping specifications appears once.
"""

from __future__ import annotations

import os
from typing import Dict, List, Sequence, Set

from .errors import MissingPathSpecification, PathNotFound, PermissionDenied
from .logging_utils import get_logger
from .pattern import PathPattern, compile_pattern
from .traverse import walk

logger = get_logger(__name__)


class PathResolver:
    """Runs one or more resolution passes over the filesystem.

    Compiled patterns are cached per raw specification for the lifetime of
    the resolver; the file set itself is created fresh on every call.
    """

    def __init__(self) -> None:
        self._patterns: Dict[str, PathPattern] = {}

    def pattern_for(self, spec: str) -> PathPattern:
        if spec not in self._patterns:
            self._patterns[spec] = compile_pattern(spec)
        return self._patterns[spec]

    def resolve(self, specs: Sequence[str]) -> List[str]:
        """Resolve ``specs`` into a sorted list of absolute file paths.

        An empty result is returned as-is; rejecting it is up to the caller.

        Raises
        ------
        MissingPathSpecification
            If ``specs`` holds no non-blank specification.
        PathNotFound
            If a traversal root does not exist. ``.path`` names the root.
        PermissionDenied
            If a directory cannot be listed. ``.path`` names the directory.
        """
        cleaned = [spec for spec in specs if spec and spec.strip()]
        if not cleaned:
            logger.error("No path specification supplied")
            raise MissingPathSpecification()

        accumulator: Set[str] = set()
        for spec in cleaned:
            pattern = self.pattern_for(spec)
            logger.info("Resolving [%s] from root [%s]", spec, pattern.root)
            self._check_root(pattern.root)
            walk(pattern.root, pattern, accumulator)

        files = sorted(accumulator)
        logger.info("Resolved %d file(s) from %d path specification(s)", len(files), len(cleaned))
        return files

    @staticmethod
    def _check_root(root: str) -> None:
        if not os.path.exists(root):
            logger.error("Path does not exist: [%s]", root)
            raise PathNotFound(root)
        if os.path.isdir(root) and not os.access(root, os.R_OK | os.X_OK):
            logger.error("Permission denied while listing directory: [%s]", root)
            raise PermissionDenied(root)


def resolve_paths(specs: Sequence[str]) -> List[str]:
    """Resolve ``specs`` with a fresh :class:`PathResolver`."""
    return PathResolver().resolve(specs)
