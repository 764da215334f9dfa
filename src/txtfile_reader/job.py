"""Job-level prepare and split phases.

``prepare`` resolves the configured path specifications once; ``split``
divides the resolved files into one :class:`TaskConfig` per reader task.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .errors import EmptyResultSet
from .logging_utils import get_logger
from .params import ReaderParams
from .partition import split_files
from .resolver import PathResolver

logger = get_logger(__name__)


@dataclass
class TaskConfig:
    """Configuration handed to one reader task: its group of files plus the job params."""

    index: int
    files: List[str]
    params: ReaderParams = field(default_factory=ReaderParams)


class ReaderJob:
    def __init__(self, params: ReaderParams, resolver: Optional[PathResolver] = None) -> None:
        self.params = params
        self._resolver = resolver or PathResolver()
        self._source_files: Optional[List[str]] = None

    @property
    def source_files(self) -> List[str]:
        if self._source_files is None:
            return self.prepare()
        return list(self._source_files)

    def prepare(self) -> List[str]:
        """Resolve the configured paths; see :meth:`PathResolver.resolve` for errors."""
        logger.debug("prepare() begin...")
        self._source_files = self._resolver.resolve(self.params.path)
        logger.info("Number of files to read: [%d]", len(self._source_files))
        return list(self._source_files)

    def split(self, advice: int) -> List[TaskConfig]:
        """Partition the prepared files into task configs.

        Raises
        ------
        EmptyResultSet
            If resolution found no file to read.
        """
        logger.debug("split() begin...")
        files = self.source_files
        if not files:
            logger.error("No files found to read, check the configured path: %s", self.params.path)
            raise EmptyResultSet(self.params.path)

        tasks = [
            TaskConfig(index=index, files=group, params=self.params)
            for index, group in enumerate(split_files(files, advice))
        ]
        logger.debug("split() ok and end, %d task(s)", len(tasks))
        return tasks
