"""Reader task: stream one group of files through a record decoder into a sink.

Decoding file contents (compression, character encoding, field splitting) and
delivering records downstream are the job of the :class:`RecordDecoder` and
:class:`RecordSink` collaborators supplied by the host.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, BinaryIO, Callable, List, Optional, Protocol, Sequence

from .errors import FileUnavailableAtReadTime
from .job import TaskConfig
from .logging_utils import get_logger
from .params import ReaderParams

logger = get_logger(__name__)


class RecordSink(Protocol):
    def send(self, record: Any) -> None:
        ...

    def flush(self) -> None:
        ...


class RecordDecoder(Protocol):
    def decode(self, stream: BinaryIO, file_name: str, params: ReaderParams, sink: RecordSink) -> None:
        ...


def _open_source(file_name: str) -> BinaryIO:
    try:
        return open(file_name, "rb")
    except OSError as exc:
        logger.error("Cannot open file to read: [%s]", file_name)
        raise FileUnavailableAtReadTime(file_name, exc.strerror) from exc


def read_group(task: TaskConfig, decoder: RecordDecoder, sink: RecordSink) -> int:
    """Read every file of ``task`` in order and return how many were read.

    The sink is flushed after each file. The first file that cannot be opened
    stops the task with :class:`FileUnavailableAtReadTime`; nothing is retried
    or skipped.
    """
    logger.debug("Task %d: start reading %d source file(s)", task.index, len(task.files))
    for file_name in task.files:
        logger.info("Reading file: [%s]", file_name)
        with _open_source(file_name) as stream:
            decoder.decode(stream, file_name, task.params, sink)
        sink.flush()
    logger.debug("Task %d: end reading source files", task.index)
    return len(task.files)


def run_tasks(
    tasks: Sequence[TaskConfig],
    decoder_factory: Callable[[TaskConfig], RecordDecoder],
    sink_factory: Callable[[TaskConfig], RecordSink],
    max_workers: Optional[int] = None,
) -> List[int]:
    """Run each task on its own worker thread and return per-task file counts.

    Tasks share nothing but their read-only params. The first failure is
    re-raised after the remaining tasks have finished.
    """
    if not tasks:
        return []
    workers = max_workers or min(len(tasks), 32, (os.cpu_count() or 4))
    counts: List[int] = [0] * len(tasks)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(read_group, task, decoder_factory(task), sink_factory(task)): position
            for position, task in enumerate(tasks)
        }
        first_error: Optional[BaseException] = None
        for future in as_completed(futures):
            error = future.exception()
            if error is not None:
                if first_error is None:
                    first_error = error
                continue
            counts[futures[future]] = future.result()

    if first_error is not None:
        raise first_error
    return counts
