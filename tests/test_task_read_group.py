"""Reader tasks stream their files through the decoder and sink."""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, BinaryIO, List

import pytest

from txtfile_reader.errors import ErrorCode, FileUnavailableAtReadTime
from txtfile_reader.job import ReaderJob, TaskConfig
from txtfile_reader.params import ReaderParams
from txtfile_reader.task import read_group, run_tasks
from tests.conftest import make_files


class LineDecoder:
    """Test decoder emitting (file name, line) records."""

    def decode(self, stream: BinaryIO, file_name: str, params: ReaderParams, sink: Any) -> None:
        for line in stream.read().decode(params.encoding).splitlines():
            sink.send((Path(file_name).name, line))


class ListSink:
    def __init__(self) -> None:
        self.records: List[Any] = []
        self.events: List[str] = []

    def send(self, record: Any) -> None:
        self.records.append(record)
        self.events.append("send")

    def flush(self) -> None:
        self.events.append("flush")


def test_files_read_in_order_with_flush_after_each(tmp_path: Path) -> None:
    first, second = make_files(tmp_path, ["a.txt", "b.txt"], content="1\n2\n")
    sink = ListSink()
    task = TaskConfig(index=0, files=[str(second), str(first)])

    count = read_group(task, LineDecoder(), sink)

    assert count == 2
    assert sink.records == [("b.txt", "1"), ("b.txt", "2"), ("a.txt", "1"), ("a.txt", "2")]
    assert sink.events == ["send", "send", "flush", "send", "send", "flush"]


def test_file_removed_after_resolution_stops_the_task(tmp_path: Path) -> None:
    kept, removed = make_files(tmp_path, ["kept.txt", "removed.txt"])
    tasks = ReaderJob(ReaderParams(path=[str(tmp_path)])).split(1)
    removed.unlink()
    sink = ListSink()

    with pytest.raises(FileUnavailableAtReadTime) as excinfo:
        read_group(tasks[0], LineDecoder(), sink)

    assert excinfo.value.path == str(removed)
    assert excinfo.value.code == ErrorCode.FILE_UNAVAILABLE_AT_READ_TIME
    # kept.txt sorts first and was read before the failure
    assert sink.records == [("kept.txt", "x")]


def test_run_tasks_reads_every_group_on_worker_threads(data_tree: Path) -> None:
    tasks = ReaderJob(ReaderParams(path=[str(data_tree)])).split(3)
    sinks = {}
    thread_names = set()
    lock = threading.Lock()

    def make_sink(task: TaskConfig) -> ListSink:
        sinks[task.index] = ListSink()
        return sinks[task.index]

    class RecordingDecoder(LineDecoder):
        def decode(self, stream: BinaryIO, file_name: str, params: ReaderParams, sink: Any) -> None:
            with lock:
                thread_names.add(threading.current_thread().name)
            super().decode(stream, file_name, params, sink)

    counts = run_tasks(tasks, lambda task: RecordingDecoder(), make_sink)

    assert counts == [len(t.files) for t in tasks]
    assert sum(len(s.records) for s in sinks.values()) == 7
    assert threading.main_thread().name not in thread_names


def test_run_tasks_reraises_failure(tmp_path: Path) -> None:
    make_files(tmp_path, ["a.txt", "b.txt"])
    tasks = ReaderJob(ReaderParams(path=[str(tmp_path)])).split(2)
    (tmp_path / "b.txt").unlink()

    with pytest.raises(FileUnavailableAtReadTime):
        run_tasks(tasks, lambda task: LineDecoder(), lambda task: ListSink(), max_workers=2)


def test_run_tasks_with_no_tasks() -> None:
    assert run_tasks([], lambda task: LineDecoder(), lambda task: ListSink()) == []
