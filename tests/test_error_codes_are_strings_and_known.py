"""Test that error codes are strings, known, and mapped to exit codes."""
from __future__ import annotations

import pytest

from txtfile_reader.errors import (
    ERROR_TO_EXIT_CODE,
    KNOWN_ERROR_CODES,
    EmptyResultSet,
    ExitCode,
    FileUnavailableAtReadTime,
    InvalidConfig,
    MissingPathSpecification,
    PathNotFound,
    PermissionDenied,
    ReaderError,
)

ALL_ERRORS = [
    MissingPathSpecification(),
    PathNotFound("/does/not/exist"),
    PermissionDenied("/locked"),
    EmptyResultSet(["/data/empty"]),
    FileUnavailableAtReadTime("/data/gone.txt", "No such file or directory"),
    InvalidConfig("bad delimiter", key="field_delimiter"),
]


@pytest.mark.parametrize("error", ALL_ERRORS, ids=lambda e: type(e).__name__)
def test_error_code_is_known_and_mapped(error: ReaderError) -> None:
    assert isinstance(error.code, str)
    assert error.code in KNOWN_ERROR_CODES
    assert error.code in ERROR_TO_EXIT_CODE
    assert error.exit_code not in {ExitCode.SUCCESS, ExitCode.GENERAL_FAILED}


def test_exit_codes_are_distinct() -> None:
    codes = [error.exit_code for error in ALL_ERRORS]
    assert len(codes) == len(set(codes))


def test_to_dict_carries_path_and_hint() -> None:
    record = PathNotFound("/does/not/exist").to_dict()
    assert record["code"] == "path_not_found"
    assert record["path"] == "/does/not/exist"
    assert "hint" in record


def test_file_unavailable_names_the_file() -> None:
    error = FileUnavailableAtReadTime("/data/gone.txt", "No such file or directory")
    assert "/data/gone.txt" in str(error)
    assert error.path == "/data/gone.txt"
