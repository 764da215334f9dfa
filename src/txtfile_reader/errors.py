"""Unified error model and error code constants for the text file reader."""
from __future__ import annotations

from typing import Any, Dict, List, Optional


# Error codes (string constants)
class ErrorCode:
    """Error code constants for structured error reporting."""

    # Path resolution errors
    MISSING_PATH_SPECIFICATION = "missing_path_specification"
    PATH_NOT_FOUND = "path_not_found"
    PERMISSION_DENIED = "permission_denied"

    # Job errors
    EMPTY_RESULT_SET = "empty_result_set"
    INVALID_CONFIG = "invalid_config"

    # Read errors
    FILE_UNAVAILABLE_AT_READ_TIME = "file_unavailable_at_read_time"

    # Internal errors
    INTERNAL_ERROR = "internal_error"


KNOWN_ERROR_CODES = frozenset(
    value for key, value in vars(ErrorCode).items() if not key.startswith("_")
)


# Exit codes (int constants)
class ExitCode:
    """Exit code constants for the CLI."""

    SUCCESS = 0
    GENERAL_FAILED = 1
    MISSING_PATH_SPECIFICATION = 2
    INVALID_CONFIG = 3
    PATH_NOT_FOUND = 10
    PERMISSION_DENIED = 11
    EMPTY_RESULT_SET = 12
    FILE_UNAVAILABLE_AT_READ_TIME = 20
    INTERNAL_ERROR = 99


# Mapping from error code to exit code
ERROR_TO_EXIT_CODE: Dict[str, int] = {
    ErrorCode.MISSING_PATH_SPECIFICATION: ExitCode.MISSING_PATH_SPECIFICATION,
    ErrorCode.PATH_NOT_FOUND: ExitCode.PATH_NOT_FOUND,
    ErrorCode.PERMISSION_DENIED: ExitCode.PERMISSION_DENIED,
    ErrorCode.EMPTY_RESULT_SET: ExitCode.EMPTY_RESULT_SET,
    ErrorCode.INVALID_CONFIG: ExitCode.INVALID_CONFIG,
    ErrorCode.FILE_UNAVAILABLE_AT_READ_TIME: ExitCode.FILE_UNAVAILABLE_AT_READ_TIME,
    ErrorCode.INTERNAL_ERROR: ExitCode.INTERNAL_ERROR,
}


class ReaderError(Exception):
    """Base class for every failure surfaced by resolution, splitting and reading."""

    code = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        hint: Optional[str] = None,
        detail: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.hint = hint
        self.detail = detail

    @property
    def exit_code(self) -> int:
        return ERROR_TO_EXIT_CODE.get(self.code, ExitCode.GENERAL_FAILED)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.path is not None:
            result["path"] = self.path
        if self.hint is not None:
            result["hint"] = self.hint
        if self.detail is not None:
            result["detail"] = self.detail
        return result


class MissingPathSpecification(ReaderError):
    """No path specification was supplied."""

    code = ErrorCode.MISSING_PATH_SPECIFICATION

    def __init__(self, message: str = "At least one path specification is required") -> None:
        super().__init__(message, hint="Set 'path' in the job config or pass PATH arguments.")


class PathNotFound(ReaderError):
    """A traversal root does not exist."""

    code = ErrorCode.PATH_NOT_FOUND

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Path does not exist: [{path}]",
            path=path,
            hint="Check the path and try again.",
        )


class PermissionDenied(ReaderError):
    """A directory cannot be listed or a file cannot be opened due to access rules."""

    code = ErrorCode.PERMISSION_DENIED

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Permission denied while listing: [{path}]",
            path=path,
            hint="Grant read and execute permission on the directory.",
        )


class EmptyResultSet(ReaderError):
    """Resolution produced zero files."""

    code = ErrorCode.EMPTY_RESULT_SET

    def __init__(self, specs: List[str]) -> None:
        super().__init__(
            f"No files found to read, check the configured path: {specs}",
            hint="An empty directory cannot be read; name an empty file explicitly instead.",
            detail={"path": list(specs)},
        )


class FileUnavailableAtReadTime(ReaderError):
    """A resolved file could not be opened while streaming its group."""

    code = ErrorCode.FILE_UNAVAILABLE_AT_READ_TIME

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = f"Cannot open file to read: [{path}]"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, path=path)


class InvalidConfig(ReaderError):
    """The job configuration failed schema or semantic validation."""

    code = ErrorCode.INVALID_CONFIG

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        super().__init__(message, detail={"key": key} if key is not None else None)
        self.key = key
