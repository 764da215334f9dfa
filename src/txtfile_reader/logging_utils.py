"""Logging utilities for the text file reader."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional


_LOGGER_SETUP = False
_ROOT_LOGGER_NAME = "txtfile_reader"
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Setup root logger with console and optional file handlers.

    Parameters
    ----------
    verbose: bool
        If True, set level to DEBUG; otherwise INFO.
    log_file: Optional[Path]
        If provided, add a file handler to write logs to this path.

    Returns
    -------
    logging.Logger
        Root logger instance.
    """
    global _LOGGER_SETUP

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Clear existing handlers, including the fallback one from get_logger
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # File always gets DEBUG level
        file_handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT))
        root_logger.addHandler(file_handler)
        # The file handler needs DEBUG records even when the console is at INFO
        root_logger.setLevel(logging.DEBUG)

    root_logger.propagate = False
    _LOGGER_SETUP = True
    return root_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package root logger.

    Module names such as ``txtfile_reader.resolver`` are used as-is; other
    names become children of the root logger. Before :func:`setup_logging`
    runs, the root logger gets a basic console handler at INFO level.
    """
    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if not _LOGGER_SETUP and not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT))
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO)
        root_logger.propagate = False

    if name is None:
        return root_logger

    if name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(name)

    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
