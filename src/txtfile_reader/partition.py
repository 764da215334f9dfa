"""Split a resolved file list into contiguous groups for parallel readers."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from .logging_utils import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def group_sizes(total: int, advice: int) -> List[int]:
    """Sizes of the groups :func:`split_files` produces for ``total`` items.

    ``chunk = max(1, total // advice)``; at most ``advice`` groups (never more
    than ``total``) of ``chunk`` items each, the last group absorbing the rest.
    A non-positive ``advice`` yields one group per item.

    >>> group_sizes(10, 3)
    [3, 3, 4]
    >>> group_sizes(5, 100)
    [1, 1, 1, 1, 1]
    """
    if total <= 0:
        raise ValueError("Cannot split an empty file list")
    if advice <= 0:
        return [1] * total

    chunk = max(1, total // advice)
    count = min(advice, total)
    sizes = [chunk] * (count - 1)
    sizes.append(total - chunk * (count - 1))
    return sizes


def split_files(files: Sequence[T], advice: int) -> List[List[T]]:
    """Split ``files`` into contiguous, non-empty, non-overlapping groups.

    Input order is kept inside and across groups. Every group is a new list.
    """
    sizes = group_sizes(len(files), advice)
    groups: List[List[T]] = []
    begin = 0
    for size in sizes:
        groups.append(list(files[begin : begin + size]))
        begin += size

    logger.debug(
        "Split %d file(s) into %d group(s) (advice=%d, sizes=%s)",
        len(files),
        len(groups),
        advice,
        sizes,
    )
    return groups
