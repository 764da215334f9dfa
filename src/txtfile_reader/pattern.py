"""Wildcard path specification compiler.

A path specification is a literal file, a literal directory or a pattern using
``*`` and ``?``. Wildcards are expected in the final path segment(s) only: the
text before the last separator preceding the first wildcard is the literal
traversal root, and only that directory is walked.

``*`` matches any run of characters inside one path segment and ``?`` matches
exactly one character inside one segment. The compiled regex is matched
against the whole absolute path of each candidate file.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional

from .constants import WILDCARD_CHARS

_SEPARATORS = frozenset(sep for sep in (os.sep, os.altsep) if sep)
_SEPARATOR_CLASS = re.escape("".join(sorted(_SEPARATORS)))
_SEPARATOR_CHAR = "[" + _SEPARATOR_CLASS + "]"
_SEGMENT_CHAR = "[^" + _SEPARATOR_CLASS + "]"


@dataclass(frozen=True)
class PathPattern:
    """Compiled form of one raw path specification."""

    raw: str
    is_wildcard: bool
    root: str
    regex: Optional[re.Pattern[str]] = None

    def matches(self, abs_path: str) -> bool:
        """Return True when ``abs_path`` is selected by this specification."""
        if self.regex is None:
            return True
        return self.regex.fullmatch(abs_path) is not None


def first_wildcard_index(spec: str) -> int:
    """Index of the first ``*`` or ``?`` in ``spec``, or -1."""
    for index, char in enumerate(spec):
        if char in WILDCARD_CHARS:
            return index
    return -1


def _last_separator_before(spec: str, end: int) -> int:
    return max(spec.rfind(sep, 0, end) for sep in _SEPARATORS)


def _translate(text: str) -> str:
    parts = []
    for char in text:
        if char == "*":
            parts.append(_SEGMENT_CHAR + "*")
        elif char == "?":
            parts.append(_SEGMENT_CHAR)
        elif char in _SEPARATORS:
            parts.append(_SEPARATOR_CHAR)
        else:
            parts.append(re.escape(char))
    return "".join(parts)


def compile_pattern(spec: str) -> PathPattern:
    """Compile ``spec`` into its traversal root and matcher.

    >>> compile_pattern("/data/in/*.csv").root
    '/data/in/'
    >>> compile_pattern("/data/in/a.csv").is_wildcard
    False
    """
    wildcard_at = first_wildcard_index(spec)
    if wildcard_at < 0:
        return PathPattern(raw=spec, is_wildcard=False, root=spec)

    cut = _last_separator_before(spec, wildcard_at)
    if cut < 0:
        root = os.curdir + os.sep
        suffix = spec
    else:
        root = spec[: cut + 1]
        suffix = spec[cut + 1 :]

    abs_root = os.path.join(os.path.abspath(root), "")
    regex = re.compile(re.escape(abs_root) + _translate(suffix))
    return PathPattern(raw=spec, is_wildcard=True, root=root, regex=regex)
