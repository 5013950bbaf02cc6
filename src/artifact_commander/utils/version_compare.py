"""Numeric-aware version string comparison.

This is deliberately not semantic-versioning precedence: a version is split
into maximal digit runs and non-digit runs, digit runs are compared as
integers and everything else as plain strings.  Pre-release suffixes such as
``-SNAPSHOT`` or ``-rc1`` are just more string segments.
"""

from __future__ import annotations

import functools
import re

_SEGMENT_RE = re.compile(r"[0-9]+|[^0-9]+")


def _is_number(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def split_version(v: str) -> list[str]:
    """Split a version string into digit and non-digit runs."""
    return _SEGMENT_RE.findall(v)


def compare_versions(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``."""
    left = split_version(a)
    right = split_version(b)
    for x, y in zip(left, right):
        if _is_number(x) and _is_number(y):
            nx, ny = int(x), int(y)
            if nx != ny:
                return -1 if nx < ny else 1
            continue
        if x != y:
            return -1 if x < y else 1
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    return 0


version_key = functools.cmp_to_key(compare_versions)


def is_newer(current: str, candidate: str) -> bool:
    """Return True if candidate sorts strictly after current."""
    return compare_versions(candidate, current) > 0
