# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Pattern-driven ordering of sibling values.

A pattern is an ordered sequence of priority tokens. Siblings are ordered
by three rules, applied in turn:

1. Two values that both appear in the pattern follow their pattern index
   (first occurrence wins when the pattern holds duplicates).
2. A value in the pattern sorts before a value that is not.
3. Values outside the pattern sort case-insensitively; values equal under
   case folding put the upper-case variant first ('A' before 'a').

Example:
    >>> sort_values(['c', 'a', 'B', 'b'], 'B')
    ['B', 'a', 'b', 'c']
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, Sequence


def as_pattern(pattern: Iterable[Any] | None) -> list[Any]:
    """Normalize a pattern argument to a fresh list.

    Strings are split into their characters, None becomes an empty pattern.
    """
    if pattern is None:
        return []
    return list(pattern)


def _index_in(pattern: Sequence[Any], value: Any) -> int | None:
    try:
        return pattern.index(value)
    except ValueError:
        return None


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _compare_unpatterned(a: Any, b: Any) -> int:
    if not (isinstance(a, str) and isinstance(b, str)):
        return _cmp(a, b)
    folded = _cmp(a.casefold(), b.casefold())
    if folded:
        return folded
    # Same letters: the first position whose case differs decides
    for ca, cb in zip(a, b):
        if ca == cb:
            continue
        if ca.isupper() and not cb.isupper():
            return -1
        if cb.isupper() and not ca.isupper():
            return 1
        return _cmp(ca, cb)
    return _cmp(len(a), len(b))


def compare_values(pattern: Sequence[Any], a: Any, b: Any) -> int:
    """Compare two sibling values under a pattern.

    Args:
        pattern: Ordered priority tokens, possibly empty.
        a: First value.
        b: Second value.

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if equal.
    """
    ia = _index_in(pattern, a)
    ib = _index_in(pattern, b)
    if ia is not None and ib is not None:
        return _cmp(ia, ib)
    if ia is not None:
        return -1
    if ib is not None:
        return 1
    return _compare_unpatterned(a, b)


def sort_values(values: Iterable[Any], pattern: Iterable[Any] | None = None) -> list[Any]:
    """Return values sorted by compare_values under pattern."""
    pattern = as_pattern(pattern)
    return sorted(values, key=cmp_to_key(lambda a, b: compare_values(pattern, a, b)))


def sort_nodes(nodes: Iterable[Any], pattern: Iterable[Any] | None = None) -> list[Any]:
    """Return nodes sorted by their value under pattern (stable)."""
    pattern = as_pattern(pattern)
    return sorted(
        nodes,
        key=cmp_to_key(lambda a, b: compare_values(pattern, a.value, b.value)),
    )
