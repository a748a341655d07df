# SPDX-License-Identifier: MIT
"""Ordering rules for numeric segments and pre-release identifiers.

Both functions return -1, 0 or 1 in the usual three-way sense.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _all_zero(segments: Sequence[int]) -> bool:
    return all(segment == 0 for segment in segments)


def _is_integer(identifier: str) -> bool:
    """Return True if the identifier parses as a signed 64-bit integer."""
    if _INTEGER_PATTERN.fullmatch(identifier) is None:
        return False
    # Anything longer than 19 significant digits is outside int64
    if len(identifier.lstrip("+-").lstrip("0")) > 19:
        return False
    return _INT64_MIN <= int(identifier) <= _INT64_MAX


def compare_segments(left: Sequence[int], right: Sequence[int]) -> int:
    """Compare two numeric segment sequences.

    Sequences of different lengths are compared as if the shorter one were
    padded with zeros, so ``1.2.0`` and ``1.2.0.0`` are equivalent.
    """
    if tuple(left) == tuple(right):
        return 0

    for i in range(max(len(left), len(right))):
        if i >= len(left):
            # Left is exhausted, right wins unless the remainder is all zeros
            return 0 if _all_zero(right[i:]) else -1
        if i >= len(right):
            return 0 if _all_zero(left[i:]) else 1

        lhs, rhs = left[i], right[i]
        if lhs != rhs:
            return -1 if lhs < rhs else 1

    return 0


def compare_prerelease_part(left: str, right: str) -> int:
    """Compare one pre-release identifier from each side.

    An empty identifier stands for a position the shorter pre-release does
    not have. It sorts before an integer identifier and after anything else.
    Two non-empty identifiers compare as plain strings, so ``"10" < "9"``.
    """
    if left == right:
        return 0

    if not left:
        return -1 if _is_integer(right) else 1
    if not right:
        return 1 if _is_integer(left) else -1

    return 1 if left > right else -1


def compare_prereleases(left: str, right: str) -> int:
    """Compare two non-empty pre-release strings identifier by identifier."""
    if left == right:
        return 0

    left_parts = left.split(".")
    right_parts = right.split(".")

    for i in range(max(len(left_parts), len(right_parts))):
        left_part = left_parts[i] if i < len(left_parts) else ""
        right_part = right_parts[i] if i < len(right_parts) else ""

        result = compare_prerelease_part(left_part, right_part)
        if result != 0:
            return result

    return 0
