# SPDX-License-Identifier: MIT
"""Version comparison and sorting helpers.

Ordering rules:
- Numeric segments compare numerically, trailing zeros are insignificant
- A release is higher than any pre-release of the same segments
- Pre-release identifiers compare as strings (``1.0.0-10 < 1.0.0-9``)
- Build metadata is ignored
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any, Union

from .version import Version, parse


def _as_version(version: Union[str, Version]) -> Version:
    return parse(version) if isinstance(version, str) else version


def compare(version1: Version, version2: Version) -> int:
    """Compare two versions.

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2
    """
    return version1.compare(version2)


def equal(version1: Version, version2: Version) -> bool:
    """Return True if both versions have the same precedence."""
    return compare(version1, version2) == 0


def greater_than(version1: Version, version2: Version) -> bool:
    """Return True if version1 is higher than version2."""
    return compare(version1, version2) > 0


def less_than(version1: Version, version2: Version) -> bool:
    """Return True if version1 is lower than version2."""
    return compare(version1, version2) < 0


def greater_than_or_equal(version1: Version, version2: Version) -> bool:
    """Return True if version1 is not lower than version2."""
    return compare(version1, version2) >= 0


def less_than_or_equal(version1: Version, version2: Version) -> bool:
    """Return True if version1 is not higher than version2."""
    return compare(version1, version2) <= 0


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions given as strings or Version objects.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0", "1.0.0")
        0
        >>> compare_versions("1.0.0-beta", "1.0.0")
        -1
        >>> compare_versions("1.0.1", "1.0")
        1
    """
    return compare(_as_version(version1), _as_version(version2))


_VersionKey = cmp_to_key(compare)


def version_key(version: Union[str, Version]) -> Any:
    """Return a sort key for a version, suitable for sorted() and max().

    Examples:
        >>> sorted(["1.0.0", "2.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0']
    """
    return _VersionKey(_as_version(version))


def sort_versions(
    versions: Iterable[Union[str, Version]], reverse: bool = False
) -> list[Version]:
    """Parse and sort versions, lowest first unless ``reverse`` is set.

    Raises:
        InvalidVersionError: If any version string is invalid
    """
    return sorted((_as_version(v) for v in versions), reverse=reverse)
