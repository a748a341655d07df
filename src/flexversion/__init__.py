# SPDX-License-Identifier: MIT
"""Version parsing and comparison.

This package parses dotted versions of any length (``1``, ``1.2.3``,
``v1.2.3.4-beta.1+build.5``) and orders them. Missing segments count as
zeros and build metadata is ignored when comparing.

Example:
    >>> from flexversion import parse, compare_versions, sort_versions
    >>>
    >>> version = parse("v1.2-beta.2+build.456")
    >>> version.segments
    (1, 2, 0)
    >>> version.prerelease
    'beta.2'
    >>>
    >>> parse("1.0") == parse("1.0.0")
    True
    >>> compare_versions("1.0.0-beta", "1.0.0")
    -1
"""

__version__ = "0.1.0"

from .version import (
    Version,
    parse,
    must_parse,
    is_valid_version,
    InvalidVersionError,
    MalformedVersionError,
    InvalidSegmentError,
    VERSION_PATTERN,
    VERSION_PATTERN_RAW,
)
from .compare import (
    compare,
    equal,
    greater_than,
    less_than,
    greater_than_or_equal,
    less_than_or_equal,
    compare_versions,
    version_key,
    sort_versions,
)

__all__ = [
    # Version parsing
    "Version",
    "parse",
    "must_parse",
    "is_valid_version",
    "InvalidVersionError",
    "MalformedVersionError",
    "InvalidSegmentError",
    "VERSION_PATTERN",
    "VERSION_PATTERN_RAW",
    # Version comparison
    "compare",
    "equal",
    "greater_than",
    "less_than",
    "greater_than_or_equal",
    "less_than_or_equal",
    "compare_versions",
    "version_key",
    "sort_versions",
]
