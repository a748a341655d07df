# SPDX-License-Identifier: MIT
"""Version parsing and the Version value type.

Accepts dotted numeric versions of any length with an optional leading ``v``,
an optional pre-release and optional build metadata:

- ``1``, ``1.2``, ``1.2.3``, ``1.2.3.4``
- ``v1.2.3-beta.2``
- ``1.2.3+build.5``, ``1.2.3-rc.1+20240101``

Fewer than three numeric segments are padded with zeros, so ``1.2`` is
stored as ``1.2.0``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from . import _precedence

logger = logging.getLogger(__name__)

VERSION_PATTERN_RAW = (
    r"v?(?P<segments>[0-9]+(?:\.[0-9]+)*?)"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<metadata>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)

# Always used with fullmatch; "$" would accept a trailing newline
VERSION_PATTERN = re.compile(VERSION_PATTERN_RAW)

MIN_SEGMENTS = 3
SEGMENT_BITS = 32
MAX_SEGMENT = 2 ** (SEGMENT_BITS - 1) - 1


class InvalidVersionError(Exception):
    """Raised when a version string cannot be parsed."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


class MalformedVersionError(InvalidVersionError):
    """Raised when a version string does not match the version grammar."""

    def __init__(self, version: str, message: str = ""):
        super().__init__(version, message or f"Malformed version: {version}")


class InvalidSegmentError(InvalidVersionError):
    """Raised when a numeric segment cannot be parsed as an integer."""

    def __init__(self, version: str, segment: str, reason: str = ""):
        self.segment = segment
        message = f"Error parsing version {version}: invalid segment {segment!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(version, message)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A parsed version.

    Instances compare by precedence: trailing zero segments are ignored and
    build metadata never takes part in ordering, equality or hashing. Use
    :func:`parse` (or :meth:`Version.parse`) to build one from a string.

    Attributes:
        segments: Numeric segments, zero-padded to at least three entries
        prerelease: Pre-release identifiers after ``-``, or ``""``
        metadata: Build metadata after ``+``, or ``""``
        specificity: Number of numeric segments present before padding
        original: The string this version was parsed from
    """

    segments: tuple[int, ...]
    prerelease: str = ""
    metadata: str = ""
    specificity: int = field(default=0, repr=False)
    original: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        if not self.specificity:
            object.__setattr__(self, "specificity", len(segments))
        if len(segments) < MIN_SEGMENTS:
            segments += (0,) * (MIN_SEGMENTS - len(segments))
        object.__setattr__(self, "segments", segments)

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a version string. See :func:`parse`."""
        return parse(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = ".".join(str(segment) for segment in self.segments)
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.metadata:
            version += f"+{self.metadata}"
        return version

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    def core(self) -> Version:
        """Return this version with pre-release and metadata removed."""
        return Version(
            segments=self.segments,
            specificity=self.specificity,
            original=".".join(str(segment) for segment in self.segments),
        )

    def compare(self, other: Version) -> int:
        """Compare this version with another.

        Returns:
            -1 if this version is lower than ``other``
            0 if both have the same precedence
            1 if this version is higher than ``other``
        """
        # Equal canonical strings always have equal precedence
        if str(self) == str(other):
            return 0

        result = _precedence.compare_segments(self.segments, other.segments)
        if result != 0:
            return result

        if not self.prerelease and not other.prerelease:
            return 0
        if not self.prerelease:
            return 1  # Release > pre-release
        if not other.prerelease:
            return -1

        return _precedence.compare_prereleases(self.prerelease, other.prerelease)

    def equal(self, other: Version) -> bool:
        """Return True if both versions have the same precedence."""
        return self.compare(other) == 0

    def greater_than(self, other: Version) -> bool:
        """Return True if this version is higher than ``other``."""
        return self.compare(other) > 0

    def less_than(self, other: Version) -> bool:
        """Return True if this version is lower than ``other``."""
        return self.compare(other) < 0

    def greater_than_or_equal(self, other: Version) -> bool:
        """Return True if this version is not lower than ``other``."""
        return self.compare(other) >= 0

    def less_than_or_equal(self, other: Version) -> bool:
        """Return True if this version is not higher than ``other``."""
        return self.compare(other) <= 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # Must agree with __eq__: trailing zeros and metadata are ignored
        segments = list(self.segments)
        while segments and segments[-1] == 0:
            segments.pop()
        return hash((tuple(segments), self.prerelease))


def _parse_segment(version_string: str, token: str) -> int:
    try:
        value = int(token, 10)
        if value > MAX_SEGMENT:
            raise OverflowError(
                f"value out of range for a {SEGMENT_BITS}-bit segment"
            )
    except (ValueError, OverflowError) as e:
        raise InvalidSegmentError(version_string, token, str(e)) from e
    return value


def parse(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A version such as ``1.2``, ``v1.2.3`` or
            ``1.2.3.4-beta.1+build.7``

    Returns:
        A Version with at least three numeric segments

    Raises:
        MalformedVersionError: If the string does not match the version grammar
        InvalidSegmentError: If a numeric segment does not fit in 32 bits

    Examples:
        >>> parse("1.2")
        Version('1.2.0')

        >>> parse("v1.0.0-beta.2+exp.sha.5114f85").prerelease
        'beta.2'
    """
    if not isinstance(version_string, str):
        raise MalformedVersionError(
            str(version_string),
            f"Version must be a string, got {type(version_string).__name__}",
        )

    match = VERSION_PATTERN.fullmatch(version_string)
    if match is None:
        logger.debug("Rejected malformed version %r", version_string)
        raise MalformedVersionError(version_string)

    segments = [
        _parse_segment(version_string, token)
        for token in match.group("segments").split(".")
    ]
    specificity = len(segments)
    segments.extend([0] * (MIN_SEGMENTS - specificity))

    return Version(
        segments=tuple(segments),
        prerelease=match.group("prerelease") or "",
        metadata=match.group("metadata") or "",
        specificity=specificity,
        original=version_string,
    )


def must_parse(version_string: str) -> Version:
    """Parse a version string that is known to be valid.

    Only meant for literals baked into code. A failure here is a programming
    error, so it is raised as a RuntimeError rather than InvalidVersionError.

    Raises:
        RuntimeError: If the string cannot be parsed
    """
    try:
        return parse(version_string)
    except InvalidVersionError as e:
        logger.debug("Invalid version literal %r: %s", version_string, e.message)
        raise RuntimeError(f"must_parse: {e.message}") from e


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.0")
        True
        >>> is_valid_version("1.0.0-")
        False
    """
    try:
        parse(version_string)
    except InvalidVersionError:
        return False
    return True
