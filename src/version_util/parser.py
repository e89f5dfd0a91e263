# SPDX-License-Identifier: MIT
"""Version string parsing.

Supports a dot-separated numeric core with an optional pre-release suffix:
- Numeric: 1, 1.2, 1.2.3, 1.2.3.4
- Pre-release: -beta.4, -beta.4.1, -4, -rc, -rc.1

Strings that do not follow this grammar but start with digits are parsed on
a best-effort basis: the leading digit-and-dot run becomes the numeric core
and the remainder is kept as a custom suffix.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from .errors import InvalidVersionFormatError

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(
    r"^(?P<version>\d+(?:\.\d+)*)"
    r"(?:-(?:beta\.)?(?P<prerelease>\w+(?:\.\w+)*))?\Z",
    re.ASCII,
)

# Leading run used by the degraded parse
LEADING_NUMBERS_PATTERN = re.compile(r"^[\d.]+", re.ASCII)

EXPECTED_FORMAT = (
    "Expected a list of dot-separated numbers, optionally followed by '-beta.' "
    "and another list of dot-separated numbers. E.g. '1.2.3' or '1.2.3-beta.4'"
)

# Under the smallest limit sys.set_int_max_str_digits() accepts (640)
_DIGITS_PER_CHUNK = 600


@dataclass(frozen=True, slots=True)
class NumericPreRelease:
    """A pre-release made only of digit groups, e.g. ``beta.4.1`` -> (4, 1)."""

    parts: tuple[int, ...]

    def __str__(self) -> str:
        return ".".join(str(part) for part in self.parts)


@dataclass(frozen=True, slots=True)
class OpaquePreRelease:
    """A pre-release containing at least one non-numeric group, e.g. ``rc``."""

    tag: str

    def __str__(self) -> str:
        return self.tag


PreRelease = Union[NumericPreRelease, OpaquePreRelease, None]


@dataclass(frozen=True, slots=True)
class ParsedVersion:
    """Represents a parsed version string.

    Attributes:
        original: The input string, verbatim
        numeric_parts: The dot-separated numeric core (e.g. (1, 2, 3))
        pre_release: Numeric or opaque pre-release, or None when absent
        custom_suffix: Unparsed remainder of a degraded parse, otherwise None
    """

    original: str
    numeric_parts: tuple[int, ...]
    pre_release: PreRelease = None
    custom_suffix: Optional[str] = None

    def __str__(self) -> str:
        return self.original

    @property
    def beta(self) -> Optional[tuple[int, ...]]:
        """Return the numeric pre-release parts, or None."""
        if isinstance(self.pre_release, NumericPreRelease):
            return self.pre_release.parts
        return None

    @property
    def custom(self) -> Optional[str]:
        """Return the opaque pre-release tag or the degraded-parse suffix."""
        if isinstance(self.pre_release, OpaquePreRelease):
            return self.pre_release.tag
        return self.custom_suffix

    @property
    def is_prerelease(self) -> bool:
        """Return True if a pre-release suffix was recognized."""
        return self.pre_release is not None

    @property
    def is_degraded(self) -> bool:
        """Return True if only a leading numeric run could be parsed."""
        return self.custom_suffix is not None


def _to_int(group: str) -> int:
    """Convert a digit group to an int, however long it is.

    The group is converted in chunks so that digit runs beyond the
    interpreter's int-from-string limit still parse. An empty group is 0.
    """
    value = 0
    for start in range(0, len(group), _DIGITS_PER_CHUNK):
        chunk = group[start : start + _DIGITS_PER_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _split_numbers(run: str) -> tuple[int, ...]:
    """Split a dot-separated digit run into ints.

    "1.2." yields an empty trailing group, which counts as 0.
    """
    return tuple(_to_int(group) for group in run.split("."))


def _classify_prerelease(prerelease: Optional[str]) -> PreRelease:
    """Return the numeric variant when every group is digits, else the opaque one."""
    if prerelease is None:
        return None
    groups = prerelease.split(".")
    if all(group.isdigit() for group in groups):
        return NumericPreRelease(tuple(_to_int(group) for group in groups))
    return OpaquePreRelease(prerelease)


def parse_version(version_string: str) -> ParsedVersion:
    """Parse a version string into a ParsedVersion object.

    Args:
        version_string: A string like ``1.2.3`` or ``1.2.3-beta.4``

    Returns:
        A ParsedVersion with parsed components

    Raises:
        InvalidVersionFormatError: If the string has no leading numeric run

    Examples:
        >>> parse_version("1.2.3").numeric_parts
        (1, 2, 3)

        >>> parse_version("1.2.3-beta.4").beta
        (4,)

        >>> parse_version("1.0.0-rc").custom
        'rc'

        >>> parse_version("1.2.3dev").custom
        'dev'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionFormatError(
            str(version_string),
            EXPECTED_FORMAT,
            f"Version must be a string, got {type(version_string).__name__}",
        )

    match = VERSION_PATTERN.match(version_string)
    if match:
        return ParsedVersion(
            original=version_string,
            numeric_parts=_split_numbers(match.group("version")),
            pre_release=_classify_prerelease(match.group("prerelease")),
        )

    leading = LEADING_NUMBERS_PATTERN.match(version_string)
    if leading is None or not any(char.isdigit() for char in leading.group()):
        raise InvalidVersionFormatError(version_string, EXPECTED_FORMAT)

    run = leading.group()
    logger.debug("Degraded parse of %r: numeric run %r", version_string, run)
    return ParsedVersion(
        original=version_string,
        numeric_parts=_split_numbers(run),
        custom_suffix=version_string[len(run) :],
    )


def is_valid_version(version_string: str) -> bool:
    """Check if a string matches the full version grammar.

    Degraded parses do not count as valid.

    Examples:
        >>> is_valid_version("1.2.3-beta.4")
        True
        >>> is_valid_version("1.2.3dev")
        False
    """
    if not isinstance(version_string, str):
        return False
    return VERSION_PATTERN.match(version_string) is not None
