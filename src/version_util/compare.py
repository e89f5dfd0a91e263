# SPDX-License-Identifier: MIT
"""Version comparison.

Numeric parts are compared position by position, with missing positions
treated as 0 (1.2 == 1.2.0). When the numeric parts tie, a version with a
numeric pre-release sorts AFTER the same version without one:

    1.2.3 < 1.2.3-beta.1 < 1.2.3-beta.2 < 1.2.3-beta.10

Existing callers depend on this ordering, so it differs from SemVer on purpose.
"""

from __future__ import annotations

import functools
from enum import Enum
from itertools import zip_longest
from typing import Any, Iterable, Union

from .errors import InvalidOperatorError
from .parser import ParsedVersion, parse_version

VersionLike = Union[str, ParsedVersion]


class Operator(str, Enum):
    """Relational operators accepted by compare_versions_with_operator."""

    LT = "<"
    LE = "<="
    EQ = "=="
    GE = ">="
    GT = ">"

    @classmethod
    def resolve(cls, operator: Union[str, "Operator"]) -> "Operator":
        """Return the Operator for a symbol, or raise InvalidOperatorError."""
        try:
            return cls(operator)
        except ValueError:
            raise InvalidOperatorError(operator, [op.value for op in cls]) from None

    def apply(self, result: int) -> bool:
        """Map a -1/0/1 comparison result through this operator."""
        if self is Operator.EQ:
            return result == 0
        if self is Operator.LE:
            return result <= 0
        if self is Operator.GE:
            return result >= 0
        if self is Operator.LT:
            return result == -1
        return result == 1


def _raw(version: VersionLike) -> str:
    """Return the string a version was parsed from."""
    return version.original if isinstance(version, ParsedVersion) else version


def _compare_numbers(parts1: tuple[int, ...], parts2: tuple[int, ...]) -> int:
    """Compare two number sequences, padding the shorter one with zeros.

    Returns:
        -1, 0 or 1, decided by the first position that differs
    """
    for n1, n2 in zip_longest(parts1, parts2, fillvalue=0):
        if n1 != n2:
            return -1 if n1 < n2 else 1
    return 0


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or ParsedVersion)
        version2: Second version (string or ParsedVersion)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionFormatError: If either version cannot be parsed

    Note:
        Identical strings compare equal without being parsed, so
        ``compare_versions("abc", "abc")`` is 0.

    Examples:
        >>> compare_versions("1.2.3", "1.2.4")
        -1
        >>> compare_versions("1.10.0", "1.2.0")
        1
        >>> compare_versions("1.2", "1.2.0")
        0
        >>> compare_versions("1.2.3", "1.2.3-beta.1")
        -1
        >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.10")
        -1
    """
    if _raw(version1) == _raw(version2):
        return 0

    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    result = _compare_numbers(v1.numeric_parts, v2.numeric_parts)
    if result != 0:
        return result

    # Only numeric pre-releases take part in the tie-break
    beta1, beta2 = v1.beta, v2.beta
    if beta1 is not None and beta2 is None:
        return 1
    if beta1 is None and beta2 is not None:
        return -1
    if beta1 is not None and beta2 is not None:
        # Same rule as the numeric core; beta parts re-parse to the same tuples
        return _compare_numbers(beta1, beta2)
    return 0


def compare_versions_with_operator(
    version1: VersionLike,
    operator: Union[str, Operator],
    version2: VersionLike,
) -> bool:
    """Evaluate ``version1 <operator> version2``.

    Args:
        version1: Left-hand version
        operator: One of '<', '<=', '==', '>=', '>'
        version2: Right-hand version

    Raises:
        InvalidOperatorError: If the operator is not recognized
        InvalidVersionFormatError: If either version cannot be parsed

    Examples:
        >>> compare_versions_with_operator("2.0.0", ">=", "1.9.9")
        True
        >>> compare_versions_with_operator("1.0.0", "==", "1.0.0")
        True
    """
    op = Operator.resolve(operator)
    return op.apply(compare_versions(version1, version2))


def is_newer_version(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 is strictly greater than version2.

    Kept for callers that predate compare_versions_with_operator.
    """
    return compare_versions_with_operator(version1, Operator.GT, version2)


_cmp_key = functools.cmp_to_key(compare_versions)


def version_key(version: VersionLike) -> Any:
    """Return a sort key for a version, consistent with compare_versions.

    The key is a functools.cmp_to_key wrapper, usable with sorted() and min().

    Examples:
        >>> sorted(["1.2.3-beta.1", "1.10", "1.2.3"], key=version_key)
        ['1.2.3', '1.2.3-beta.1', '1.10']
    """
    return _cmp_key(version)


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[VersionLike]:
    """Return the versions sorted from oldest to newest (or newest first)."""
    return sorted(versions, key=version_key, reverse=reverse)
