# SPDX-License-Identifier: MIT
"""Exceptions raised by version_util."""

from __future__ import annotations

from typing import Iterable


class VersionUtilError(Exception):
    """Base class for all version_util errors."""


class InvalidVersionFormatError(VersionUtilError, ValueError):
    """Raised when a version string has no leading dot-separated digit run."""

    def __init__(self, version: str, expected: str, message: str = ""):
        self.version = version
        self.expected = expected
        self.message = message or f"Invalid version format '{version}'. {expected}"
        super().__init__(self.message)


class InvalidOperatorError(VersionUtilError, ValueError):
    """Raised when a comparison operator is not one of the recognized symbols."""

    def __init__(self, operator: object, valid_operators: Iterable[str]):
        self.operator = operator
        self.valid_operators = tuple(valid_operators)
        expected = ", ".join(f"'{op}'" for op in self.valid_operators)
        self.message = (
            f"Invalid version comparison operator '{operator}'. Expected one of {expected}."
        )
        super().__init__(self.message)


class RegistrationError(VersionUtilError, KeyError):
    """Raised when looking up a name that was never registered."""

    def __init__(self, name: str):
        self.name = name
        self.message = f"'{name}' is not registered; call version_util.register() at startup"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
