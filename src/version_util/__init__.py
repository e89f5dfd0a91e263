# SPDX-License-Identifier: MIT
"""Version parsing, comparison and display formatting.

Versions are dot-separated numbers with an optional ``-beta.N`` (or opaque)
pre-release suffix. A version with a numeric pre-release sorts after the
same version without one.

Example:
    >>> from version_util import parse_version, compare_versions, format_version
    >>>
    >>> version = parse_version("1.2.3-beta.4")
    >>> version.numeric_parts
    (1, 2, 3)
    >>> version.beta
    (4,)
    >>>
    >>> compare_versions("1.2.3", "1.2.3-beta.4")
    -1
    >>>
    >>> format_version("1.2.3-beta.4")
    '1.2.3 Beta 4'
"""

__version__ = "0.1.0"

from .errors import (
    VersionUtilError,
    InvalidVersionFormatError,
    InvalidOperatorError,
    RegistrationError,
)
from .parser import (
    ParsedVersion,
    NumericPreRelease,
    OpaquePreRelease,
    PreRelease,
    parse_version,
    is_valid_version,
    VERSION_PATTERN,
)
from .compare import (
    Operator,
    compare_versions,
    compare_versions_with_operator,
    is_newer_version,
    version_key,
    sort_versions,
)
from .format import format_version
from .config import FormatConfig, VersionUtilConfig, configure_logging
from .registry import (
    VersionUtil,
    GLOBAL_REGISTRY,
    register,
    unregister,
    is_registered,
    get_registered,
)

__all__ = [
    # Errors
    "VersionUtilError",
    "InvalidVersionFormatError",
    "InvalidOperatorError",
    "RegistrationError",
    # Version parsing
    "ParsedVersion",
    "NumericPreRelease",
    "OpaquePreRelease",
    "PreRelease",
    "parse_version",
    "is_valid_version",
    "VERSION_PATTERN",
    # Version comparison
    "Operator",
    "compare_versions",
    "compare_versions_with_operator",
    "is_newer_version",
    "version_key",
    "sort_versions",
    # Formatting
    "format_version",
    # Configuration
    "FormatConfig",
    "VersionUtilConfig",
    "configure_logging",
    # Registration
    "VersionUtil",
    "GLOBAL_REGISTRY",
    "register",
    "unregister",
    "is_registered",
    "get_registered",
]
