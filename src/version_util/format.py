# SPDX-License-Identifier: MIT
"""Display formatting for version strings."""

from __future__ import annotations

from typing import Optional, Union

from .config import FormatConfig, VersionUtilConfig

DEFAULT_FORMAT = FormatConfig()


def format_version(
    version: str,
    config: Optional[Union[FormatConfig, VersionUtilConfig]] = None,
) -> str:
    """Render a version string for display.

    Only the first ``-beta.`` is replaced; the string is not parsed. A
    VersionUtilConfig contributes its ``format`` section.

    Examples:
        >>> format_version("1.2.3-beta.4")
        '1.2.3 Beta 4'
        >>> format_version("1.2.3")
        '1.2.3'
    """
    if isinstance(config, VersionUtilConfig):
        config = config.format
    config = config or DEFAULT_FORMAT
    if not config.beta_marker:
        return version
    return version.replace(config.beta_marker, config.beta_label, 1)
