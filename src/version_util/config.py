# SPDX-License-Identifier: MIT
"""version_util configuration."""

import logging
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class FormatConfig:
    """Display formatting configuration."""

    beta_marker: str = "-beta."
    beta_label: str = " Beta "


@dataclass
class VersionUtilConfig:
    """Main version_util configuration."""

    format: FormatConfig = field(default_factory=FormatConfig)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "VersionUtilConfig":
        """Create configuration from environment variables."""
        import os

        config = cls()

        # Formatting
        marker = os.getenv("VERSION_UTIL_BETA_MARKER", config.format.beta_marker)
        label = os.getenv("VERSION_UTIL_BETA_LABEL", config.format.beta_label)
        config.format = FormatConfig(beta_marker=marker, beta_label=label)

        # Logging
        if log_level := os.getenv("VERSION_UTIL_LOG_LEVEL"):
            config.log_level = log_level.upper()

        return config


def configure_logging(config: Optional[VersionUtilConfig] = None) -> logging.Logger:
    """Set the level of the ``version_util`` logger from ``config.log_level``.

    Without a config the environment is read via VersionUtilConfig.from_env().
    Unknown level names fall back to WARNING. No handlers are installed; the
    host application owns log output.
    """
    config = config or VersionUtilConfig.from_env()
    logger = logging.getLogger("version_util")
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.WARNING))
    return logger
