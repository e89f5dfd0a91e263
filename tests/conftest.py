# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for version_util tests."""

from __future__ import annotations

from typing import Generator

import pytest

import version_util


@pytest.fixture
def global_registry() -> Generator[dict, None, None]:
    """Provide the process-wide registry, emptied after the test."""
    version_util.unregister()
    yield version_util.GLOBAL_REGISTRY
    version_util.unregister()
