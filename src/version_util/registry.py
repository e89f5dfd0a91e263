# SPDX-License-Identifier: MIT
"""Explicit registration of version_util on process-wide state.

Importing version_util has no side effects. A host application that needs the
engine reachable by name (for plugins or legacy callers) calls ``register()``
once at startup:

    >>> import version_util
    >>> registry = version_util.register({})
    >>> registry["compare_versions_legacy"]("2.0.0", "1.0.0")
    True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, MutableMapping, Optional

from .compare import compare_versions, compare_versions_with_operator, is_newer_version
from .errors import RegistrationError
from .format import format_version
from .parser import parse_version

logger = logging.getLogger(__name__)

NAMESPACE_KEY = "version_util"
LEGACY_COMPARE_KEY = "compare_versions_legacy"


@dataclass(frozen=True)
class VersionUtilNamespace:
    """The engine's entry points, grouped for registration."""

    compare: Callable[..., int]
    compare_with_operator: Callable[..., bool]
    parse: Callable[..., Any]
    format: Callable[..., str]


VersionUtil = VersionUtilNamespace(
    compare=compare_versions,
    compare_with_operator=compare_versions_with_operator,
    parse=parse_version,
    format=format_version,
)

_EXPORTS = MappingProxyType(
    {
        NAMESPACE_KEY: VersionUtil,
        LEGACY_COMPARE_KEY: is_newer_version,
    }
)

# Process-wide registry, populated only by register()
GLOBAL_REGISTRY: MutableMapping[str, Any] = {}


def register(registry: Optional[MutableMapping[str, Any]] = None) -> MutableMapping[str, Any]:
    """Install the VersionUtil namespace and the legacy comparison alias.

    Calling this more than once is harmless.

    Args:
        registry: Target mapping; defaults to GLOBAL_REGISTRY

    Returns:
        The registry that was populated
    """
    target = GLOBAL_REGISTRY if registry is None else registry
    for name, value in _EXPORTS.items():
        if target.get(name) is not value:
            target[name] = value
            logger.debug("Registered %s", name)
    return target


def unregister(registry: Optional[MutableMapping[str, Any]] = None) -> None:
    """Remove everything register() installed."""
    target = GLOBAL_REGISTRY if registry is None else registry
    for name in _EXPORTS:
        target.pop(name, None)


def is_registered(registry: Optional[MutableMapping[str, Any]] = None) -> bool:
    """Return True if register() has populated the registry."""
    target = GLOBAL_REGISTRY if registry is None else registry
    return all(target.get(name) is value for name, value in _EXPORTS.items())


def get_registered(name: str, registry: Optional[MutableMapping[str, Any]] = None) -> Any:
    """Look up a registered export by name.

    Raises:
        RegistrationError: If the name has not been registered
    """
    target = GLOBAL_REGISTRY if registry is None else registry
    try:
        return target[name]
    except KeyError:
        raise RegistrationError(name) from None
