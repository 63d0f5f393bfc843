"""Exception hierarchy for treenav."""

from __future__ import annotations


class NavigatorError(Exception):
    """Base class for navigation failures."""


class ConfigurationError(NavigatorError):
    """Raised when a registry or adjacency table is inconsistent."""


class ProviderError(NavigatorError):
    """Raised when a provider cannot enumerate its namespace."""


__all__ = ["NavigatorError", "ConfigurationError", "ProviderError"]
