"""treenav package: one cursor over volumes, folder trees and open windows."""

from .composite import CompositeProvider, Selected, Unselected
from .config import NavigatorConfig, default_config
from .exceptions import ConfigurationError, NavigatorError, ProviderError
from .namespaces import DiskProvider, FileSystemProvider, WindowsProvider
from .navigator import Navigator
from .providers import PARENT_TOKEN, NamespaceProvider, NavigationKind, NodeView
from .render import render_view
from .shell import CommandResult, NavigatorShell

__all__ = [
    "Navigator",
    "NavigatorConfig",
    "default_config",
    "NamespaceProvider",
    "NavigationKind",
    "NodeView",
    "PARENT_TOKEN",
    "CompositeProvider",
    "Selected",
    "Unselected",
    "DiskProvider",
    "FileSystemProvider",
    "WindowsProvider",
    "NavigatorShell",
    "CommandResult",
    "render_view",
    "NavigatorError",
    "ConfigurationError",
    "ProviderError",
]
