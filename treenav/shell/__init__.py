"""Navigator shell package."""

from .core import NavigatorShell
from .registry import CommandResult

__all__ = ["NavigatorShell", "CommandResult"]
