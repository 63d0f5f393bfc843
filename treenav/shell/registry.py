"""Command table for the navigator shell."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import NavigatorShell


@dataclass(slots=True)
class CommandResult:
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0


# Handlers receive the raw text after the command name.
ShellCommand = Callable[["NavigatorShell", str], CommandResult]


@dataclass(slots=True)
class CommandSpec:
    name: str
    handler: ShellCommand
    description: str = ""


class CommandRegistry:
    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def command(self, name: str, *, description: str = "") -> Callable[[ShellCommand], ShellCommand]:
        def decorator(func: ShellCommand) -> ShellCommand:
            self._commands[name] = CommandSpec(name, func, description)
            return func

        return decorator

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(name)

    def specs(self) -> list[CommandSpec]:
        return sorted(self._commands.values(), key=lambda spec: spec.name)


COMMAND_REGISTRY = CommandRegistry()


__all__ = ["COMMAND_REGISTRY", "CommandRegistry", "CommandResult", "CommandSpec", "ShellCommand"]
