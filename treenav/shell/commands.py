"""Built-in shell commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..render import render_view
from .registry import COMMAND_REGISTRY, CommandResult

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .core import NavigatorShell


@COMMAND_REGISTRY.command("cd", description="Move the cursor (cd <name>, cd ..)")
def cd(shell: "NavigatorShell", arg: str) -> CommandResult:
    if not arg:
        return CommandResult(stderr="cd expects a name", exit_code=2)
    return CommandResult(stdout=render_view(shell.navigator.advance(arg)))


@COMMAND_REGISTRY.command("ls", description="Show the current node")
def ls(shell: "NavigatorShell", _: str) -> CommandResult:
    return CommandResult(stdout=render_view(shell.navigator.current_view()))


@COMMAND_REGISTRY.command("pwd", description="Print the active provider and node")
def pwd(shell: "NavigatorShell", _: str) -> CommandResult:
    view = shell.navigator.current_view()
    return CommandResult(stdout=f"{shell.navigator.active}:{view.name}")


@COMMAND_REGISTRY.command("help", description="Show available commands")
def help(shell: "NavigatorShell", _: str) -> CommandResult:  # noqa: A001
    lines = ["Available commands:"]
    lines.extend(f"  {spec.name} - {spec.description}" for spec in COMMAND_REGISTRY.specs())
    lines.append("Type exit to leave the shell.")
    return CommandResult(stdout="\n".join(lines))
