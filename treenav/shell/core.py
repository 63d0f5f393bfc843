"""Line dispatcher that drives a Navigator."""

from __future__ import annotations

from ..exceptions import NavigatorError
from ..navigator import Navigator
from . import commands  # noqa: F401  (registers the built-in commands)
from .registry import COMMAND_REGISTRY, CommandResult


class NavigatorShell:
    """Runs ``cd``/``ls``/``pwd``/``help`` lines against one navigator.

    The text after the command name is passed through untouched, so names
    with spaces or backslashes (``cd C:\\Users``) reach the provider as typed.
    """

    def __init__(self, navigator: Navigator) -> None:
        self.navigator = navigator

    def exec(self, text: str) -> CommandResult:
        result = CommandResult()
        for line in filter(None, (raw.strip() for raw in text.splitlines())):
            result = self._exec_one(line)
            if result.exit_code != 0:
                break
        return result

    def _exec_one(self, line: str) -> CommandResult:
        name, _, arg = line.partition(" ")
        spec = COMMAND_REGISTRY.get(name)
        if spec is None:
            return CommandResult(stderr=f"Unknown command: {name}", exit_code=127)
        try:
            return spec.handler(self, arg.strip())
        except NavigatorError as exc:
            return CommandResult(stderr=str(exc), exit_code=1)


__all__ = ["NavigatorShell"]
