"""Command-line interface for treenav."""

from __future__ import annotations

import argparse
import logging
import sys

from .config import default_config
from .navigator import Navigator
from .render import render_view
from .shell import CommandResult, NavigatorShell

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--fs-root",
        default=None,
        help="Initial folder for the FileSystem namespace (default: filesystem root).",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity.",
    )


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _build_shell(args: argparse.Namespace) -> NavigatorShell:
    _configure_logging(args.log_level)
    navigator = Navigator(default_config(fs_root=args.fs_root))
    return NavigatorShell(navigator)


def _write_result(result: CommandResult) -> None:
    if result.stdout:
        sys.stdout.write(result.stdout + "\n")
    if result.stderr:
        sys.stderr.write(result.stderr + "\n")


def _run_exec(args: argparse.Namespace) -> int:
    shell = _build_shell(args)
    result = shell.exec(args.command)
    _write_result(result)
    return result.exit_code


def _run_shell(args: argparse.Namespace) -> int:
    shell = _build_shell(args)
    navigator = shell.navigator
    sys.stdout.write(render_view(navigator.current_view()) + "\n")
    try:
        while True:
            line = input(f"{navigator.active}$ ")
            if line.strip() in {":q", "exit", "quit"}:
                return 0
            _write_result(shell.exec(line))
    except (EOFError, KeyboardInterrupt):
        return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="treenav")
    subparsers = parser.add_subparsers(dest="command_name", required=True)

    exec_parser = subparsers.add_parser("exec", help="Run navigation commands and exit")
    _add_common_flags(exec_parser)
    exec_parser.add_argument("command", help="Command string to execute")
    exec_parser.set_defaults(func=_run_exec)

    shell_parser = subparsers.add_parser("shell", help="Start an interactive navigator")
    _add_common_flags(shell_parser)
    shell_parser.set_defaults(func=_run_shell)

    args = parser.parse_args(argv)
    exit_code = args.func(args)
    raise SystemExit(exit_code)


__all__ = ["main"]
