"""Executors receive the assembled argument vector and run it.

The interactive UI never runs commands itself; it hands the argument vector
to a `CommandExecutor` and reports the returned exit code.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

import click
from rich.console import Console
from rich.markup import escape

from .command_line import format_argv
from .extractor import iter_commands

log = logging.getLogger(__name__)


class CommandExecutor(ABC):
    """Base class for executors."""

    @abstractmethod
    def execute(self, args: Sequence[str]) -> int:
        """Run `args` and return an exit code (0 for success)."""
        ...


class CallbackExecutor(CommandExecutor):
    """Delegates execution to a callable taking the argument list."""

    def __init__(self, handler: Callable[[list[str]], int]) -> None:
        if handler is None:
            raise ValueError("handler is required")
        if not callable(handler):
            raise TypeError(f"handler must be callable, got {type(handler).__name__}")
        self._handler = handler

    def execute(self, args: Sequence[str]) -> int:
        return self._handler(list(args))


class EchoExecutor(CommandExecutor):
    """Prints the command instead of running it."""

    def __init__(self, console: Console, hint: str = "") -> None:
        self.console = console
        self.hint = hint

    def execute(self, args: Sequence[str]) -> int:
        self.console.print(f"Command would be executed: {escape(format_argv(args))}")
        if self.hint:
            self.console.print(f"Note: {escape(self.hint)}")
        return 0


class ClickExecutor(CommandExecutor):
    """Runs the argument vector against the sources' click commands.

    The top-level commands of every source are merged into one group, so the
    first argument selects the verb exactly as in the menu.
    """

    def __init__(self, *sources: Any, prog_name: str = "verbmenu") -> None:
        self.prog_name = prog_name
        self.group = click.Group(name=prog_name)
        for source in sources:
            for name, command in iter_commands(source):
                if name in self.group.commands:
                    log.warning("Command '%s' is defined twice, keeping the first", name)
                    continue
                self.group.add_command(command, name)

    def execute(self, args: Sequence[str]) -> int:
        log.info("Executing: %s", format_argv(args))
        try:
            result = self.group.main(
                args=list(args), prog_name=self.prog_name, standalone_mode=False
            )
        except click.ClickException as e:
            e.show()
            return e.exit_code
        except click.Abort:
            return 1
        except SystemExit as e:
            # commands that call sys.exit() directly
            if e.code is None:
                return 0
            if isinstance(e.code, int):
                return e.code
            click.echo(e.code, err=True)
            return 1

        # bool is an int subclass but carries no exit status
        if isinstance(result, int) and not isinstance(result, bool):
            return result
        return 0
