"""Fluent construction of InteractiveUI instances."""

from __future__ import annotations

from typing import Any, Iterable, Optional, TextIO

from rich.console import Console

from .config import UIConfig
from .executor import CommandExecutor, EchoExecutor
from .extractor import dedupe_sources
from .ui import InteractiveUI


class InteractiveUIBuilder:
    """Collects the pieces of an InteractiveUI.

    Example:
        ui = (
            InteractiveUI.create_from(app)
            .with_executor(ClickExecutor(app))
            .build()
        )
        ui.run()
    """

    def __init__(self, sources: Iterable[Any]) -> None:
        self._sources = dedupe_sources(sources)
        self._executor: Optional[CommandExecutor] = None
        self._config: Optional[UIConfig] = None
        self._console: Optional[Console] = None
        self._input_stream: Optional[TextIO] = None

    @property
    def sources(self) -> list[Any]:
        return list(self._sources)

    def with_executor(self, executor: CommandExecutor) -> "InteractiveUIBuilder":
        """Use `executor` to run the assembled commands."""
        self._executor = executor
        return self

    def with_config(self, config: UIConfig) -> "InteractiveUIBuilder":
        self._config = config
        return self

    def with_console(
        self, console: Console, input_stream: Optional[TextIO] = None
    ) -> "InteractiveUIBuilder":
        """Render to `console`; read answers from `input_stream` when given."""
        self._console = console
        self._input_stream = input_stream
        return self

    def build(self) -> InteractiveUI:
        console = self._console or Console()
        # Without an executor the UI only shows what it would run
        executor = self._executor or EchoExecutor(
            console,
            "Provide an executor with with_executor() to actually execute commands.",
        )
        return InteractiveUI(
            executor,
            self._sources,
            console=console,
            config=self._config,
            input_stream=self._input_stream,
        )


def with_interactive_ui(*sources: Any, console: Optional[Console] = None) -> InteractiveUI:
    """Interactive UI over `sources` that echoes commands instead of running them."""
    console = console or Console()
    executor = EchoExecutor(
        console,
        "Use InteractiveUI.create_from(...).with_executor() to provide custom command execution.",
    )
    return InteractiveUI(executor, dedupe_sources(sources), console=console)
