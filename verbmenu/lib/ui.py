"""Menu-driven console front-end generated from command metadata.

Flow:
    main menu -> pick a verb -> prompt every option -> review the command
    -> confirm -> executor -> back to the main menu
"""

from __future__ import annotations

import logging
import re
import time
from typing import TYPE_CHECKING, Any, Iterable, Optional, TextIO

from rich.console import Console
from rich.markup import escape

from .command_line import build_argv, format_argv
from .config import UIConfig
from .executor import CommandExecutor
from .extractor import extract_all_verbs
from .metadata import OptionMetadata, VerbMetadata

if TYPE_CHECKING:
    from .builder import InteractiveUIBuilder

log = logging.getLogger(__name__)

# optional sign and ASCII digits only
_MENU_NUMBER = re.compile(r"[+-]?[0-9]+")


class InteractiveUI:
    """Interactive text UI that builds its menus from command metadata."""

    def __init__(
        self,
        executor: CommandExecutor,
        sources: Iterable[Any],
        console: Optional[Console] = None,
        config: Optional[UIConfig] = None,
        input_stream: Optional[TextIO] = None,
    ) -> None:
        self.executor = executor
        self.sources = list(sources)
        self.console = console or Console()
        self.config = config or UIConfig()
        # Read answers from this stream instead of the terminal (tests, pipes)
        self._input_stream = input_stream

    @classmethod
    def create_from(cls, *sources: Any) -> "InteractiveUIBuilder":
        """Start building a UI over the given typer apps, click commands or modules."""
        from .builder import InteractiveUIBuilder

        return InteractiveUIBuilder(sources)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        try:
            while True:
                try:
                    if not self.show_main_menu():
                        break
                except (EOFError, KeyboardInterrupt):
                    raise
                except Exception as e:
                    log.debug("Menu iteration failed", exc_info=True)
                    self.console.print(f"\n[red]ERROR: {escape(str(e))}[/red]")
                    self.pause("\nPress Enter to continue...")
        except (EOFError, KeyboardInterrupt):
            # input closed or Ctrl-C
            self.console.print()

        self.console.print("\nGoodbye!")

    def show_main_menu(self) -> bool:
        """Show the verb list and handle one choice. False means exit."""
        self.safe_clear()
        self.show_header("MAIN MENU", "Select a command to execute")

        verbs = extract_all_verbs(self.sources)

        if not verbs:
            self.console.print("[yellow]⚠ No commands found![/yellow]")
            self.console.print(
                "[yellow]Make sure the command sources are loaded.[/yellow]"
            )
            self.pause("\nPress Enter to exit...")
            return False

        width = self.config.verb_column_width
        for i, verb in enumerate(verbs, start=1):
            self.console.print(
                f"  [{i}] [green]{escape(verb.name):<{width}}[/green]"
                f" - {escape(verb.help_text)}",
                highlight=False,
            )

        self.console.print()
        self.console.print("  [0] Exit", highlight=False)
        self.console.print()

        raw = self.read_line(f"Enter your choice (0-{len(verbs)}): ").strip()
        if not _MENU_NUMBER.fullmatch(raw):
            self.show_error("Invalid input. Please enter a number.")
            return True

        choice = int(raw)
        if choice == 0:
            return False

        if choice < 1 or choice > len(verbs):
            self.show_error(
                f"Invalid choice. Please select 1-{len(verbs)} or 0 to exit."
            )
            return True

        self.execute_command(verbs[choice - 1])
        return True

    # ------------------------------------------------------------------
    # Command configuration and execution
    # ------------------------------------------------------------------

    def execute_command(self, verb: VerbMetadata) -> Optional[list[str]]:
        """Prompt for the verb's options and run it.

        Returns the argument vector, or None if the user cancelled.
        """
        self.safe_clear()
        self.show_header(f"CONFIGURING: {verb.name.upper()}", verb.help_text)

        answers: dict[str, Optional[str]] = {}
        for option in verb.options:
            answers[option.param_name] = self.prompt_for_option(option)

        argv = build_argv(verb, answers)

        self.console.print()
        self.show_header("EXECUTION SUMMARY", "Review your command")
        self.console.print(
            f"[cyan]Command:[/cyan] [yellow]{escape(format_argv(argv))}[/yellow]",
            highlight=False,
        )
        self.console.print()

        confirm = self.read_line("Execute this command? (Y/n): ")
        if confirm.strip().lower() == "n":
            self.console.print("Command cancelled.")
            time.sleep(self.config.cancel_pause)
            return None

        self.console.print()
        self.draw_line("=")
        self.console.print("[green]EXECUTING COMMAND...[/green]")
        self.draw_line("=")
        self.console.print()

        try:
            exit_code = self.executor.execute(argv)
        except Exception as e:
            log.debug("Executor raised", exc_info=True)
            self.console.print(f"\n[red]ERROR: {escape(str(e))}[/red]")
        else:
            self.console.print()
            self.draw_line("=")
            if exit_code == 0:
                self.console.print("[green]✓ Command completed successfully![/green]")
            else:
                self.console.print(
                    f"[red]✗ Command failed with exit code: {exit_code}[/red]"
                )
            self.draw_line("=")

        self.pause("\nPress Enter to return to main menu...")
        return argv

    def prompt_for_option(self, option: OptionMetadata) -> Optional[str]:
        """Describe one option and ask for its value. None keeps the default."""
        self.console.print()
        self.draw_line("-")

        label = "Argument" if option.is_positional else "Option"
        self.console.print(
            f"[cyan]{label}: {escape(option.display_names)}[/cyan]", highlight=False
        )
        self.console.print(f"Description: {escape(option.help_text)}", highlight=False)
        self.console.print(f"Type: {escape(option.type_name)}", highlight=False)
        if option.choices:
            self.console.print(
                f"Choices: {escape(', '.join(option.choices))}", highlight=False
            )

        if option.required:
            self.console.print("[yellow]⚠ REQUIRED[/yellow]")
        elif option.default_value is not None:
            self.console.print(
                f"[green]Optional[/green] (Default: {escape(str(option.default_value))})",
                highlight=False,
            )
        else:
            self.console.print("[green]Optional[/green]")

        if option.is_boolean:
            return self.prompt_boolean(option)
        return self.prompt_string(option)

    def prompt_boolean(self, option: OptionMetadata) -> Optional[str]:
        self.console.print("\n  [1] Yes (true)", highlight=False)
        self.console.print("  [2] No (false)", highlight=False)

        if not option.required:
            default = option.default_value if option.default_value is not None else "false"
            self.console.print(
                f"  [0] Use default ({escape(str(default))})", highlight=False
            )

        choice = self.read_line("\nYour choice: ").strip()

        if not option.required and choice == "0":
            return None
        if choice == "1":
            return "true"
        # anything other than 1 counts as "no"
        return "false"

    def prompt_string(self, option: OptionMetadata) -> Optional[str]:
        prompt = "\nEnter value"
        if not option.required and option.default_value is not None:
            prompt += f" (or press Enter for default '{option.default_value}')"
        prompt += ": "

        while True:
            value = self.read_line(prompt)

            if not value.strip():
                if option.required:
                    self.console.print("[red]⚠ This option is required![/red]")
                    continue
                return None

            if option.choices and value not in option.choices:
                self.console.print(
                    f"[red]⚠ Choose one of: {escape(', '.join(option.choices))}[/red]"
                )
                continue

            return value

    # ------------------------------------------------------------------
    # Console helpers
    # ------------------------------------------------------------------

    def read_line(self, prompt: str) -> str:
        """Read one line of input. Raises EOFError when input is exhausted."""
        if self._input_stream is None:
            return self.console.input(escape(prompt))

        self.console.print(escape(prompt), end="", highlight=False)
        line = self._input_stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def pause(self, message: str) -> None:
        self.read_line(message)

    def show_header(self, title: str, subtitle: str = "") -> None:
        self.draw_line("═", style="cyan")
        self.console.print(f"[cyan]  {escape(title)}[/cyan]", highlight=False)
        if subtitle:
            self.console.print(f"  {escape(subtitle)}", highlight=False)
        self.draw_line("═", style="cyan")
        self.console.print()

    def draw_line(self, character: str = "-", style: Optional[str] = None) -> None:
        self.console.print(
            character * self.config.line_width, style=style, highlight=False
        )

    def show_error(self, message: str) -> None:
        self.console.print(f"\n[red]{escape(message)}[/red]")
        self.pause("\nPress Enter to continue...")

    def safe_clear(self) -> None:
        """Clear the screen, or print a separator when output is not a terminal."""
        if self.config.clear_screen and self.console.is_terminal:
            self.console.clear()
            return
        self.console.print()
        self.console.print()
        self.console.print("-" * 50)
        self.console.print()
