"""verbmenu CLI Main Entry Point

Build interactive menus for any click or typer app.

Usage:
    verbmenu run pkg.cli:app               # menus that print the command
    verbmenu run pkg.cli:app --execute     # menus that run the command
    verbmenu describe pkg.cli:app          # text summary of all verbs
    verbmenu describe pkg.cli:app --json   # same, as JSON
    verbmenu verbs pkg.cli                 # verb names found in a module
    verbmenu --version                     # show version
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from ._version import __version__
from .commands import describe_command, run_command, verbs_command
from .commands.utils import setup_logging
from .lib.errors import VerbMenuError, handle_error

typer_app = typer.Typer(
    help="Interactive menus for click and typer command line apps.",
    no_args_is_help=True,
    add_completion=False,
)

TARGETS_HELP = "Import paths of apps or modules, e.g. 'pkg.cli:app' or 'pkg.cli'."


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"verbmenu {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show informational log messages."
    ),
) -> None:
    setup_logging(verbose)


@typer_app.command()
def run(
    targets: List[str] = typer.Argument(..., help=TARGETS_HELP),
    execute: bool = typer.Option(
        False,
        "-x",
        "--execute",
        help="Run the assembled command instead of printing it.",
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to a verbmenu.yaml file."
    ),
) -> None:
    """Launch the interactive menu."""
    try:
        run_command(targets, execute=execute, config_path=config)
    except (VerbMenuError, FileNotFoundError) as e:
        handle_error(e)


@typer_app.command()
def describe(
    targets: List[str] = typer.Argument(..., help=TARGETS_HELP),
    verb: Optional[str] = typer.Option(
        None, "--verb", help="Only describe this verb."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON."),
) -> None:
    """Print the verbs and options the menus are built from."""
    try:
        describe_command(targets, verb_name=verb, as_json=as_json)
    except VerbMenuError as e:
        handle_error(e)


@typer_app.command()
def verbs(
    targets: List[str] = typer.Argument(..., help=TARGETS_HELP),
) -> None:
    """List verb names."""
    try:
        verbs_command(targets)
    except VerbMenuError as e:
        handle_error(e)


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
