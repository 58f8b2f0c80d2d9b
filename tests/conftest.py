"""Shared fixtures: a small click app and helpers to drive the UI."""

import io
import logging

import click
import pytest
from rich.console import Console

from verbmenu.lib.config import UIConfig
from verbmenu.lib.executor import CallbackExecutor
from verbmenu.lib.ui import InteractiveUI


@click.group()
def cli():
    """Tool group."""


@cli.command(help="Greet someone.")
@click.option("-n", "--name", required=True, help="Who to greet.")
@click.option("--shout/--no-shout", default=False, help="Upper-case the greeting.")
@click.option("-c", "--count", type=int, default=1, help="Repetitions.")
def greet(name, shout, count):
    message = f"Hello {name}"
    click.echo((message.upper() if shout else message) * count)
    return 0


@cli.command(help="Scan a path.")
@click.argument("path")
@click.option(
    "--mode", type=click.Choice(["fast", "slow"]), default="fast", help="Scan mode."
)
def scan(path, mode):
    return 3


@pytest.fixture
def click_app():
    return cli


class RecordingExecutor(CallbackExecutor):
    """CallbackExecutor that remembers every argument vector."""

    def __init__(self, exit_code=0):
        self.calls = []
        self.exit_code = exit_code
        super().__init__(self._record)

    def _record(self, args):
        self.calls.append(args)
        return self.exit_code


@pytest.fixture
def recorder():
    return RecordingExecutor()


@pytest.fixture
def make_ui():
    """Build an InteractiveUI fed with `answers`; returns (ui, output buffer)."""

    def _make(sources, answers, executor=None):
        output = io.StringIO()
        console = Console(file=output, width=200)
        stream = io.StringIO("".join(f"{answer}\n" for answer in answers))
        ui = InteractiveUI(
            executor or RecordingExecutor(),
            sources,
            console=console,
            config=UIConfig(cancel_pause=0),
            input_stream=stream,
        )
        return ui, output

    return _make


@pytest.fixture(autouse=True)
def reset_verbmenu_logger():
    """Undo setup_logging() so caplog sees records from every test."""
    yield
    logger = logging.getLogger("verbmenu")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
