"""Tests for InteractiveUI construction."""

import io

from rich.console import Console

from verbmenu.lib.builder import InteractiveUIBuilder, with_interactive_ui
from verbmenu.lib.config import UIConfig
from verbmenu.lib.executor import ClickExecutor, EchoExecutor
from verbmenu.lib.ui import InteractiveUI
from verbmenu.samples.app import app as sample_app


def test_create_from_returns_builder_with_unique_sources(click_app):
    builder = InteractiveUI.create_from(sample_app, click_app, sample_app)
    assert isinstance(builder, InteractiveUIBuilder)
    assert builder.sources == [sample_app, click_app]


def test_build_defaults_to_echo_executor():
    ui = InteractiveUI.create_from(sample_app).build()
    assert isinstance(ui.executor, EchoExecutor)
    assert "with_executor()" in ui.executor.hint
    assert ui.config == UIConfig()


def test_build_with_everything(click_app):
    console = Console(file=io.StringIO())
    stream = io.StringIO("0\n")
    executor = ClickExecutor(click_app)
    config = UIConfig(line_width=40)

    ui = (
        InteractiveUI.create_from(click_app)
        .with_executor(executor)
        .with_config(config)
        .with_console(console, stream)
        .build()
    )
    assert ui.executor is executor
    assert ui.config is config
    assert ui.console is console
    assert ui.sources == [click_app]


def test_echo_executor_shares_the_ui_console(click_app):
    output = io.StringIO()
    ui = (
        InteractiveUI.create_from(click_app)
        .with_console(Console(file=output, width=200), io.StringIO("2\n/data\n\n\n\n0\n"))
        .with_config(UIConfig(cancel_pause=0))
        .build()
    )
    ui.run()

    text = output.getvalue()
    assert "Command would be executed: scan /data" in text
    assert "✓ Command completed successfully!" in text


def test_with_interactive_ui(click_app):
    console = Console(file=io.StringIO())
    ui = with_interactive_ui(click_app, click_app, console=console)
    assert isinstance(ui.executor, EchoExecutor)
    assert ui.executor.console is console
    assert ui.sources == [click_app]
