"""verbmenu - interactive menus for click and typer command line apps."""

from ._version import __version__
from .lib import (
    CallbackExecutor,
    ClickExecutor,
    CommandExecutor,
    EchoExecutor,
    InteractiveUI,
    InteractiveUIBuilder,
    UIConfig,
    with_interactive_ui,
)

__all__ = [
    "__version__",
    "CallbackExecutor",
    "ClickExecutor",
    "CommandExecutor",
    "EchoExecutor",
    "InteractiveUI",
    "InteractiveUIBuilder",
    "UIConfig",
    "with_interactive_ui",
]
