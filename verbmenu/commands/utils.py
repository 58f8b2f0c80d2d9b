"""Shared utilities for CLI commands"""

from __future__ import annotations

import importlib
import logging
import os
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from verbmenu.lib.errors import TargetNotFoundError

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the verbmenu CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - shows executed commands
    - Debug (VERBMENU_DEBUG=1): DEBUG level - shows everything
    """
    debug = bool(os.environ.get("VERBMENU_DEBUG"))

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("verbmenu")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def load_target(target: str) -> Any:
    """Import `package.module:attribute` or a whole `package.module`."""
    module_name, _, attr_path = target.partition(":")
    if not module_name:
        raise TargetNotFoundError(target, "missing module name")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetNotFoundError(target, str(e)) from e

    if attr_path:
        for attr in attr_path.split("."):
            try:
                obj = getattr(obj, attr)
            except AttributeError:
                raise TargetNotFoundError(
                    target, f"module '{module_name}' has no attribute '{attr_path}'"
                ) from None
    return obj


def load_targets(targets: list[str]) -> list[Any]:
    return [load_target(target) for target in targets]
