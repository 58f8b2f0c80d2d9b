"""Shared error handling for verbmenu."""

import sys
from typing import NoReturn

import typer


class VerbMenuError(Exception):
    """Base exception for verbmenu operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class InvalidSourceError(VerbMenuError):
    """Raised when an object cannot be scanned for commands."""

    def __init__(self, source: object, reason: str = "") -> None:
        self.source = source
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"cannot read commands from {type(source).__name__} object{detail}"
        )


class TargetNotFoundError(VerbMenuError):
    """Raised when a `module:attr` target cannot be imported."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        super().__init__(f"cannot load '{target}': {reason}", exit_code=2)


class ConfigError(VerbMenuError):
    """Raised when a verbmenu.yaml file has invalid content."""


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Handle and exit on verbmenu errors."""
    if isinstance(error, VerbMenuError):
        exit_with_error(error.message, error.exit_code)
    else:
        # Unexpected error
        typer.echo(f"Unexpected error: {error}", err=True)
        sys.exit(1)
