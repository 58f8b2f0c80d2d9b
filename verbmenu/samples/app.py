"""Demo typer app: list, search and count files.

Each command returns its exit code so executors running the app with
`standalone_mode=False` can report it.
"""

from __future__ import annotations

import typer
from rich.console import Console

from .commands import CountCommand, ListCommand, SearchCommand

console = Console()

app = typer.Typer(help="File utilities demo.", add_completion=False)


@app.command("list", help="List files in a directory.")
def list_files(
    directory: str = typer.Option(
        ".", "-d", "--directory", help="Directory to list files from."
    ),
    recursive: bool = typer.Option(
        False, "-r", "--recursive", help="Search recursively in subdirectories."
    ),
    pattern: str = typer.Option(
        "*.*", "-p", "--pattern", help="File pattern to match (e.g., *.txt)."
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show detailed information."
    ),
) -> int:
    return ListCommand(
        directory=directory,
        recursive=recursive,
        pattern=pattern,
        verbose=verbose,
        console=console,
    ).execute()


@app.command("search", help="Search for text within files.")
def search_files(
    text: str = typer.Option(..., "-t", "--text", help="Text to search for."),
    directory: str = typer.Option(
        ".", "-d", "--directory", help="Directory to search in."
    ),
    pattern: str = typer.Option(
        "*.*", "-p", "--pattern", help="File pattern to search (e.g., *.py)."
    ),
    case_sensitive: bool = typer.Option(
        False, "-c", "--case-sensitive", help="Perform case-sensitive search."
    ),
) -> int:
    return SearchCommand(
        search_text=text,
        directory=directory,
        pattern=pattern,
        case_sensitive=case_sensitive,
        console=console,
    ).execute()


@app.command("count", help="Count files by extension.")
def count_files(
    directory: str = typer.Option(
        ".", "-d", "--directory", help="Directory to analyze."
    ),
    top: int = typer.Option(
        10, "-n", "--top", help="Number of top extensions to show."
    ),
) -> int:
    return CountCommand(directory=directory, top_count=top, console=console).execute()
