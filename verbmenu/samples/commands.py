"""File system commands used by the demo app."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterator

from rich.console import Console
from rich.markup import escape

log = logging.getLogger(__name__)

RULE = "-" * 50


def iter_files(directory: str, pattern: str, recursive: bool) -> Iterator[Path]:
    """Files under `directory` whose name matches `pattern`.

    `*.*` matches every file, extension or not.
    """
    root = Path(directory)
    if not root.is_dir():
        raise FileNotFoundError(f"Directory not found: {directory}")

    if pattern in ("*.*", ""):
        pattern = "*"
    candidates = root.rglob(pattern) if recursive else root.glob(pattern)
    return (path for path in candidates if path.is_file())


@dataclass
class ListCommand:
    """List files in a directory."""

    directory: str = "."
    recursive: bool = False
    pattern: str = "*.*"
    verbose: bool = False
    console: Console = field(default_factory=Console, repr=False)

    def execute(self) -> int:
        out = self.console
        try:
            out.print(f"Listing files in: {escape(self.directory)}", highlight=False)
            out.print(f"Recursive: {self.recursive}", highlight=False)
            out.print(f"Pattern: {escape(self.pattern)}", highlight=False)
            out.print(RULE)

            files = sorted(iter_files(self.directory, self.pattern, self.recursive))

            if not files:
                out.print("No files found.")
                return 0

            for path in files:
                if self.verbose:
                    stat = path.stat()
                    modified = datetime.fromtimestamp(stat.st_mtime)
                    out.print(
                        f"{escape(path.name):<40} {stat.st_size:>15,} bytes  "
                        f"{modified:%Y-%m-%d %H:%M:%S}",
                        highlight=False,
                    )
                else:
                    out.print(escape(path.name), highlight=False)

            out.print(RULE)
            out.print(f"Total: {len(files)} file(s)", highlight=False)
            return 0
        except Exception as e:
            out.print(f"[red]Error: {escape(str(e))}[/red]")
            return 1


@dataclass
class SearchCommand:
    """Search for text within files."""

    search_text: str = ""
    directory: str = "."
    pattern: str = "*.*"
    case_sensitive: bool = False
    console: Console = field(default_factory=Console, repr=False)

    def _matches(self, line: str) -> bool:
        if self.case_sensitive:
            return self.search_text in line
        return self.search_text.casefold() in line.casefold()

    def execute(self) -> int:
        out = self.console
        try:
            out.print(
                f"Searching for '{escape(self.search_text)}' in: {escape(self.directory)}",
                highlight=False,
            )
            out.print(f"Pattern: {escape(self.pattern)}", highlight=False)
            out.print(f"Case sensitive: {self.case_sensitive}", highlight=False)
            out.print(RULE)

            match_count = 0
            for path in sorted(iter_files(self.directory, self.pattern, recursive=True)):
                try:
                    lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
                except OSError as e:
                    log.debug("Skipping unreadable file %s: %s", path, e)
                    continue

                matches = [
                    (number, line)
                    for number, line in enumerate(lines, start=1)
                    if self._matches(line)
                ]
                if matches:
                    match_count += 1
                    out.print(f"\n{escape(str(path))}:", highlight=False)
                    for number, line in matches:
                        out.print(f"  Line {number}: {escape(line.strip())}", highlight=False)

            out.print(RULE)
            out.print(f"Found matches in {match_count} file(s)", highlight=False)
            return 0
        except Exception as e:
            out.print(f"[red]Error: {escape(str(e))}[/red]")
            return 1


@dataclass
class CountCommand:
    """Count files by extension."""

    directory: str = "."
    top_count: int = 10
    console: Console = field(default_factory=Console, repr=False)

    def execute(self) -> int:
        out = self.console
        try:
            out.print(f"Counting files in: {escape(self.directory)}", highlight=False)
            out.print(RULE)

            files = list(iter_files(self.directory, "*", recursive=True))
            counts = Counter(path.suffix.lower() for path in files if path.suffix)

            out.print(f"Top {self.top_count} file extensions:", highlight=False)
            for extension, count in counts.most_common(max(self.top_count, 0)):
                out.print(f"  {escape(extension)}: {count} files", highlight=False)

            out.print(RULE)
            out.print(f"Total: {len(files)} files", highlight=False)
            return 0
        except Exception as e:
            out.print(f"[red]Error: {escape(str(e))}[/red]")
            return 1
