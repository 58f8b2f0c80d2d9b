"""Demo entry point.

Usage:
    verbmenu-demo                    # launch the interactive UI
    verbmenu-demo list -d . -r       # run a command directly
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from verbmenu.lib.config import resolve_ui_config
from verbmenu.lib.executor import ClickExecutor
from verbmenu.lib.ui import InteractiveUI

from .app import app, console


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    console.print("verbmenu - Demo Application")
    console.print("===========================")
    console.print()

    executor = ClickExecutor(app, prog_name="verbmenu-demo")

    if args:
        console.print("Parsing and executing command-line arguments...")
        console.print()
        return executor.execute(args)

    console.print("No arguments provided. Launching interactive UI...")
    console.print()

    ui = (
        InteractiveUI.create_from(app)
        .with_executor(executor)
        .with_config(resolve_ui_config())
        .with_console(console)
        .build()
    )
    ui.run()
    return 0


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
