"""Run command - launch the interactive UI over importable apps"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from verbmenu.lib.config import resolve_ui_config
from verbmenu.lib.executor import ClickExecutor
from verbmenu.lib.ui import InteractiveUI

from .utils import console, load_targets

log = logging.getLogger(__name__)


def run_command(
    targets: list[str],
    execute: bool = False,
    config_path: Optional[Path] = None,
) -> None:
    """Launch the interactive UI."""
    sources = load_targets(targets)
    config = resolve_ui_config(config_path)
    log.info("Loaded %d command source(s)", len(sources))

    builder = InteractiveUI.create_from(*sources).with_config(config).with_console(console)
    if execute:
        builder = builder.with_executor(ClickExecutor(*sources))

    builder.build().run()
