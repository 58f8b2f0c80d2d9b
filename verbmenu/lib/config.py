"""Configuration for the interactive UI.

Settings are read from a `verbmenu.yaml` file:
- line_width: width of the separator rules
- verb_column_width: padding of verb names in the main menu
- clear_screen: clear the terminal between screens
- cancel_pause: seconds to wait after a cancelled command

The file is looked up in the current directory and its parents unless
VERBMENU_CONFIG points at one explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

CONFIG_FILENAME = "verbmenu.yaml"
CONFIG_ENV_VAR = "VERBMENU_CONFIG"


class UIConfig(BaseModel):
    """Look and feel of the interactive menus."""

    model_config = {"extra": "forbid"}

    line_width: int = Field(default=65, ge=10, description="Width of separator rules")
    verb_column_width: int = Field(
        default=15, ge=1, description="Padding of verb names in the main menu"
    )
    clear_screen: bool = Field(
        default=True, description="Clear the terminal between screens"
    )
    cancel_pause: float = Field(
        default=1.0, ge=0, description="Seconds to wait after a cancelled command"
    )


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find verbmenu.yaml in `start` (default: cwd) or its parents."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_ui_config(path: Path) -> UIConfig:
    """Load verbmenu.yaml from path."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    try:
        return UIConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"{path}: {e}") from e


def resolve_ui_config(path: Optional[Path] = None) -> UIConfig:
    """Explicit path, else a discovered verbmenu.yaml, else defaults."""
    if path is None:
        path = find_config_file()
        if path is None:
            return UIConfig()
    return load_ui_config(path)
