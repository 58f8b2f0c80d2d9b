"""Core library: metadata extraction, executors and the interactive UI."""

from .builder import InteractiveUIBuilder, with_interactive_ui
from .config import UIConfig, load_ui_config, resolve_ui_config
from .errors import ConfigError, InvalidSourceError, TargetNotFoundError, VerbMenuError
from .executor import CallbackExecutor, ClickExecutor, CommandExecutor, EchoExecutor
from .extractor import (
    extract_all_verbs,
    extract_verbs_from_source,
    generate_command_summary,
    get_all_verb_names,
    get_verb_by_name,
    verb_exists,
)
from .metadata import OptionMetadata, VerbMetadata
from .ui import InteractiveUI

__all__ = [
    "CallbackExecutor",
    "ClickExecutor",
    "CommandExecutor",
    "ConfigError",
    "EchoExecutor",
    "InteractiveUI",
    "InteractiveUIBuilder",
    "InvalidSourceError",
    "OptionMetadata",
    "TargetNotFoundError",
    "UIConfig",
    "VerbMenuError",
    "VerbMetadata",
    "extract_all_verbs",
    "extract_verbs_from_source",
    "generate_command_summary",
    "get_all_verb_names",
    "get_verb_by_name",
    "load_ui_config",
    "resolve_ui_config",
    "verb_exists",
    "with_interactive_ui",
]
