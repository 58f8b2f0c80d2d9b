"""CLI commands"""

from .run import run_command
from .describe import describe_command, verbs_command

__all__ = ["run_command", "describe_command", "verbs_command"]
