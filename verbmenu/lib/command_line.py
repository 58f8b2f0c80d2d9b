"""Turn prompted answers into an argument vector."""

from __future__ import annotations

import shlex
from typing import Mapping, Optional, Sequence

from .metadata import OptionMetadata, VerbMetadata


def option_flag(option: OptionMetadata) -> Optional[str]:
    """The flag used on the command line, short form preferred."""
    if option.short_name:
        return f"-{option.short_name}"
    if option.long_name:
        return f"--{option.long_name}"
    return None


def build_argv(verb: VerbMetadata, answers: Mapping[str, Optional[str]]) -> list[str]:
    """Build the argument vector for `verb`.

    `answers` maps parameter names to the entered value. Missing or None
    values are left to the command's own defaults.
    """
    argv = list(verb.tokens)

    for option in verb.options:
        value = answers.get(option.param_name)
        if value is None:
            continue

        if option.is_positional:
            argv.append(value)
            continue

        flag = option_flag(option)
        if flag is None:
            continue

        if option.is_flag:
            # click flags take no value: on -> the flag, off -> its secondary opt
            if value == "true":
                argv.append(flag)
            elif option.off_flag:
                argv.append(option.off_flag)
            continue

        argv.extend([flag, value])

    return argv


def format_argv(argv: Sequence[str]) -> str:
    return shlex.join(argv)
