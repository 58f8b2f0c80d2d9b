"""Read verb and option metadata out of click/typer objects.

A *source* is anything that holds commands:
- a `typer.Typer` app (converted with `typer.main.get_command`)
- a `click.Group` (each subcommand is a verb, nested groups are flattened)
- a single `click.Command`
- a module, scanned for public attributes of the types above
"""

from __future__ import annotations

import inspect
import logging
import types
from typing import Any, Iterable, Optional

import click
import typer

from .errors import InvalidSourceError
from .metadata import OptionMetadata, VerbMetadata

log = logging.getLogger(__name__)

# click >= 8.3 marks "no default given" with a sentinel instead of None
_UNSET = getattr(click.core, "UNSET", object())


def dedupe_sources(items: Iterable[Any]) -> list[Any]:
    seen: set[int] = set()
    unique = []
    for item in items:
        if id(item) not in seen:
            seen.add(id(item))
            unique.append(item)
    return unique


def _first_line(text: Optional[str]) -> str:
    if not text:
        return ""
    lines = [line for line in inspect.cleandoc(text).splitlines() if line.strip()]
    # click uses a lone \b to mark unwrapped paragraphs
    lines = [line for line in lines if line.strip() != "\b"]
    return lines[0].strip() if lines else ""


def _command_name(command: click.Command) -> str:
    if command.name:
        return command.name
    if command.callback is not None:
        return command.callback.__name__.replace("_", "-")
    return type(command).__name__.lower()


def _scan_module(module: types.ModuleType) -> list[tuple[str, click.Command]]:
    candidates = [
        value
        for attr, value in vars(module).items()
        if not attr.startswith("_") and isinstance(value, (typer.Typer, click.Command))
    ]

    # Commands registered on a group found in the same module are reached
    # through that group.
    nested = {
        id(sub)
        for candidate in candidates
        if isinstance(candidate, click.Group)
        for sub in candidate.commands.values()
    }

    found: list[tuple[str, click.Command]] = []
    for candidate in dedupe_sources(candidates):
        if id(candidate) in nested:
            continue
        found.extend(iter_commands(candidate))
    return found


def iter_commands(source: Any) -> list[tuple[str, click.Command]]:
    """Top-level `(name, command)` pairs provided by a source."""
    if isinstance(source, typer.Typer):
        try:
            return iter_commands(typer.main.get_command(source))
        except (RuntimeError, AssertionError) as e:
            # typer refuses to build a command from an app without commands;
            # older releases signal it with an assert
            raise InvalidSourceError(source, str(e)) from e

    if isinstance(source, click.Group):
        return list(source.commands.items())

    if isinstance(source, click.Command):
        return [(_command_name(source), source)]

    if isinstance(source, types.ModuleType):
        return _scan_module(source)

    raise InvalidSourceError(source, "expected a typer app, click command or module")


def _option_metadata(param: click.Parameter) -> OptionMetadata:
    default = param.default
    if default is _UNSET or callable(default):
        default = None

    choices: list[str] = []
    if isinstance(param.type, click.Choice):
        choices = [str(getattr(choice, "value", choice)) for choice in param.type.choices]

    metadata = OptionMetadata(
        param_name=param.name or "",
        help_text=getattr(param, "help", None) or "",
        required=param.required,
        default_value=default,
        type_name=param.type.name,
        choices=choices,
    )

    if isinstance(param, click.Argument):
        metadata.is_positional = True
        return metadata

    for opt in param.opts:
        if opt.startswith("--"):
            if metadata.long_name is None:
                metadata.long_name = opt[2:]
        elif opt.startswith("-") and len(opt) == 2:
            if metadata.short_name is None:
                metadata.short_name = opt[1]

    if isinstance(param, click.Option):
        metadata.is_flag = param.is_flag
        if param.secondary_opts:
            metadata.off_flag = param.secondary_opts[0]

    return metadata


def extract_options(command: click.Command) -> list[OptionMetadata]:
    """All user-facing parameters of a command.

    Required parameters come first, then the rest by long name (falling back
    to the short name). Positional arguments keep their declaration order.
    """
    options = [
        _option_metadata(param)
        for param in command.params
        if param.expose_value and not getattr(param, "hidden", False)
    ]
    return sorted(
        options,
        key=lambda o: (0 if o.required else 1, o.long_name or o.short_name or ""),
    )


def extract_verb_metadata(name: str, command: Any) -> Optional[VerbMetadata]:
    """Metadata for one command, or None if `command` is not a click command."""
    if not isinstance(command, click.Command):
        return None

    return VerbMetadata(
        name=name,
        help_text=command.short_help or _first_line(command.help),
        command=command,
        options=extract_options(command),
    )


def _flatten(name: str, command: click.Command) -> list[VerbMetadata]:
    if isinstance(command, click.Group):
        verbs: list[VerbMetadata] = []
        for sub_name, sub in command.commands.items():
            verbs.extend(_flatten(f"{name} {sub_name}", sub))
        return verbs

    verb = extract_verb_metadata(name, command)
    return [verb] if verb is not None else []


def extract_verbs_from_source(source: Any) -> list[VerbMetadata]:
    """Verbs of a single source, sorted by name."""
    verbs: list[VerbMetadata] = []
    for name, command in iter_commands(source):
        verbs.extend(_flatten(name, command))
    return sorted(verbs, key=lambda v: v.name)


def extract_all_verbs(sources: Iterable[Any]) -> list[VerbMetadata]:
    """Verbs of every source, sorted by name.

    Sources that cannot be scanned are logged and skipped.
    """
    verbs: list[VerbMetadata] = []
    for source in dedupe_sources(sources):
        try:
            verbs.extend(extract_verbs_from_source(source))
        except Exception as e:
            log.warning("Skipping command source %r: %s", source, e)
    return sorted(verbs, key=lambda v: v.name)


def generate_command_summary(sources: Iterable[Any]) -> str:
    """Formatted text listing every verb with its options."""
    rule = "=" * 70
    lines = [rule, "Available Commands", rule, ""]
    for verb in extract_all_verbs(sources):
        lines.append(str(verb))
        lines.append("")
    return "\n".join(lines)


def get_verb_by_name(verb_name: str, sources: Iterable[Any]) -> Optional[VerbMetadata]:
    """Case-insensitive lookup of a verb."""
    wanted = verb_name.casefold()
    for verb in extract_all_verbs(sources):
        if verb.name.casefold() == wanted:
            return verb
    return None


def get_all_verb_names(sources: Iterable[Any]) -> list[str]:
    return [verb.name for verb in extract_all_verbs(sources)]


def verb_exists(verb_name: str, sources: Iterable[Any]) -> bool:
    return get_verb_by_name(verb_name, sources) is not None
