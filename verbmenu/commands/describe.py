"""Describe commands - print the metadata the menus are built from"""

from __future__ import annotations

import json
from typing import Optional

from rich.markup import escape

from verbmenu.lib.errors import VerbMenuError
from verbmenu.lib.extractor import (
    extract_all_verbs,
    generate_command_summary,
    get_all_verb_names,
    get_verb_by_name,
)

from .utils import console, load_targets


def describe_command(
    targets: list[str],
    verb_name: Optional[str] = None,
    as_json: bool = False,
) -> None:
    """Print every verb, or a single one, as text or JSON."""
    sources = load_targets(targets)

    if verb_name is not None:
        verb = get_verb_by_name(verb_name, sources)
        if verb is None:
            raise VerbMenuError(f"unknown verb '{verb_name}'")
        if as_json:
            console.print_json(verb.model_dump_json())
        else:
            console.print(escape(str(verb)), highlight=False)
        return

    if as_json:
        data = [verb.model_dump(mode="json") for verb in extract_all_verbs(sources)]
        console.print_json(json.dumps(data))
        return

    console.print(escape(generate_command_summary(sources)), highlight=False)


def verbs_command(targets: list[str]) -> None:
    """Print one verb name per line."""
    for name in get_all_verb_names(load_targets(targets)):
        console.print(escape(name), highlight=False)
