"""Tests for metadata extraction."""

import logging
import types

import click
import pytest
import typer

from verbmenu.lib.errors import InvalidSourceError
from verbmenu.lib.extractor import (
    extract_all_verbs,
    extract_options,
    extract_verbs_from_source,
    generate_command_summary,
    get_all_verb_names,
    get_verb_by_name,
    iter_commands,
    verb_exists,
)
from verbmenu.samples import app as sample_module
from verbmenu.samples.app import app as sample_app


# =============================================================================
# Sources
# =============================================================================


class TestSources:
    def test_typer_app_verbs_sorted_by_name(self):
        names = [verb.name for verb in extract_verbs_from_source(sample_app)]
        assert names == ["count", "list", "search"]

    def test_click_group(self, click_app):
        names = [verb.name for verb in extract_verbs_from_source(click_app)]
        assert names == ["greet", "scan"]

    def test_single_click_command(self):
        @click.command()
        @click.option("--level", default=3)
        def do_work(level):
            pass

        verbs = extract_verbs_from_source(do_work)
        assert len(verbs) == 1
        assert verbs[0].name == "do-work"

    def test_module_is_scanned(self):
        names = [verb.name for verb in extract_verbs_from_source(sample_module)]
        assert names == ["count", "list", "search"]

    def test_module_does_not_repeat_group_members(self, click_app):
        module = types.ModuleType("fake_cli")
        module.cli = click_app
        module.greet = click_app.commands["greet"]
        module._private = click.Command("hidden")

        names = [verb.name for verb in extract_verbs_from_source(module)]
        assert names == ["greet", "scan"]

    def test_nested_groups_are_flattened(self):
        @click.group()
        def root():
            pass

        @root.group()
        def db():
            pass

        @db.command()
        def migrate():
            pass

        @root.command()
        def status():
            pass

        verbs = extract_verbs_from_source(root)
        assert [v.name for v in verbs] == ["db migrate", "status"]
        assert verbs[0].tokens == ["db", "migrate"]

    def test_invalid_source_raises(self):
        with pytest.raises(InvalidSourceError):
            iter_commands(42)

    def test_extract_all_skips_invalid_sources(self, click_app, caplog):
        with caplog.at_level(logging.WARNING, logger="verbmenu"):
            verbs = extract_all_verbs([42, click_app])
        assert [v.name for v in verbs] == ["greet", "scan"]
        assert "Skipping command source" in caplog.text

    def test_extract_all_merges_and_dedupes(self, click_app):
        verbs = extract_all_verbs([sample_app, click_app, sample_app])
        assert [v.name for v in verbs] == ["count", "greet", "list", "scan", "search"]


# =============================================================================
# Verb and option metadata
# =============================================================================


class TestVerbMetadata:
    def test_help_text_and_callback(self):
        verb = get_verb_by_name("list", [sample_app])
        assert verb.help_text == "List files in a directory."
        assert verb.callback_name == "list_files"

    def test_help_from_docstring_first_line(self):
        @click.command()
        def tidy():
            """Tidy things up.

            Longer description that is not shown in menus.
            """

        verb = extract_verbs_from_source(tidy)[0]
        assert verb.help_text == "Tidy things up."

    def test_command_not_serialised(self):
        verb = get_verb_by_name("count", [sample_app])
        data = verb.model_dump()
        assert "command" not in data
        assert data["callback_name"] == "count_files"
        assert [o["long_name"] for o in data["options"]] == ["directory", "top"]

    def test_str_lists_options(self):
        text = str(get_verb_by_name("count", [sample_app]))
        assert "Verb: count" in text
        assert "Description: Count files by extension." in text
        assert "Options (2):" in text
        assert "  -n, --top [Default: 10] - Number of top extensions to show." in text


class TestOptionMetadata:
    def test_required_options_come_first(self):
        verb = get_verb_by_name("search", [sample_app])
        assert [o.long_name for o in verb.options] == [
            "text",
            "case-sensitive",
            "directory",
            "pattern",
        ]
        assert verb.options[0].required is True
        assert verb.options[0].short_name == "t"

    def test_typer_bool_option_is_flag(self):
        verb = get_verb_by_name("list", [sample_app])
        recursive = next(o for o in verb.options if o.long_name == "recursive")
        assert recursive.is_flag
        assert recursive.is_boolean
        assert recursive.off_flag is None
        assert recursive.short_name == "r"
        assert recursive.default_value is False

    def test_defaults_and_types(self):
        verb = get_verb_by_name("count", [sample_app])
        top = next(o for o in verb.options if o.param_name == "top")
        assert top.default_value == 10
        assert top.type_name == "integer"
        assert not top.is_boolean

    def test_on_off_flag(self, click_app):
        options = extract_options(click_app.commands["greet"])
        shout = next(o for o in options if o.param_name == "shout")
        assert shout.is_flag
        assert shout.long_name == "shout"
        assert shout.off_flag == "--no-shout"

    def test_positional_and_choices(self, click_app):
        options = extract_options(click_app.commands["scan"])
        path, mode = options
        assert path.is_positional
        assert path.required
        assert path.display_names == "PATH"
        assert mode.choices == ["fast", "slow"]
        assert mode.default_value == "fast"

    def test_hidden_and_unexposed_params_are_skipped(self):
        @click.command()
        @click.option("--visible")
        @click.option("--secret", hidden=True)
        @click.option("--eager", is_flag=True, expose_value=False, is_eager=True)
        def cmd(visible, secret):
            pass

        assert [o.param_name for o in extract_options(cmd)] == ["visible"]

    def test_required_without_default(self):
        verb = get_verb_by_name("search", [sample_app])
        assert verb.options[0].default_value is None
        assert str(verb.options[0]) == "-t, --text (Required) - Text to search for."


# =============================================================================
# Lookup helpers
# =============================================================================


class TestLookup:
    def test_get_verb_by_name_is_case_insensitive(self):
        verb = get_verb_by_name("LIST", [sample_app])
        assert verb is not None
        assert verb.name == "list"

    def test_get_verb_by_name_missing(self):
        assert get_verb_by_name("nope", [sample_app]) is None

    def test_verb_exists(self):
        assert verb_exists("Search", [sample_app])
        assert not verb_exists("delete", [sample_app])

    def test_get_all_verb_names(self, click_app):
        assert get_all_verb_names([click_app]) == ["greet", "scan"]

    def test_command_summary(self):
        summary = generate_command_summary([sample_app])
        lines = summary.splitlines()
        assert lines[0] == "=" * 70
        assert lines[1] == "Available Commands"
        assert "Verb: count" in summary
        assert "Verb: search" in summary
        assert summary.index("Verb: count") < summary.index("Verb: list")

    def test_summary_empty(self):
        assert "Verb:" not in generate_command_summary([])


def test_empty_typer_app_is_skipped():
    empty = typer.Typer()
    assert extract_all_verbs([empty]) == []


def test_installed_typer_builds_click_commands():
    # sources and ClickExecutor mount typer's commands on a click.Group
    command = typer.main.get_command(sample_app)
    assert isinstance(command, click.Group)
    assert get_verb_by_name("count", [sample_app]) is not None
