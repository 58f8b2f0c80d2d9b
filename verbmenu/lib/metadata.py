"""Metadata models describing the verbs and options of a click/typer app."""

from __future__ import annotations

from typing import Any, Optional

import click
from pydantic import BaseModel, ConfigDict, Field, computed_field


class OptionMetadata(BaseModel):
    """A single parameter of a verb."""

    param_name: str = Field(description="Parameter name on the command callback")
    short_name: Optional[str] = Field(
        default=None, description="Single character name (from '-x')"
    )
    long_name: Optional[str] = Field(
        default=None, description="Long name without dashes (from '--name')"
    )
    off_flag: Optional[str] = Field(
        default=None, description="Secondary opt of an on/off flag (e.g. '--no-x')"
    )
    help_text: str = Field(default="", description="Help text of the parameter")
    required: bool = False
    default_value: Any = Field(default=None, description="Static default, if any")
    type_name: str = Field(default="text", description="Click type name")
    is_flag: bool = False
    is_positional: bool = False
    choices: list[str] = Field(default_factory=list)

    @property
    def is_boolean(self) -> bool:
        return self.is_flag or self.type_name == "boolean"

    @property
    def display_names(self) -> str:
        """Names as shown in prompts, e.g. '-d / --directory'."""
        if self.is_positional:
            return self.param_name.upper()
        names = []
        if self.short_name:
            names.append(f"-{self.short_name}")
        if self.long_name:
            names.append(f"--{self.long_name}")
        return " / ".join(names)

    def __str__(self) -> str:
        names = []
        if self.short_name:
            names.append(f"-{self.short_name}")
        if self.long_name:
            names.append(f"--{self.long_name}")
        if not names:
            names.append(self.param_name.upper())

        required = " (Required)" if self.required else ""
        default = (
            f" [Default: {self.default_value}]"
            if self.default_value is not None
            else ""
        )
        return f"{', '.join(names)}{required}{default} - {self.help_text}"


class VerbMetadata(BaseModel):
    """A verb (click command) and the options it accepts."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(description="Verb name; nested groups are space-joined")
    help_text: str = Field(default="", description="Help text of the verb")
    command: Optional[click.Command] = Field(default=None, exclude=True)
    options: list[OptionMetadata] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def callback_name(self) -> str:
        """Name of the function (or class) implementing the verb."""
        if self.command is None:
            return ""
        callback = self.command.callback
        if callback is not None:
            return getattr(callback, "__name__", type(callback).__name__)
        return type(self.command).__name__

    @property
    def tokens(self) -> list[str]:
        return self.name.split()

    def __str__(self) -> str:
        lines = [
            f"Verb: {self.name}",
            f"Description: {self.help_text}",
            f"Type: {self.callback_name}",
            f"Options ({len(self.options)}):",
        ]
        lines.extend(f"  {option}" for option in self.options)
        return "\n".join(lines) + "\n"
