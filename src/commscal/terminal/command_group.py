# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

ALIAS_SEPARATOR = re.compile(r"\s*,\s*")


def command_aliases(registered_name: str) -> list[str]:
    """Split a "calendar, cal" style command name into its accepted spellings."""
    return [alias for alias in ALIAS_SEPARATOR.split(registered_name) if alias]


class CommandGroup(typer.core.TyperGroup):
    """
    Typer group for commands registered as "name, alias".

    Any spelling in the registered name selects the command. Help lists
    subgroups before plain commands, each alphabetically.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        for registered_name, command in self.commands.items():
            if cmd_name in command_aliases(registered_name):
                return command
        return super().get_command(ctx, cmd_name)

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(
            self.commands,
            key=lambda name: (not isinstance(self.commands[name], click.Group), name),
        )
