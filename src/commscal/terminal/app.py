# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from commscal import configuration
from commscal.terminal import calendar
from commscal.terminal import configuration as configuration_terminal
from commscal.terminal.command_group import CommandGroup
from commscal.terminal.entry import entries
from commscal.view.views.header import set_show_header

app = typer.Typer(
    cls=CommandGroup,
    help="commscal - Communications calendar in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration_terminal.app, name="config, c")
app.add_typer(calendar.app, name="calendar, cal")
app.command(name="entries, en")(entries)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output"),
    ] = False,
    data_file: Annotated[
        Optional[Path],
        typer.Option("--data-file", "-f", help="Read entries from this YAML file"),
    ] = None,
) -> None:
    """
    commscal - Communications calendar in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        set_show_header(False)
    if data_file is not None:
        configuration.set_entries_path(data_file)


def run() -> None:
    app()
