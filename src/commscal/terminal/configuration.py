# SPDX-License-Identifier: MIT

import typer
from rich.console import Console
from rich.table import Table

from commscal import configuration
from commscal.repository.configuration import CONFIGURATION_REPO
from commscal.terminal.command_group import CommandGroup

app = typer.Typer(cls=CommandGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("entries_path", str(configuration.DATA_ENTRIES_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("month_cell_width", str(config["month_cell_width"]))
    table.add_row("week_day_width", str(config["week_day_width"]))
    table.add_row("max_events_per_cell", str(config["max_events_per_cell"]))
    table.add_row("day_start_hour", str(config["day_start_hour"]))
    table.add_row("day_end_hour", str(config["day_end_hour"]))

    console.print(table)
