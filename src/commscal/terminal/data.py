# SPDX-License-Identifier: MIT

import typer
from rich.console import Console
from yaml import YAMLError

from commscal.errors import EntryValidationError
from commscal.model.entry import Entry
from commscal.model.event import Event
from commscal.repository.entry import ENTRY_REPO
from commscal.service.normalize import convert_to_calendar_events

console = Console(stderr=True)


def _read_entries() -> list[Entry]:
    try:
        return ENTRY_REPO.get_all_entries()
    except FileNotFoundError:
        console.print(f"[red]No entries file found at {ENTRY_REPO.path}[/red]")
        raise typer.Exit(1)
    except (YAMLError, ValueError) as e:
        console.print(f"[red]Could not read {ENTRY_REPO.path}: {e}[/red]")
        raise typer.Exit(1)


def _normalize(entries: list[Entry]) -> list[Event]:
    try:
        return convert_to_calendar_events(entries)
    except EntryValidationError as e:
        console.print(f"[red]Invalid entry: {e}[/red]")
        raise typer.Exit(1)


def load_entries() -> list[Entry]:
    """Load entries for the table, rejecting any the calendar could not show."""
    entries = _read_entries()
    _normalize(entries)
    return entries


def load_events() -> list[Event]:
    return _normalize(_read_entries())
