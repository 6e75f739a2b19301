# SPDX-License-Identifier: MIT

from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from commscal.color import ISSUE_COLOR, category_color, status_color
from commscal.model.entry import Entry
from commscal.time import format_time, parse_local_datetime
from commscal.view.views.header import header

DEFAULT_COLUMNS = [
    "issue",
    "title",
    "category",
    "schedule_status",
    "start_date",
    "lead_organization",
    "representatives",
]


def format_start(entry: Entry) -> str:
    start = parse_local_datetime(entry["start_date"])
    if entry.get("all_day"):
        return f"{start.to_date_string()} All day"
    return f"{start.to_date_string()} {format_time(start)}"


def format_cell(entry: Entry, column: str) -> str:
    value: Any = entry.get(column)
    if column == "issue":
        return f"[{ISSUE_COLOR}]![/{ISSUE_COLOR}]" if value else ""
    if column == "category":
        return " ".join(
            f"[{category_color(category)}]{category}[/{category_color(category)}]"
            for category in value or []
        )
    if column == "schedule_status" and value is not None:
        return f"[{status_color(value)}]{value}[/{status_color(value)}]"
    if column in ("start_date", "end_date") and value is not None:
        return format_start(entry) if column == "start_date" else str(value)
    if column == "location" and value:
        return f"{value.get('city', '')}, {value.get('province', '')}"
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    if value is None:
        return ""
    return str(value)


def entries_view(
    entries: list[Entry],
    columns: Optional[list[str]] = None,
    no_wrap: bool = False,
) -> None:
    header("entries", f"{len(entries)} entries")

    if columns is None:
        columns = DEFAULT_COLUMNS

    entries_table = Table(box=box.SIMPLE)
    for column in columns:
        if no_wrap and column != "issue":
            entries_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            entries_table.add_column(column)

    for entry in entries:
        entries_table.add_row(*[format_cell(entry, column) for column in columns])

    console = Console()
    console.print(entries_table)
