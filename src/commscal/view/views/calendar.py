# SPDX-License-Identifier: MIT

import math

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from commscal.color import (
    ALL_DAY_COLOR,
    ISSUE_COLOR,
    OUTSIDE_MONTH_COLOR,
    TODAY_COLOR,
    category_color,
    status_color,
)
from commscal.model.calendar_view import (
    CalendarView,
    DayView,
    MonthView,
    PositionedEvent,
    WeekView,
)
from commscal.model.event import Event
from commscal.service.layout import TIME_SLOT_HEIGHT
from commscal.time import format_date, format_time, get_time_slots, view_title
from commscal.view.views.header import header

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def _truncate(title: str, width: int) -> str:
    if title == "":
        title = "[no title]"
    if len(title) > width:
        return title[: max(width - 3, 0)] + "..."
    return title


def _append_event(
    text: Text, event: Event, width: int, show_time: bool, dimmed: bool = False
) -> None:
    color = OUTSIDE_MONTH_COLOR if dimmed else category_color(event["category"])
    if event["issue"]:
        text.append("! ", style=OUTSIDE_MONTH_COLOR if dimmed else ISSUE_COLOR)
    if event["all_day"]:
        text.append("■ ", style=color)
    else:
        text.append("● ", style=color)
        if show_time:
            text.append(f"{format_time(event['start_date'])} ", style="dim")
    text.append(f"{_truncate(event['title'], width)}\n", style=color)


def _slot_span(positioned: PositionedEvent) -> tuple[int, int]:
    """First timeline row and number of rows covered by a positioned event."""
    position = positioned["position"]
    first_row = int(position["top"] // TIME_SLOT_HEIGHT)
    return first_row, max(math.ceil(position["height"] / TIME_SLOT_HEIGHT), 1)


def calendar_day_view(
    day_view: DayView,
    start_hour: int = 0,
    end_hour: int = 23,
    width: int = 60,
) -> None:
    """
    Display a vertical timeline for one day.

    All-day events are listed above the timeline. Each timed event starts in
    the hour row derived from its computed top offset and is continued through
    the rows covered by its height. Overlapping events share rows.
    """
    header("calendar day", view_title(day_view["date"], CalendarView.DAY))

    console = Console()
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 1))
    table.add_column("time", style="dim", no_wrap=True)
    table.add_column("events", width=width)

    if day_view["all_day_events"]:
        all_day_text = Text()
        for event in day_view["all_day_events"]:
            _append_event(all_day_text, event, width - 4, show_time=False)
        all_day_text.rstrip()
        table.add_row(Text("All day", style=ALL_DAY_COLOR), all_day_text)

    spans = [(_slot_span(positioned), positioned) for positioned in day_view["timed_events"]]
    time_slots = get_time_slots()
    for hour in range(start_hour, end_hour + 1):
        row_text = Text()
        for (first_row, row_count), positioned in spans:
            event = positioned["event"]
            if first_row == hour:
                _append_event(row_text, event, width - 30, show_time=False)
                row_text.append(
                    f"  {format_time(event['start_date'])} - "
                    f"{format_time(event['end_date'])}  ",
                    style="dim",
                )
                row_text.append(
                    f"{event['schedule_status']}\n",
                    style=status_color(event["schedule_status"]),
                )
            elif first_row < hour < first_row + row_count:
                row_text.append(
                    f"┃ {_truncate(event['title'], width - 2)}\n",
                    style=category_color(event["category"]),
                )
        row_text.rstrip()
        table.add_row(time_slots[hour], row_text)

    console.print()
    console.print(table)
    console.print()


def calendar_week_view(week_view: WeekView, day_width: int = 24) -> None:
    header(
        "calendar week",
        f"{format_date(week_view['week_start'])} - {format_date(week_view['week_end'])}",
    )

    console = Console()
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    cells: list[Text] = []
    for day_name, day in zip(WEEKDAY_NAMES, week_view["days"]):
        day_header = f"{day_name} {day['date'].day}"
        table.add_column(
            Text(day_header, style=TODAY_COLOR if day["is_today"] else "bold"),
            width=day_width,
        )

        cell = Text()
        for event in day["all_day_events"]:
            _append_event(cell, event, day_width - 4, show_time=False)
        for positioned in day["timed_events"]:
            _append_event(cell, positioned["event"], day_width - 13, show_time=True)
        cell.rstrip()
        cells.append(cell)
    table.add_row(*cells)

    console.print()
    console.print(table)
    console.print()


def calendar_month_view(month_view: MonthView, cell_width: int = 20) -> None:
    """
    Display a Sunday-first month grid.

    Days of the neighbouring months and their events are dimmed, today is
    highlighted, and cells holding more events than fit end with "+N more".
    """
    header("calendar month", view_title(month_view["month_start"], CalendarView.MONTH))

    console = Console()
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in WEEKDAY_NAMES:
        table.add_column(day_name, style="bold", width=cell_width)

    for week in month_view["weeks"]:
        week_cells: list[Text] = []
        for cell in week:
            cell_content = Text()
            day_num = cell["date"].day
            dimmed = not cell["in_month"]
            if dimmed:
                cell_content.append(f"{day_num:2d}\n", style=OUTSIDE_MONTH_COLOR)
            elif cell["is_today"]:
                cell_content.append(f"{day_num:2d}", style=TODAY_COLOR)
                cell_content.append("   \n", style=TODAY_COLOR)
            else:
                cell_content.append(f"{day_num:2d}\n", style="bold")

            for event in cell["events"]:
                _append_event(
                    cell_content, event, cell_width - 9, show_time=True, dimmed=dimmed
                )
            if cell["hidden_count"] > 0:
                cell_content.append(f"  +{cell['hidden_count']} more\n", style="dim")
            cell_content.rstrip()
            week_cells.append(cell_content)
        table.add_row(*week_cells)

    console.print()
    console.print(table)
    console.print()
