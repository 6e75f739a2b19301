# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer

from commscal.model.calendar_view import CalendarView, DayView, MonthView, WeekView
from commscal.repository.configuration import CONFIGURATION_REPO
from commscal.service.calendar import assemble_view
from commscal.terminal.command_group import CommandGroup
from commscal.terminal.data import load_events
from commscal.terminal.parse import parse_date
from commscal.time import now_local, shift_anchor
from commscal.view.views import calendar as calendar_report

app = typer.Typer(cls=CommandGroup, no_args_is_help=True)

DateOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option(
        "--date",
        "-d",
        parser=parse_date,
        help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
    ),
]
SearchOption = Annotated[
    Optional[str],
    typer.Option("--search", "-q", help="only show events matching this text"),
]
OffsetOption = Annotated[
    int,
    typer.Option("--offset", "-n", help="move this many views back (<0) or forward"),
]


def _anchor(view: str, date: Optional[pendulum.DateTime], offset: int) -> pendulum.DateTime:
    anchor = date if date is not None else now_local()
    return shift_anchor(anchor, view, offset)


@app.command("day, d")
def day(
    date: DateOption = None,
    query: SearchOption = None,
    offset: OffsetOption = 0,
) -> None:
    """Show a single day as an hourly timeline."""
    config = CONFIGURATION_REPO.get_config()
    anchor = _anchor(CalendarView.DAY, date, offset)
    day_view = cast(DayView, assemble_view(load_events(), CalendarView.DAY, anchor, query))
    calendar_report.calendar_day_view(
        day_view,
        start_hour=config["day_start_hour"],
        end_hour=config["day_end_hour"],
    )


@app.command("week, w")
def week(
    date: DateOption = None,
    query: SearchOption = None,
    offset: OffsetOption = 0,
) -> None:
    """Show the Sunday-first week containing the date."""
    config = CONFIGURATION_REPO.get_config()
    anchor = _anchor(CalendarView.WEEK, date, offset)
    week_view = cast(
        WeekView, assemble_view(load_events(), CalendarView.WEEK, anchor, query)
    )
    calendar_report.calendar_week_view(week_view, day_width=config["week_day_width"])


@app.command("month, m")
def month(
    date: DateOption = None,
    query: SearchOption = None,
    offset: OffsetOption = 0,
) -> None:
    """Show the month containing the date as a grid."""
    config = CONFIGURATION_REPO.get_config()
    anchor = _anchor(CalendarView.MONTH, date, offset)
    month_view = cast(
        MonthView,
        assemble_view(
            load_events(),
            CalendarView.MONTH,
            anchor,
            query,
            max_events_per_cell=config["max_events_per_cell"],
        ),
    )
    calendar_report.calendar_month_view(
        month_view, cell_width=config["month_cell_width"]
    )
