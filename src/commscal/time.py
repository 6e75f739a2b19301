# SPDX-License-Identifier: MIT

"""
Calendar date arithmetic on local wall-clock pendulum values.

Every function here is pure: pendulum.DateTime values are immutable, so each
helper returns a new value and never touches its arguments. Weeks always start
on Sunday.
"""

import datetime
from typing import Union, cast

import pendulum

from commscal.model.calendar_view import CalendarView

WEEK_START_DAY = pendulum.SUNDAY
DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def parse_local_datetime(
    value: Union[str, datetime.datetime, datetime.date],
) -> pendulum.DateTime:
    """
    Convert an ISO-8601 string or python date/datetime into a local pendulum.DateTime.

    Strings and naive datetimes without an offset are read as local wall-clock
    time. Values carrying an offset are converted to the local timezone.

    Raises:
        ValueError: If the string cannot be parsed as a datetime
    """
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz="local").in_tz("local")
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz="local")

    parsed = pendulum.parse(value, tz="local")
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not a date or datetime: {value!r}")
    return parsed.in_tz("local")


def datetime_from_local_date_str(date_str: str) -> pendulum.DateTime:
    """Parse a local date string in 'YYYY-MM-DD' format to a pendulum.DateTime at midnight local time."""
    return cast(pendulum.DateTime, pendulum.parse(date_str, tz="local"))


def start_of_day(date: pendulum.DateTime) -> pendulum.DateTime:
    return date.start_of("day")


def end_of_day(date: pendulum.DateTime) -> pendulum.DateTime:
    return date.end_of("day")


def start_of_week(date: pendulum.DateTime) -> pendulum.DateTime:
    """Return the Sunday on or before date, truncated to the start of the day."""
    # pendulum numbers weekdays Monday=0 .. Sunday=6
    days_since_sunday = (int(date.day_of_week) - int(WEEK_START_DAY)) % DAYS_PER_WEEK
    return date.start_of("day").subtract(days=days_since_sunday)


def end_of_week(date: pendulum.DateTime) -> pendulum.DateTime:
    return start_of_week(date).add(days=DAYS_PER_WEEK - 1).end_of("day")


def start_of_month(date: pendulum.DateTime) -> pendulum.DateTime:
    return date.start_of("month")


def end_of_month(date: pendulum.DateTime) -> pendulum.DateTime:
    return date.end_of("month")


def enumerate_week_days(week_start: pendulum.DateTime) -> list[pendulum.DateTime]:
    """Return the seven consecutive days beginning at week_start."""
    return [week_start.add(days=offset) for offset in range(DAYS_PER_WEEK)]


def enumerate_month_weeks(month_start: pendulum.DateTime) -> list[pendulum.DateTime]:
    """
    Return the start of every Sunday-first week that intersects the month.

    The first week starts on the Sunday on or before the first of the month and
    the last one on the Sunday on or before the last day of the month, so the
    expanded weeks tile the visible month grid without gaps or overlap. Leading
    and trailing days may belong to the neighbouring months.

    Args:
        month_start: Any date within the month (normally its first day)

    Returns:
        Week start dates in ascending order
    """
    current_week = start_of_week(start_of_month(month_start))
    last_week = start_of_week(end_of_month(month_start))

    weeks: list[pendulum.DateTime] = []
    while current_week <= last_week:
        weeks.append(current_week)
        current_week = current_week.add(days=DAYS_PER_WEEK)
    return weeks


def is_same_day(first: pendulum.DateTime, second: pendulum.DateTime) -> bool:
    return (
        first.year == second.year
        and first.month == second.month
        and first.day == second.day
    )


def is_today(date: pendulum.DateTime) -> bool:
    return is_same_day(date, now_local())


def is_in_month(date: pendulum.DateTime, month_start: pendulum.DateTime) -> bool:
    return date.year == month_start.year and date.month == month_start.month


def shift_anchor(anchor: pendulum.DateTime, view: str, step: int) -> pendulum.DateTime:
    """
    Move the anchor date of a calendar view backwards or forwards.

    A step is one day for the day view, seven days for the week view and one
    calendar month for the month view. Month steps clamp to the last day of
    shorter months.
    """
    match view:
        case CalendarView.DAY:
            return anchor.add(days=step)
        case CalendarView.WEEK:
            return anchor.add(days=DAYS_PER_WEEK * step)
        case CalendarView.MONTH:
            return anchor.add(months=step)
    raise ValueError(f"unknown calendar view: {view}")


def format_time(date: pendulum.DateTime) -> str:
    return date.format("hh:mm A")


def format_date(date: pendulum.DateTime) -> str:
    return date.format("ddd, MMM D")


def format_month_year(date: pendulum.DateTime) -> str:
    return date.format("MMMM YYYY")


def view_title(anchor: pendulum.DateTime, view: str) -> str:
    if view == CalendarView.DAY:
        return anchor.format("dddd, MMMM D YYYY")
    return format_month_year(anchor)


def get_time_slots() -> list[str]:
    """Hourly labels for the rows of the day and week timelines."""
    # any fixed date works, only the hour is formatted
    reference = pendulum.datetime(2000, 1, 1)
    return [format_time(reference.set(hour=hour)) for hour in range(HOURS_PER_DAY)]
