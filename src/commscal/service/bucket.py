# SPDX-License-Identifier: MIT

"""
Grouping of calendar events into day, week and month buckets.

An event belongs to exactly one day: the calendar day of its start date.
Events spanning several days are not repeated on the following days.
"""

import pendulum

from commscal.model.bucket import DayBucket, MonthBucket, WeekBucket
from commscal.model.event import Event
from commscal.time import (
    end_of_month,
    end_of_week,
    enumerate_month_weeks,
    is_same_day,
    start_of_day,
    start_of_month,
    start_of_week,
)


def day_sort_key(event: Event) -> tuple[bool, pendulum.DateTime]:
    """All-day events first, then ascending start time."""
    return (not event["all_day"], event["start_date"])


def get_events_for_day(events: list[Event], day: pendulum.DateTime) -> list[Event]:
    """Return the events starting on day, in input order."""
    return [event for event in events if is_same_day(event["start_date"], day)]


def group_events_by_day(
    events: list[Event],
    range_start: pendulum.DateTime,
    range_end: pendulum.DateTime,
) -> list[DayBucket]:
    """
    Produce one bucket for every calendar day from range_start to range_end inclusive.

    Within a bucket all-day events come before timed events and events are
    ascending by start time. The sort is stable, so ties keep their input order.

    Args:
        events: Events to distribute
        range_start: First day of the range (time of day is ignored)
        range_end: Last moment of the range

    Returns:
        Day buckets in ascending date order, empty ones included
    """
    days: list[DayBucket] = []
    current_day = start_of_day(range_start)

    while current_day <= range_end:
        day_events = sorted(get_events_for_day(events, current_day), key=day_sort_key)
        days.append(DayBucket(date=current_day, events=day_events))
        current_day = current_day.add(days=1)

    return days


def get_events_for_week(events: list[Event], week_start: pendulum.DateTime) -> WeekBucket:
    week_start = start_of_week(week_start)
    week_end = end_of_week(week_start)
    return WeekBucket(
        week_start=week_start,
        week_end=week_end,
        days=group_events_by_day(events, week_start, week_end),
    )


def get_events_for_month(
    events: list[Event], month_start: pendulum.DateTime
) -> MonthBucket:
    """
    Bucket events into every week of the month grid.

    Weeks at the edges of the grid include days of the neighbouring months; use
    time.is_in_month to tell them apart.
    """
    month_start = start_of_month(month_start)
    return MonthBucket(
        month_start=month_start,
        month_end=end_of_month(month_start),
        weeks=[
            get_events_for_week(events, week_start)
            for week_start in enumerate_month_weeks(month_start)
        ],
    )
