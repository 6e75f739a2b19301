# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from commscal.model.bucket import EventPosition
from commscal.model.event import Event


class CalendarView:
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class PositionedEvent(TypedDict):
    event: Event
    position: EventPosition


class DayView(TypedDict):
    date: pendulum.DateTime
    is_today: bool
    all_day_events: list[Event]
    timed_events: list[PositionedEvent]


class WeekView(TypedDict):
    week_start: pendulum.DateTime
    week_end: pendulum.DateTime
    days: list[DayView]


class MonthCell(TypedDict):
    date: pendulum.DateTime
    in_month: bool
    is_today: bool
    events: list[Event]
    hidden_count: int


class MonthView(TypedDict):
    month_start: pendulum.DateTime
    month_end: pendulum.DateTime
    weeks: list[list[MonthCell]]
