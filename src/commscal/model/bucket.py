# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from commscal.model.event import Event


class DayBucket(TypedDict):
    date: pendulum.DateTime
    events: list[Event]


class WeekBucket(TypedDict):
    week_start: pendulum.DateTime
    week_end: pendulum.DateTime
    days: list[DayBucket]


class MonthBucket(TypedDict):
    month_start: pendulum.DateTime
    month_end: pendulum.DateTime
    weeks: list[WeekBucket]


class EventPosition(TypedDict):
    top: float
    height: float
