# SPDX-License-Identifier: MIT

from typing import Hashable, Optional, TypeAlias, Union

import pendulum

from commscal.model.bucket import DayBucket
from commscal.model.calendar_view import (
    CalendarView,
    DayView,
    MonthCell,
    MonthView,
    PositionedEvent,
    WeekView,
)
from commscal.model.event import Event
from commscal.service.bucket import (
    get_events_for_month,
    get_events_for_week,
    group_events_by_day,
)
from commscal.service.layout import calculate_event_position
from commscal.service.search import filter_events
from commscal.time import end_of_day, is_in_month, is_today, start_of_day

MAX_EVENTS_PER_CELL = 3

AssembledView: TypeAlias = Union[DayView, WeekView, MonthView]


def _day_view_from_bucket(bucket: DayBucket) -> DayView:
    return DayView(
        date=bucket["date"],
        is_today=is_today(bucket["date"]),
        all_day_events=[event for event in bucket["events"] if event["all_day"]],
        timed_events=[
            PositionedEvent(event=event, position=calculate_event_position(event))
            for event in bucket["events"]
            if not event["all_day"]
        ],
    )


def assemble_day_view(events: list[Event], day: pendulum.DateTime) -> DayView:
    [bucket] = group_events_by_day(events, start_of_day(day), end_of_day(day))
    return _day_view_from_bucket(bucket)


def assemble_week_view(events: list[Event], anchor: pendulum.DateTime) -> WeekView:
    week = get_events_for_week(events, anchor)
    return WeekView(
        week_start=week["week_start"],
        week_end=week["week_end"],
        days=[_day_view_from_bucket(day) for day in week["days"]],
    )


def assemble_month_view(
    events: list[Event],
    anchor: pendulum.DateTime,
    max_events_per_cell: int = MAX_EVENTS_PER_CELL,
) -> MonthView:
    month = get_events_for_month(events, anchor)
    return MonthView(
        month_start=month["month_start"],
        month_end=month["month_end"],
        weeks=[
            [
                MonthCell(
                    date=day["date"],
                    in_month=is_in_month(day["date"], month["month_start"]),
                    is_today=is_today(day["date"]),
                    events=day["events"][:max_events_per_cell],
                    hidden_count=max(len(day["events"]) - max_events_per_cell, 0),
                )
                for day in week["days"]
            ]
            for week in month["weeks"]
        ],
    )


def assemble_view(
    events: list[Event],
    view: str,
    anchor: pendulum.DateTime,
    query: Optional[str] = None,
    max_events_per_cell: int = MAX_EVENTS_PER_CELL,
) -> AssembledView:
    """
    Filter events by the search query and build the requested calendar view.

    Args:
        events: All calendar events
        view: One of CalendarView.DAY, WEEK or MONTH
        anchor: Any date inside the day, week or month to display
        query: Optional search query (see service.search.filter_events)
        max_events_per_cell: Events listed per month cell before "+N more"

    Raises:
        ValueError: If view is not a known calendar view
    """
    filtered_events = filter_events(events, query)
    match view:
        case CalendarView.DAY:
            return assemble_day_view(filtered_events, anchor)
        case CalendarView.WEEK:
            return assemble_week_view(filtered_events, anchor)
        case CalendarView.MONTH:
            return assemble_month_view(filtered_events, anchor, max_events_per_cell)
    raise ValueError(f"unknown calendar view: {view}")


class CalendarViewCache:
    """
    Caller-owned cache of assembled views.

    Entries are keyed by the caller's event list version, the view, the anchor
    calendar day and the search query. Bump the version whenever the event list
    changes; stale versions are never consulted again and can be dropped with
    clear().
    """

    def __init__(self) -> None:
        self._views: dict[tuple[Hashable, str, str, str], AssembledView] = {}

    def __len__(self) -> int:
        return len(self._views)

    def get_view(
        self,
        events: list[Event],
        events_version: Hashable,
        view: str,
        anchor: pendulum.DateTime,
        query: Optional[str] = None,
    ) -> AssembledView:
        key = (events_version, view, anchor.to_date_string(), (query or "").strip())
        if key not in self._views:
            self._views[key] = assemble_view(events, view, anchor, query)
        return self._views[key]

    def clear(self) -> None:
        self._views.clear()
