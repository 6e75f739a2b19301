# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Any, Mapping, Optional, Union

import pendulum

from commscal.errors import EntryValidationError
from commscal.model.category import (
    CATEGORY_OPTIONS,
    STATUS_OPTIONS,
    Category,
    ScheduleStatus,
)
from commscal.model.entry import Entry, Location
from commscal.model.event import Event
from commscal.time import parse_local_datetime

logger = logging.getLogger(__name__)


def display_category(categories: Union[list[str], str, None]) -> str:
    """
    Project a multi-category source field onto the single calendar category.

    Only the first category is shown in the calendar. Entries tagged with more
    than one category lose the rest in this projection; the entry table still
    lists all of them. Missing or unrecognised categories become "other".
    """
    if isinstance(categories, str):
        categories = [categories]
    if not categories:
        return Category.OTHER

    first = categories[0]
    if first not in CATEGORY_OPTIONS:
        logger.warning("unknown category %r, displaying as %r", first, Category.OTHER)
        return Category.OTHER
    return first


def format_location(location: Optional[Location | Mapping[str, Any]]) -> Optional[str]:
    if not location:
        return None
    city = location.get("city")
    province = location.get("province")
    if not city and not province:
        return None
    return f"{city or ''}, {province or ''}"


def _schedule_status(entry_id: str, status: Optional[str]) -> str:
    if status is None:
        return ScheduleStatus.UNKNOWN
    if status not in STATUS_OPTIONS:
        logger.warning(
            "entry %s: unknown schedule status %r, using %r",
            entry_id,
            status,
            ScheduleStatus.UNKNOWN,
        )
        return ScheduleStatus.UNKNOWN
    return status


def _timestamp(
    entry_id: str,
    entry: Mapping[str, Any],
    field: str,
) -> pendulum.DateTime:
    value: Optional[Union[str, datetime.date]] = entry.get(field)
    if value is None or value == "":
        raise EntryValidationError(entry_id, field, "is required")
    try:
        return parse_local_datetime(value)
    except (ValueError, TypeError) as e:
        raise EntryValidationError(entry_id, field, f"cannot parse {value!r}") from e


def convert_to_calendar_event(entry: Entry | Mapping[str, Any]) -> Event:
    """
    Normalize a communication entry into a calendar event.

    Args:
        entry: The source entry

    Returns:
        A new Event; the entry is not modified

    Raises:
        EntryValidationError: If the id or either timestamp is missing or unparseable
    """
    entry_id = entry.get("id")
    if entry_id is None or entry_id == "":
        raise EntryValidationError(None, "id", "is required")
    entry_id = str(entry_id)

    start_date = _timestamp(entry_id, entry, "start_date")
    end_date = _timestamp(entry_id, entry, "end_date")

    return Event(
        id=entry_id,
        title=entry.get("title") or "",
        category=display_category(entry.get("category")),
        start_date=start_date,
        end_date=end_date,
        all_day=bool(entry.get("all_day", False)),
        issue=bool(entry.get("issue", False)),
        schedule_status=_schedule_status(entry_id, entry.get("schedule_status")),
        location=format_location(entry.get("location")),
        representatives=list(entry.get("representatives") or []),
    )


def convert_to_calendar_events(entries: list[Entry]) -> list[Event]:
    events = [convert_to_calendar_event(entry) for entry in entries]
    logger.debug("normalized %d entries into calendar events", len(events))
    return events
