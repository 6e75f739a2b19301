# SPDX-License-Identifier: MIT

from commscal.model.bucket import EventPosition
from commscal.model.event import Event

# pixels representing one hour of the day/week timeline
TIME_SLOT_HEIGHT = 40
MIN_EVENT_HEIGHT = 20


def fractional_hour(hour: int, minute: int) -> float:
    return hour + minute / 60


def calculate_event_position(
    event: Event,
    time_slot_height: float = TIME_SLOT_HEIGHT,
    minimum_height: float = MIN_EVENT_HEIGHT,
) -> EventPosition:
    """
    Compute the vertical offset and height of a timed event in a day column.

    Only the time of day of the start and end dates is used. An event ending
    at an earlier time of day than it starts (crossing midnight) gets the
    minimum height; such events are not laid out across days. Overlapping
    events get independent positions and will overlap when drawn.

    All-day events have no meaningful position and should not be passed here.

    Args:
        event: A timed event
        time_slot_height: Pixels per hour
        minimum_height: Lower bound for the returned height

    Returns:
        The top offset and height in pixels
    """
    start_hour = fractional_hour(event["start_date"].hour, event["start_date"].minute)
    end_hour = fractional_hour(event["end_date"].hour, event["end_date"].minute)

    return EventPosition(
        top=start_hour * time_slot_height,
        height=max((end_hour - start_hour) * time_slot_height, minimum_height),
    )
