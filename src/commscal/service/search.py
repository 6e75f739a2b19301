# SPDX-License-Identifier: MIT

from typing import Optional

from commscal.model.event import Event


def __fuzzy_match(query: str, text: Optional[str]) -> bool:
    """
    Case-insensitive substring match.

    Args:
        query: The search query string, already lower-cased
        text: The text to search within

    Returns:
        True if query appears in text, False otherwise
    """
    if text is None:
        return False
    return query in text.lower()


def __search_in_event(event: Event, query: str) -> bool:
    if __fuzzy_match(query, event["title"]):
        return True
    if __fuzzy_match(query, event["category"]):
        return True
    for representative in event["representatives"]:
        if __fuzzy_match(query, representative):
            return True
    return False


def filter_events(events: list[Event], query: Optional[str]) -> list[Event]:
    """
    Keep the events whose title, category or any representative contains query.

    A missing or blank query returns every event. Input order is preserved.
    """
    if query is None or not query.strip():
        return list(events)

    query_lower = query.strip().lower()
    return [event for event in events if __search_in_event(event, query_lower)]
