# SPDX-License-Identifier: MIT

import datetime
from typing import NotRequired, Optional, TypedDict, Union


class Location(TypedDict):
    address: str
    city: str
    province: str
    postal_code: str
    country: str


class CommsContact(TypedDict):
    firstname: str
    lastname: str
    email: str


class Entry(TypedDict):
    id: str
    # Overview
    category: list[str]  # first element is the calendar display category
    title: str
    related_to: NotRequired[Optional[str]]
    summary: str
    issue: bool
    significance: str
    lead_organization: str

    # Planning
    comms_contact: NotRequired[Optional[CommsContact]]
    comms_material: NotRequired[list[str]]
    notes: NotRequired[Optional[str]]

    # Schedule
    schedule_status: str
    # ISO-8601 strings, or datetime values when loaded from unquoted YAML
    start_date: Union[str, datetime.datetime]
    end_date: Union[str, datetime.datetime]
    all_day: bool
    scheduling_notes: NotRequired[Optional[str]]

    # Event
    representatives: NotRequired[Optional[list[str]]]
    location: NotRequired[Optional[Location]]

    # Metadata
    created_at: NotRequired[Optional[str]]
    updated_at: NotRequired[Optional[str]]
