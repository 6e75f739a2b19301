# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Event(TypedDict):
    id: str
    title: str
    category: str
    start_date: pendulum.DateTime
    end_date: pendulum.DateTime
    all_day: bool
    issue: bool
    schedule_status: str
    location: Optional[str]
    representatives: list[str]
