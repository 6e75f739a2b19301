# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from commscal.time import datetime_from_local_date_str


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse a calendar anchor date given on the command line.

    Accepts YYYY-MM-DD, today (t), yesterday (y), tomorrow (o) or a day offset
    such as 1 or -7. The result is the start of that day in local time.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return datetime_from_local_date_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").add(days=int(date))

    if date == "today" or date == "t":
        return pendulum.today("local")
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local")
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow("local")
    raise typer.BadParameter("Incorrect date format")
