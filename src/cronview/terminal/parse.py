# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from cronview.time import date_from_str, today_wall_clock


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse the --date option into a naive wall-clock midnight.

    Accepts YYYY-MM-DD, today (t), yesterday (y), tomorrow (o) or a day
    offset relative to today like 1 or -1.

    Raises:
        typer.BadParameter: If the value matches none of the accepted formats
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^[-+]?\d+$", date):
        return today_wall_clock().add(days=int(date))

    if date == "today" or date == "t":
        return today_wall_clock()
    if date == "yesterday" or date == "y":
        return today_wall_clock().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_wall_clock().add(days=1)
    raise typer.BadParameter('Date must be "today" or a date in format "YYYY-MM-DD"')
