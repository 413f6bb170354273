# SPDX-License-Identifier: MIT

import datetime
import re

import pendulum

DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def today_wall_clock() -> pendulum.DateTime:
    """Midnight of the current local day, as a naive wall-clock datetime."""
    today = pendulum.today("local")
    return pendulum.naive(today.year, today.month, today.day)


def date_from_str(date_str: str) -> pendulum.DateTime:
    """Parse a 'YYYY-MM-DD' string to a naive pendulum.DateTime at midnight.

    Raises:
        ValueError: If the string is not a valid calendar date
    """
    match = DATE_PATTERN.match(date_str)
    if match is None:
        raise ValueError(f"'{date_str}' is not in YYYY-MM-DD format")
    year, month, day = (int(group) for group in match.groups())
    return pendulum.naive(year, month, day)


def pendulum_to_python(value: pendulum.DateTime) -> datetime.datetime:
    return datetime.datetime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
    )


def python_to_pendulum(value: datetime.datetime) -> pendulum.DateTime:
    return pendulum.naive(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
    )


def datetime_to_display_day_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("dddd YYYY-MM-DD")


def datetime_to_display_hour_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("HH:mm")


def datetime_to_display_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD ddd HH:mm")
