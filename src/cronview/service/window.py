# SPDX-License-Identifier: MIT

import pendulum

from cronview.model.window import RangeType, Window


def resolve_window(date: pendulum.DateTime, range_type: RangeType) -> Window:
    """
    Get the boundaries and days of the calendar window containing a date.

    Args:
        date: Any naive wall-clock datetime inside the window
        range_type: "day" for that single day, "week" for its Monday to Sunday week

    Returns:
        Window with inclusive start and end and the midnight of each day
    """
    if range_type == "week":
        start = date.start_of("week")
        end = date.end_of("week")
    else:
        start = date.start_of("day")
        end = date.end_of("day")

    days: list[pendulum.DateTime] = []
    day = start
    while day <= end:
        days.append(day)
        day = day.add(days=1)

    return {"start": start, "end": end, "days": days}
