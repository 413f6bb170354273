# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict

import pendulum


class DisplayMode(StrEnum):
    DOT = "dot"
    COUNT = "count"
    LIST = "list"


class GridConfig(TypedDict):
    hours_per_line: int
    column_width: int  # characters per hour, including the leading separator
    minutes_per_field: float
    display_mode: DisplayMode


class Slot(TypedDict):
    day: pendulum.Date
    hour: int
    start: pendulum.DateTime
    occupants: list[str]


class SlotGrid(TypedDict):
    """Flat arena of slots indexed by (day_index, hour, field_index)."""

    days: list[pendulum.DateTime]
    fields_per_hour: int
    slots: list[Slot]
    # slot starts per (day_index, hour), same flat ordering as slots
    hour_starts: list[list[pendulum.DateTime]]


class RenderStats(TypedDict):
    max_occupants: int
    used_symbols: set[str]
    max_glyph_width: int
