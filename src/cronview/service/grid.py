# SPDX-License-Identifier: MIT

import datetime
from bisect import bisect_right

import pendulum

from cronview.model.grid import GridConfig, Slot, SlotGrid
from cronview.service.layout import fields_per_hour

HOURS_PER_DAY = 24


def field_offset(minutes_per_field: float, field_index: int) -> tuple[int, int]:
    """Minutes and seconds from the top of the hour to the start of a field."""
    whole_minutes = int(minutes_per_field)
    extra_seconds = int(60 * (minutes_per_field - whole_minutes))
    return field_index * whole_minutes, field_index * extra_seconds


def build_slot_grid(days: list[pendulum.DateTime], grid: GridConfig) -> SlotGrid:
    """
    Build an empty slot for every (day, hour, field) of the window.

    Args:
        days: Midnight of every day in the window, in order
        grid: Resolved grid layout

    Returns:
        SlotGrid with empty occupant lists
    """
    fields = fields_per_hour(grid["column_width"])
    slots: list[Slot] = []
    hour_starts: list[list[pendulum.DateTime]] = []

    for day in days:
        for hour in range(HOURS_PER_DAY):
            starts: list[pendulum.DateTime] = []
            for field_index in range(fields):
                minutes, seconds = field_offset(grid["minutes_per_field"], field_index)
                start = day.add(hours=hour, minutes=minutes, seconds=seconds)
                starts.append(start)
                slots.append(
                    {
                        "day": day.date(),
                        "hour": hour,
                        "start": start,
                        "occupants": [],
                    }
                )
            hour_starts.append(starts)

    return {
        "days": days,
        "fields_per_hour": fields,
        "slots": slots,
        "hour_starts": hour_starts,
    }


def slot_index(slot_grid: SlotGrid, day_index: int, hour: int, field_index: int) -> int:
    return (
        day_index * HOURS_PER_DAY + hour
    ) * slot_grid["fields_per_hour"] + field_index


def get_slot(slot_grid: SlotGrid, day_index: int, hour: int, field_index: int) -> Slot:
    return slot_grid["slots"][slot_index(slot_grid, day_index, hour, field_index)]


def find_slot(slot_grid: SlotGrid, instant: datetime.datetime) -> Slot:
    """
    Find the slot an instant falls into.

    The slot is the one in the instant's day and hour with the greatest start
    not after the instant, so an instant equal to a slot start belongs to that
    slot and anything past the last start belongs to the last slot.

    Raises:
        IndexError: If the instant's day is not part of the grid
    """
    day_index = instant.toordinal() - slot_grid["days"][0].toordinal()
    if not 0 <= day_index < len(slot_grid["days"]):
        raise IndexError(f"{instant} is outside of the calendar window")

    starts = slot_grid["hour_starts"][day_index * HOURS_PER_DAY + instant.hour]
    field_index = max(bisect_right(starts, instant) - 1, 0)
    return get_slot(slot_grid, day_index, instant.hour, field_index)
