# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

import pendulum
from croniter import CroniterBadDateError, CroniterError, croniter, croniter_range

from cronview.model.grid import DisplayMode, GridConfig, RenderStats, Slot, SlotGrid
from cronview.model.job import Job
from cronview.service.grid import build_slot_grid, find_slot
from cronview.time import pendulum_to_python, python_to_pendulum


class RecurrenceError(ValueError):
    """A job's cron expression could not be parsed or evaluated."""

    def __init__(self, job: Job, reason: str) -> None:
        self.job = job
        self.reason = reason
        super().__init__(
            f"Invalid cron expression '{job['expression']}' for job "
            f"'{job['label']}': {reason}"
        )


def empty_render_stats() -> RenderStats:
    return {"max_occupants": 0, "used_symbols": set(), "max_glyph_width": 1}


def occurrences_between(
    job: Job,
    start: pendulum.DateTime,
    end: pendulum.DateTime,
) -> list[datetime.datetime]:
    """
    Get every instant in [start, end] at which a job fires, in ascending order.

    Raises:
        RecurrenceError: If the job's expression is malformed
    """
    try:
        return list(
            croniter_range(
                pendulum_to_python(start),
                pendulum_to_python(end),
                job["expression"],
                ret_type=datetime.datetime,
            )
        )
    except CroniterBadDateError:
        return []
    except CroniterError as e:
        raise RecurrenceError(job, str(e)) from e


def attach_symbol(
    slot: Slot,
    symbol: str,
    stats: RenderStats,
    display_mode: DisplayMode,
) -> None:
    slot["occupants"].append(symbol)
    occupant_count = len(slot["occupants"])

    stats["max_occupants"] = max(stats["max_occupants"], occupant_count)
    stats["used_symbols"].add(symbol)

    if display_mode == DisplayMode.COUNT:
        stats["max_glyph_width"] = max(
            stats["max_glyph_width"], len(str(occupant_count))
        )
    elif display_mode == DisplayMode.LIST:
        stats["max_glyph_width"] = max(stats["max_glyph_width"], occupant_count)


def map_occurrences(
    jobs: list[Job],
    start: pendulum.DateTime,
    end: pendulum.DateTime,
    days: list[pendulum.DateTime],
    grid: GridConfig,
) -> tuple[SlotGrid, RenderStats]:
    """
    Place every occurrence of every job into the calendar grid.

    Jobs are processed in index order, so each slot lists its occupants in job
    order. A fresh grid is built on every call.

    Args:
        jobs: Jobs to map, ordered by index
        start: First instant of the window (inclusive)
        end: Last instant of the window (inclusive)
        days: Midnight of every day in the window
        grid: Resolved grid layout

    Returns:
        Tuple of (populated slot grid, statistics used for rendering)

    Raises:
        RecurrenceError: If any job's expression is malformed
    """
    slot_grid = build_slot_grid(days, grid)
    stats = empty_render_stats()

    for job in jobs:
        for occurrence in occurrences_between(job, start, end):
            slot = find_slot(slot_grid, occurrence)
            attach_symbol(slot, job["symbol"], stats, grid["display_mode"])

    return slot_grid, stats


def next_run(job: Job, after: pendulum.DateTime) -> Optional[pendulum.DateTime]:
    """
    Get the first instant after a given time at which a job fires.

    Returns:
        The next run time, or None if the expression never matches again

    Raises:
        RecurrenceError: If the job's expression is malformed
    """
    try:
        iterator = croniter(job["expression"], pendulum_to_python(after))
        return python_to_pendulum(iterator.get_next(datetime.datetime))
    except CroniterBadDateError:
        return None
    except CroniterError as e:
        raise RecurrenceError(job, str(e)) from e
