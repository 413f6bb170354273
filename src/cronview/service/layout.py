# SPDX-License-Identifier: MIT

from cronview.configuration import ALLOWED_HOURS_PER_LINE
from cronview.model.grid import DisplayMode, GridConfig

MIN_COLUMN_WIDTH = 7


def column_width_for(terminal_width: int, hours_per_line: int) -> int:
    return (terminal_width - 1) // hours_per_line


def fields_per_hour(column_width: int) -> int:
    """Number of slots per hour. One column of each hour is its separator."""
    return max(column_width - 1, 1)


def minutes_per_field(column_width: int) -> float:
    return 60 / fields_per_hour(column_width)


def resolve_layout(
    terminal_width: int,
    requested_hours_per_line: int,
    display_mode: DisplayMode,
) -> tuple[GridConfig, bool]:
    """
    Fit the calendar grid to the terminal width.

    Starting from the requested hours per line, steps down through the allowed
    values until every hour gets at least MIN_COLUMN_WIDTH characters. When no
    smaller value is left the too narrow layout is kept.

    Args:
        terminal_width: Number of columns available for output
        requested_hours_per_line: One of ALLOWED_HOURS_PER_LINE
        display_mode: Glyph encoding of the slots

    Returns:
        Tuple of (grid config, whether hours per line was adjusted)
    """
    hours_per_line = requested_hours_per_line
    column_width = column_width_for(terminal_width, hours_per_line)

    selected_index = ALLOWED_HOURS_PER_LINE.index(hours_per_line)
    while column_width < MIN_COLUMN_WIDTH and selected_index > 0:
        selected_index -= 1
        hours_per_line = ALLOWED_HOURS_PER_LINE[selected_index]
        column_width = column_width_for(terminal_width, hours_per_line)

    grid: GridConfig = {
        "hours_per_line": hours_per_line,
        "column_width": column_width,
        "minutes_per_field": minutes_per_field(column_width),
        "display_mode": display_mode,
    }
    return grid, hours_per_line != requested_hours_per_line
