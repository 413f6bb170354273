# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from cronview.configuration import (
    ALLOWED_DISPLAYS,
    ALLOWED_HOURS_PER_LINE,
    ALLOWED_RANGES,
)


def _quoted(values: list[str]) -> str:
    return ", ".join(f'"{value}"' for value in values)


def validate_range(range_type: Optional[str]) -> Optional[str]:
    if range_type is None:
        return None
    if range_type not in ALLOWED_RANGES:
        raise typer.BadParameter(f"Range must be one of {_quoted(ALLOWED_RANGES)}")
    return range_type


def validate_hours_per_line(hours_per_line: Optional[int]) -> Optional[int]:
    if hours_per_line is None:
        return None
    if hours_per_line not in ALLOWED_HOURS_PER_LINE:
        allowed = ", ".join(str(value) for value in ALLOWED_HOURS_PER_LINE)
        raise typer.BadParameter(f"Hours per line must be one of {allowed}")
    return hours_per_line


def validate_display(display: Optional[str]) -> Optional[str]:
    if display is None:
        return None
    if display not in ALLOWED_DISPLAYS:
        raise typer.BadParameter(
            f"Display must be one of {_quoted(ALLOWED_DISPLAYS)}"
        )
    return display


def validate_terminal_width(width: Optional[int]) -> Optional[int]:
    if width is None:
        return None
    if not isinstance(width, int) or isinstance(width, bool):
        raise typer.BadParameter("Terminal width must be a number of columns")
    if width < 2:
        raise typer.BadParameter("Terminal width must be at least 2 columns")
    return width
