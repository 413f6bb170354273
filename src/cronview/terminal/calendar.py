# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional, cast

import pendulum
import typer
from rich.console import Console

from cronview.model.grid import DisplayMode
from cronview.model.window import RangeType
from cronview.repository.configuration import CONFIGURATION_REPO
from cronview.service.layout import resolve_layout
from cronview.service.occurrence import RecurrenceError, map_occurrences
from cronview.service.render import render_calendar
from cronview.service.window import resolve_window
from cronview.terminal.job import load_jobs
from cronview.terminal.message import print_error, print_warning
from cronview.terminal.parse import parse_date
from cronview.terminal.validate import (
    validate_display,
    validate_hours_per_line,
    validate_range,
    validate_terminal_width,
)
from cronview.time import today_wall_clock
from cronview.view.calendar import calendar_view


def calendar(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    range_type: Annotated[
        Optional[str],
        typer.Option(
            "--range",
            "-r",
            callback=validate_range,
            help="Range of calendar to display (day, week)",
        ),
    ] = None,
    hours_per_line: Annotated[
        Optional[int],
        typer.Option(
            "--hours-per-line",
            "-H",
            callback=validate_hours_per_line,
            help="Number of hours per line (1, 2, 3, 4, 6, 8, 12, 24)",
        ),
    ] = None,
    display: Annotated[
        Optional[str],
        typer.Option(
            "--display",
            "-D",
            callback=validate_display,
            help="Display type of scheduled jobs (dot, count, list)",
        ),
    ] = None,
    jobs_file: Annotated[
        Optional[Path],
        typer.Option(
            "--jobs-file",
            "-f",
            help="YAML job file or crontab (defaults to the configured job file)",
        ),
    ] = None,
    width: Annotated[
        Optional[int],
        typer.Option(
            "--width",
            "-w",
            callback=validate_terminal_width,
            help="Terminal width in columns (defaults to the detected width)",
        ),
    ] = None,
) -> None:
    """Display scheduled jobs in calendar view."""
    config = CONFIGURATION_REPO.get_config()

    if date is None:
        date = today_wall_clock()
    # Settings from the config file are validated like their options
    if range_type is None:
        range_type = validate_range(config["default_range"])
    if hours_per_line is None:
        hours_per_line = validate_hours_per_line(config["default_hours_per_line"])
    if display is None:
        display = validate_display(config["default_display"])
    if width is None:
        width = validate_terminal_width(config["terminal_width"]) or Console().width

    loaded_jobs = load_jobs(jobs_file)

    grid, adjusted = resolve_layout(
        width, cast(int, hours_per_line), DisplayMode(cast(str, display))
    )
    if adjusted:
        print_warning(
            "Terminal width is too small. "
            f"Hours per line adjusted to {grid['hours_per_line']}."
        )

    window = resolve_window(date, cast(RangeType, range_type))

    try:
        slot_grid, stats = map_occurrences(
            loaded_jobs, window["start"], window["end"], window["days"], grid
        )
    except RecurrenceError as e:
        print_error(str(e))
        raise typer.Exit(1)

    calendar_view(render_calendar(window["days"], grid, slot_grid, stats, loaded_jobs))
