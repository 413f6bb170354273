# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich.console import Console
from rich.table import Table

from cronview.color import STYLE_COLORS
from cronview.model.job import Job
from cronview.model.render import Style
from cronview.time import datetime_to_display_datetime_str


def jobs_view(
    jobs: list[Job],
    next_runs: list[Optional[pendulum.DateTime]],
    console: Optional[Console] = None,
) -> None:
    """
    Display the jobs with their calendar symbols and next run time.

    Args:
        jobs: Jobs to display, in index order
        next_runs: Next run time of each job (None if it never fires again)
        console: Console to print to (defaults to a new stdout console)
    """
    if console is None:
        console = Console()

    if len(jobs) == 0:
        console.print("No jobs found", style=STYLE_COLORS[Style.NOTICE])
        return

    table = Table()
    table.add_column("Symbol", style=STYLE_COLORS[Style.SYMBOL], justify="center")
    table.add_column("Expression", style="cyan")
    table.add_column("Job", style="magenta")
    table.add_column("Next run")

    for job, next_run in zip(jobs, next_runs):
        table.add_row(
            job["symbol"],
            job["expression"],
            job["label"],
            datetime_to_display_datetime_str(next_run) if next_run else "never",
        )

    console.print(table)
