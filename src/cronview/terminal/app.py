# SPDX-License-Identifier: MIT

import typer

from cronview.terminal import configuration
from cronview.terminal.calendar import calendar
from cronview.terminal.custom_typer import OrderedAliasedTyperGroup
from cronview.terminal.job import jobs

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="cronview - Calendar view of cron scheduled jobs",
    no_args_is_help=True,
)
app.command(name="calendar, cal")(calendar)
app.command(name="jobs, j")(jobs)
app.add_typer(configuration.app, name="config, c")


def run() -> None:
    app()
