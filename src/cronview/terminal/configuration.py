# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from cronview import configuration
from cronview.repository.configuration import CONFIGURATION_REPO
from cronview.terminal.custom_typer import AliasedTyperGroup
from cronview.terminal.validate import (
    validate_display,
    validate_hours_per_line,
    validate_range,
    validate_terminal_width,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("jobs_path", str(configuration.DATA_JOBS_PATH))
    table.add_row("default_range", config["default_range"])
    table.add_row("default_hours_per_line", str(config["default_hours_per_line"]))
    table.add_row("default_display", config["default_display"])
    table.add_row(
        "terminal_width",
        "auto" if config["terminal_width"] is None else str(config["terminal_width"]),
    )

    console.print(table)
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}", highlight=False)


@app.command("set, s")
def set(
    jobs_path: Annotated[
        Optional[str],
        typer.Option("--jobs-path", help="Job file to read (YAML or crontab)"),
    ] = None,
    remove_jobs_path: Annotated[
        bool,
        typer.Option("--remove-jobs-path", help="Use the default job file again"),
    ] = False,
    default_range: Annotated[
        Optional[str],
        typer.Option(
            "--range",
            callback=validate_range,
            help="Default range of calendar to display (day, week)",
        ),
    ] = None,
    default_hours_per_line: Annotated[
        Optional[int],
        typer.Option(
            "--hours-per-line",
            callback=validate_hours_per_line,
            help="Default number of hours per line (1, 2, 3, 4, 6, 8, 12, 24)",
        ),
    ] = None,
    default_display: Annotated[
        Optional[str],
        typer.Option(
            "--display",
            callback=validate_display,
            help="Default display type (dot, count, list)",
        ),
    ] = None,
    terminal_width: Annotated[
        Optional[int],
        typer.Option(
            "--terminal-width",
            callback=validate_terminal_width,
            help="Fixed terminal width instead of the detected one",
        ),
    ] = None,
    remove_terminal_width: Annotated[
        bool,
        typer.Option(
            "--remove-terminal-width", help="Detect the terminal width again"
        ),
    ] = False,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        jobs_path=jobs_path,
        remove_jobs_path=remove_jobs_path,
        default_range=default_range,
        default_hours_per_line=default_hours_per_line,
        default_display=default_display,
        terminal_width=terminal_width,
        remove_terminal_width=remove_terminal_width,
    )
    CONFIGURATION_REPO.flush()
    configuration.load_data_path_configuration()

    view()
