# SPDX-License-Identifier: MIT

from rich.console import Console

from cronview.color import ERROR_COLOR, WARNING_COLOR

err_console = Console(stderr=True)


def print_warning(message: str) -> None:
    err_console.print(message, style=WARNING_COLOR, markup=False, highlight=False)


def print_error(message: str) -> None:
    err_console.print(message, style=ERROR_COLOR, markup=False, highlight=False)
