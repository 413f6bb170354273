# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.text import Text

from cronview.color import STYLE_COLORS
from cronview.model.render import Line


def line_to_text(line: Line) -> Text:
    """Convert a rendered line into a Rich Text, resolving style tags to colors."""
    text = Text(no_wrap=True)
    for segment, style in line:
        if style is None:
            text.append(segment)
        else:
            text.append(segment, style=STYLE_COLORS[style])
    return text


def calendar_view(lines: list[Line], console: Optional[Console] = None) -> None:
    """
    Print the rendered calendar.

    Args:
        lines: Output of render_calendar
        console: Console to print to (defaults to a new stdout console)
    """
    if console is None:
        console = Console()

    for line in lines:
        console.print(line_to_text(line), soft_wrap=True)
