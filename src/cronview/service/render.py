# SPDX-License-Identifier: MIT

import math

import pendulum

from cronview.model.grid import DisplayMode, GridConfig, RenderStats, Slot, SlotGrid
from cronview.model.job import Job
from cronview.model.render import Line, Segment, Style
from cronview.service.grid import HOURS_PER_DAY, get_slot
from cronview.time import datetime_to_display_day_str, datetime_to_display_hour_str

EMPTY_SCHEDULE_NOTICE = "Your job list looks empty, let's add some scheduled jobs!"
LEGEND_TITLE = "Legend"

OCCUPIED_DOT = "●"
EMPTY_FIELD = "⎯"
SEPARATOR = "|"


def row_width(grid: GridConfig) -> int:
    return grid["column_width"] * grid["hours_per_line"] + 1


def center(text: str, width: int) -> str:
    """Pad text on both sides, putting the odd space on the right."""
    padding = max(width - len(text), 0)
    left = padding // 2
    return " " * left + text + " " * (padding - left)


def band_for(occupant_count: int, max_occupants: int) -> Style:
    """
    Get the density band of a slot.

    Args:
        occupant_count: Number of occurrences in the slot
        max_occupants: Largest occupant count of any slot in the calendar

    Returns:
        The band style, thresholds being thirds of max_occupants
    """
    step = max_occupants / 3

    if occupant_count <= step:
        return Style.BAND_LOW
    if occupant_count <= step * 2:
        return Style.BAND_MEDIUM
    if occupant_count <= step * 3:
        return Style.BAND_HIGH
    return Style.BAND_DEFAULT


def glyph_for(slot: Slot, display_mode: DisplayMode, max_occupants: int) -> Segment:
    occupants = slot["occupants"]
    if not occupants:
        return (EMPTY_FIELD, None)

    style = band_for(len(occupants), max_occupants)
    if display_mode == DisplayMode.COUNT:
        return (str(len(occupants)), style)
    if display_mode == DisplayMode.LIST:
        return ("".join(occupants), style)
    return (OCCUPIED_DOT, style)


def line_text(line: Line) -> str:
    return "".join(text for text, _ in line)


def render_legend(grid: GridConfig, stats: RenderStats, jobs: list[Job]) -> list[Line]:
    lines: list[Line] = [[(center(LEGEND_TITLE, row_width(grid)), Style.TITLE)]]

    if stats["max_occupants"] == 0:
        lines.append([(EMPTY_SCHEDULE_NOTICE, Style.NOTICE)])
        return lines

    step = stats["max_occupants"] / 3
    for multiplier, band in (
        (1, Style.BAND_LOW),
        (2, Style.BAND_MEDIUM),
        (3, Style.BAND_HIGH),
    ):
        lines.append(
            [
                (OCCUPIED_DOT, band),
                (f" - <= {math.floor(step * multiplier)} jobs", None),
            ]
        )

    if grid["display_mode"] == DisplayMode.LIST:
        for job in jobs:
            if job["symbol"] in stats["used_symbols"]:
                lines.append(
                    [(job["symbol"], Style.SYMBOL), (f" - {job['label']}", None)]
                )
        lines.append([])

    return lines


def render_hour_labels(day: pendulum.DateTime, row: int, grid: GridConfig) -> Line:
    """
    Build the line of hour labels shown above a row of slots.

    The first label starts at the left edge, the others are centered on the
    separator of their hour.
    """
    text = ""
    for position in range(grid["hours_per_line"]):
        hour = row * grid["hours_per_line"] + position
        padding = grid["column_width"] - (7 if position == 0 else 5)
        label = datetime_to_display_hour_str(day.add(hours=hour))
        text += label + " " * max(padding, 0)
    return [(text, None)]


def render_slot_rows(
    slot_grid: SlotGrid,
    day_index: int,
    row: int,
    grid: GridConfig,
    stats: RenderStats,
) -> list[Line]:
    """
    Build the content lines of one row of hours.

    Every glyph is spread vertically, one character per line, over
    max_glyph_width lines. Glyphs shorter than that are padded with spaces.
    """
    glyphs: list[Segment] = []
    first_hour = row * grid["hours_per_line"]
    for hour in range(first_hour, first_hour + grid["hours_per_line"]):
        glyphs.append((SEPARATOR, None))
        for field_index in range(slot_grid["fields_per_hour"]):
            slot = get_slot(slot_grid, day_index, hour, field_index)
            glyphs.append(
                glyph_for(slot, grid["display_mode"], stats["max_occupants"])
            )
    glyphs.append((SEPARATOR, None))

    lines: list[Line] = []
    for character_index in range(stats["max_glyph_width"]):
        line: Line = []
        for text, style in glyphs:
            character = text[character_index] if len(text) > character_index else " "
            line.append((character, style))
        lines.append(line)
    return lines


def render_calendar(
    days: list[pendulum.DateTime],
    grid: GridConfig,
    slot_grid: SlotGrid,
    stats: RenderStats,
    jobs: list[Job],
) -> list[Line]:
    """
    Render the populated calendar grid as styled text lines.

    Args:
        days: Midnight of every day in the window
        grid: Resolved grid layout
        slot_grid: Slots populated by map_occurrences
        stats: Statistics collected by map_occurrences
        jobs: Jobs that were mapped, used for the list legend

    Returns:
        Lines made of (text, style) segments. A style of None means unstyled.
    """
    lines = render_legend(grid, stats, jobs)
    width = row_width(grid)

    for day_index, day in enumerate(days):
        day_header = center(datetime_to_display_day_str(day), width)
        lines.append([(day_header, Style.TITLE)])

        # Nothing fires anywhere, the day header is all there is to show
        if stats["max_occupants"] == 0:
            continue

        for row in range(HOURS_PER_DAY // grid["hours_per_line"]):
            lines.append(render_hour_labels(day, row, grid))
            lines.extend(render_slot_rows(slot_grid, day_index, row, grid, stats))

    return lines
