"""Tests for rendering the populated grid into styled lines."""

from __future__ import annotations

import pytest

from conftest import MONDAY, WEDNESDAY, make_grid, make_jobs, texts
from cronview.model.render import Style
from cronview.service.occurrence import map_occurrences
from cronview.service.render import (
    EMPTY_FIELD,
    EMPTY_SCHEDULE_NOTICE,
    band_for,
    center,
    render_calendar,
    row_width,
)
from cronview.service.window import resolve_window


def _render(expressions, display="count", range_type="day", day=MONDAY):
    jobs = make_jobs(*expressions)
    window = resolve_window(day, range_type)
    grid = make_grid(display=display)
    slot_grid, stats = map_occurrences(
        jobs, window["start"], window["end"], window["days"], grid
    )
    return render_calendar(window["days"], grid, slot_grid, stats, jobs)


class TestHelpers:
    def test_row_width(self):
        assert row_width(make_grid()) == 73

    @pytest.mark.parametrize(
        "text, width, expected",
        [
            ("ab", 5, " ab  "),
            ("ab", 6, "  ab  "),
            ("abc", 2, "abc"),
        ],
    )
    def test_center(self, text, width, expected):
        assert center(text, width) == expected

    @pytest.mark.parametrize(
        "count, band",
        [
            (1, Style.BAND_LOW),
            (3, Style.BAND_LOW),
            (4, Style.BAND_MEDIUM),
            (6, Style.BAND_MEDIUM),
            (7, Style.BAND_HIGH),
            (9, Style.BAND_HIGH),
            (10, Style.BAND_DEFAULT),
        ],
    )
    def test_band_thresholds_are_thirds(self, count, band):
        assert band_for(count, 9) == band


class TestCountMode:
    def test_hourly_job(self):
        lines = _render(["0 * * * *"])
        rendered = texts(lines)

        assert len(rendered) == 11
        assert rendered[0] == center("Legend", 73)
        assert rendered[1:4] == [
            "● - <= 0 jobs",
            "● - <= 0 jobs",
            "● - <= 1 jobs",
        ]
        assert rendered[4] == center("Monday 2024-01-15", 73)
        assert rendered[5] == "00:00  " + "".join(
            f"{hour:02d}:00    " for hour in range(1, 8)
        )
        assert len(rendered[5]) == 70
        assert rendered[6] == ("|1" + EMPTY_FIELD * 7) * 8 + "|"
        assert rendered[8] == ("|1" + EMPTY_FIELD * 7) * 8 + "|"
        assert rendered[9].startswith("16:00  17:00")

    def test_segment_styles(self):
        lines = _render(["0 * * * *"])
        assert lines[0][0][1] == Style.TITLE
        assert lines[4][0][1] == Style.TITLE
        assert lines[1][0] == ("●", Style.BAND_LOW)
        assert lines[3][0] == ("●", Style.BAND_HIGH)

        content = lines[6]
        assert content[0] == ("|", None)
        assert content[1] == ("1", Style.BAND_HIGH)
        assert content[2] == (EMPTY_FIELD, None)

    def test_two_digit_counts_use_two_lines(self):
        lines = _render(["0 12 * * *"] * 12)
        rendered = texts(lines)
        # title, 3 bands, header, then per row one label and two content lines
        assert len(rendered) == 5 + 3 * 3
        # noon is the fifth hour of the second row
        first, second = rendered[9], rendered[10]
        assert first[37] == "1"
        assert second[37] == "2"
        assert second[36] == " "
        assert second[38] == " "


class TestListMode:
    def test_colliding_jobs_spread_over_lines(self):
        lines = _render(["30 6 * * *"] * 3, display="list")
        rendered = texts(lines)

        assert len(rendered) == 21
        assert rendered[1:4] == [
            "● - <= 1 jobs",
            "● - <= 2 jobs",
            "● - <= 3 jobs",
        ]
        assert rendered[4:8] == ["a - job-0", "b - job-1", "c - job-2", ""]

        first, second, third = rendered[10:13]
        assert (first[59], second[59], third[59]) == ("a", "b", "c")
        # separators only on the first line
        assert first[54] == "|"
        assert second[54] == " "
        assert third[72] == " "

    def test_legend_lists_only_used_symbols(self):
        rendered = texts(_render(["0 9 * * *", "0 0 1 7 *"], display="list"))
        assert "a - job-0" in rendered
        assert not any(line.startswith("b - ") for line in rendered)

    def test_symbol_style(self):
        lines = _render(["0 9 * * *"], display="list")
        assert lines[4][0] == ("a", Style.SYMBOL)


class TestDotMode:
    def test_dot_glyph(self):
        rendered = texts(_render(["0 0 * * *", "0 0 * * *"], display="dot"))
        assert rendered[6].startswith("|●" + EMPTY_FIELD)
        assert rendered[6].count("●") == 1


class TestEmptySchedule:
    def test_no_jobs_day(self):
        lines = _render([])
        assert texts(lines) == [
            center("Legend", 73),
            EMPTY_SCHEDULE_NOTICE,
            center("Monday 2024-01-15", 73),
        ]
        assert lines[1][0][1] == Style.NOTICE

    def test_no_jobs_week(self):
        rendered = texts(_render([], range_type="week", day=WEDNESDAY))
        assert len(rendered) == 9
        assert rendered[2].strip() == "Monday 2024-01-15"
        assert rendered[8].strip() == "Sunday 2024-01-21"

    def test_jobs_that_never_fire(self):
        rendered = texts(_render(["0 0 1 1 *"]))
        assert rendered[1] == EMPTY_SCHEDULE_NOTICE
