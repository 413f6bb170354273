"""Tests for fitting the calendar grid to the terminal width."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cronview.configuration import ALLOWED_HOURS_PER_LINE
from cronview.model.grid import DisplayMode
from cronview.service.layout import MIN_COLUMN_WIDTH, fields_per_hour, resolve_layout


class TestResolveLayout:
    def test_downgrades_until_hours_fit(self):
        """80 columns cannot hold 24 or 12 hours, 8 hours get 9 columns each."""
        grid, adjusted = resolve_layout(80, 24, DisplayMode.COUNT)
        assert adjusted is True
        assert grid["hours_per_line"] == 8
        assert grid["column_width"] == 9
        assert grid["minutes_per_field"] == 7.5
        assert grid["display_mode"] == DisplayMode.COUNT

    def test_requested_value_that_fits_is_kept(self):
        grid, adjusted = resolve_layout(80, 8, DisplayMode.DOT)
        assert adjusted is False
        assert grid["hours_per_line"] == 8
        assert grid["column_width"] == 9

    def test_wide_terminal_holds_a_full_day(self):
        grid, adjusted = resolve_layout(200, 24, DisplayMode.LIST)
        assert adjusted is False
        assert grid["column_width"] == 8
        assert grid["minutes_per_field"] == pytest.approx(60 / 7)

    def test_one_hour_per_line(self):
        grid, adjusted = resolve_layout(121, 1, DisplayMode.COUNT)
        assert adjusted is False
        assert grid["column_width"] == 120
        assert grid["minutes_per_field"] == pytest.approx(60 / 119)

    def test_too_narrow_stops_at_one_hour_per_line(self):
        grid, adjusted = resolve_layout(5, 24, DisplayMode.COUNT)
        assert adjusted is True
        assert grid["hours_per_line"] == 1
        assert grid["column_width"] == 4
        assert grid["minutes_per_field"] == 20

    def test_degenerate_width_keeps_one_field_per_hour(self):
        grid, adjusted = resolve_layout(2, 1, DisplayMode.COUNT)
        assert adjusted is False
        assert grid["column_width"] == 1
        assert fields_per_hour(grid["column_width"]) == 1
        assert grid["minutes_per_field"] == 60

    @given(
        width=st.integers(min_value=2, max_value=1000),
        requested=st.sampled_from(ALLOWED_HOURS_PER_LINE),
    )
    @settings(max_examples=200)
    def test_result_is_wide_enough_or_smallest(self, width, requested):
        grid, adjusted = resolve_layout(width, requested, DisplayMode.COUNT)
        assert grid["hours_per_line"] in ALLOWED_HOURS_PER_LINE
        assert grid["hours_per_line"] <= requested
        assert adjusted == (grid["hours_per_line"] != requested)
        assert grid["column_width"] == (width - 1) // grid["hours_per_line"]
        assert (
            grid["column_width"] >= MIN_COLUMN_WIDTH or grid["hours_per_line"] == 1
        )
        # Row of hours never exceeds the terminal
        assert grid["column_width"] * grid["hours_per_line"] + 1 <= width
