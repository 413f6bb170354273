# SPDX-License-Identifier: MIT

from cronview.model.render import Style

# Rich styles for the style tags produced by the calendar renderer
STYLE_COLORS: dict[Style, str] = {
    Style.BAND_LOW: "bold bright_green",
    Style.BAND_MEDIUM: "bold bright_yellow",
    Style.BAND_HIGH: "bold bright_red",
    Style.BAND_DEFAULT: "white",
    Style.TITLE: "bright_white on blue",
    Style.NOTICE: "red",
    Style.SYMBOL: "red",
}

WARNING_COLOR = "yellow"
ERROR_COLOR = "red"
