# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional


class Style(StrEnum):
    # Occupancy bands
    BAND_LOW = "band_low"
    BAND_MEDIUM = "band_medium"
    BAND_HIGH = "band_high"
    BAND_DEFAULT = "band_default"

    # Decorations
    TITLE = "title"
    NOTICE = "notice"
    SYMBOL = "symbol"


Segment = tuple[str, Optional[Style]]
Line = list[Segment]
