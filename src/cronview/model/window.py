# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import pendulum

RangeType = Literal["day", "week"]


class Window(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime
    days: list[pendulum.DateTime]  # midnight of every day in the window
