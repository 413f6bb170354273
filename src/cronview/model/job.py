# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict


class JobDefinition(TypedDict):
    expression: str  # cron expression, e.g. "*/15 * * * *" or "@daily"
    command: str
    description: NotRequired[Optional[str]]


class JobFile(TypedDict):
    jobs: list[JobDefinition]


class Job(TypedDict):
    index: int
    symbol: str
    expression: str
    label: str  # shown in the list legend
