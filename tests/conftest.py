"""Shared helpers and fixtures for the cronview tests.

Reference day: Mon 2024-01-15. Reference week: Mon 2024-01-15 through
Sun 2024-01-21.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pendulum
import pytest

from cronview import configuration
from cronview.initialize import initialize
from cronview.model.grid import DisplayMode, GridConfig
from cronview.model.job import Job
from cronview.model.render import Line
from cronview.repository.configuration import CONFIGURATION_REPO
from cronview.repository.job import JOB_REPO
from cronview.service.layout import resolve_layout
from cronview.service.render import line_text
from cronview.service.symbol import build_jobs

# ---------------------------------------------------------------------------
# Reference dates
# ---------------------------------------------------------------------------
MONDAY = pendulum.naive(2024, 1, 15)
WEDNESDAY = pendulum.naive(2024, 1, 17)
SUNDAY = pendulum.naive(2024, 1, 21)


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def make_grid(
    terminal_width: int = 80,
    hours_per_line: int = 8,
    display: str = "count",
) -> GridConfig:
    """Grid config for a terminal width.

    >>> make_grid()["column_width"]
    9
    """
    grid, _ = resolve_layout(terminal_width, hours_per_line, DisplayMode(display))
    return grid


def make_jobs(*expressions: str) -> list[Job]:
    """Jobs labelled job-0, job-1, ... for the given cron expressions."""
    return build_jobs(
        [
            {"expression": expression, "command": f"job-{index}"}
            for index, expression in enumerate(expressions)
        ]
    )


def at(day: pendulum.DateTime, hour: int, minute: int = 0, second: int = 0):
    """Wall-clock instant on a reference day."""
    return day.add(hours=hour, minutes=minute, seconds=second)


def texts(lines: list[Line]) -> list[str]:
    return [line_text(line) for line in lines]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def app_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config and data paths at a temporary directory and initialize."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_JOBS_PATH", data_path / "jobs.yaml")
    monkeypatch.delenv("FORCE_COLOR", raising=False)

    CONFIGURATION_REPO.reset()
    JOB_REPO.reset()
    initialize()

    yield tmp_path

    CONFIGURATION_REPO.reset()
    JOB_REPO.reset()


@pytest.fixture
def write_jobs(tmp_path: Path):
    """Write a YAML job file and return its path."""

    def _write(*entries: tuple[str, str], name: str = "jobs.yaml") -> Path:
        path = tmp_path / name
        lines = ["jobs:"]
        for expression, command in entries:
            lines.append(f'  - expression: "{expression}"')
            lines.append(f'    command: "{command}"')
        if not entries:
            lines = ["jobs: []"]
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write
