# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer

from cronview.model.job import Job
from cronview.repository.job import JOB_REPO, JobFileError, JobRepository
from cronview.service.occurrence import RecurrenceError, next_run
from cronview.service.symbol import build_jobs
from cronview.terminal.message import print_error
from cronview.time import python_to_pendulum
from cronview.view.job import jobs_view


def load_jobs(jobs_file: Optional[Path]) -> list[Job]:
    """
    Load the jobs from the given file, or from the configured job file.

    Raises:
        typer.Exit: If the job file cannot be read
    """
    repository = JOB_REPO if jobs_file is None else JobRepository(jobs_file)
    try:
        definitions = repository.get_all_job_definitions()
    except (JobFileError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(1)
    return build_jobs(definitions)


def jobs(
    jobs_file: Annotated[
        Optional[Path],
        typer.Option(
            "--jobs-file",
            "-f",
            help="YAML job file or crontab (defaults to the configured job file)",
        ),
    ] = None,
) -> None:
    """List the jobs with their calendar symbol and next run time."""
    loaded_jobs = load_jobs(jobs_file)
    now = python_to_pendulum(pendulum.now("local"))

    next_runs: list[Optional[pendulum.DateTime]] = []
    for job in loaded_jobs:
        try:
            next_runs.append(next_run(job, now))
        except RecurrenceError as e:
            print_error(str(e))
            raise typer.Exit(1)

    jobs_view(loaded_jobs, next_runs)
