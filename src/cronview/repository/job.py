# SPDX-License-Identifier: MIT

import re
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from cronview import configuration
from cronview.model.job import JobDefinition

YAML_SUFFIXES = {".yaml", ".yml"}
CRON_FIELD_COUNT = 5

_ENVIRONMENT_LINE_P = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*\s*=")


class JobFileError(ValueError):
    """The job file could not be read or contains malformed entries."""


class JobRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._definitions: Optional[list[JobDefinition]] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_JOBS_PATH

    @property
    def definitions(self) -> list[JobDefinition]:
        if self._definitions is None:
            self.__load_data()
        if self._definitions is None:
            raise ValueError()
        return self._definitions

    def __load_data(self) -> None:
        if not self.path.is_file():
            raise JobFileError(f"Job file '{self.path}' does not exist")

        try:
            content = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise JobFileError(f"Job file '{self.path}' is not valid UTF-8") from e

        if self.path.suffix in YAML_SUFFIXES:
            self._definitions = parse_job_yaml(content)
        else:
            self._definitions = parse_crontab(content)

    def reset(self) -> None:
        """Drop the cached jobs so the next access reloads the job file."""
        self._definitions = None

    def get_all_job_definitions(self) -> list[JobDefinition]:
        return list(self.definitions)


def parse_job_yaml(content: str) -> list[JobDefinition]:
    """
    Parse a YAML job file of the form `jobs: [{expression, command, description}]`.

    Raises:
        JobFileError: If the YAML is invalid or an entry is missing a field
    """
    try:
        data: Any = load(content, Loader=Loader)
    except YAMLError as e:
        raise JobFileError(f"Job file is not valid YAML: {e}") from e

    if data is None:
        return []
    if not isinstance(data, dict) or not isinstance(data.get("jobs") or [], list):
        raise JobFileError("Job file must contain a 'jobs' list")

    definitions: list[JobDefinition] = []
    for position, entry in enumerate(data.get("jobs") or [], start=1):
        if not isinstance(entry, dict):
            raise JobFileError(f"Job #{position} must be a mapping")
        for key in ("expression", "command"):
            if not isinstance(entry.get(key), str) or not entry[key].strip():
                raise JobFileError(f"Job #{position} is missing '{key}'")

        definition: JobDefinition = {
            "expression": entry["expression"].strip(),
            "command": entry["command"].strip(),
        }
        if entry.get("description") is not None:
            definition["description"] = str(entry["description"])
        definitions.append(definition)

    return definitions


def parse_crontab(content: str) -> list[JobDefinition]:
    """
    Parse a crontab file.

    Blank lines, comments and environment assignments are skipped. Lines
    starting with an @ alias (e.g. @daily) use the alias as expression,
    all other lines use their first five fields.

    Raises:
        JobFileError: If a line has fewer fields than a cron entry needs
    """
    definitions: list[JobDefinition] = []

    for line_number, raw_line in enumerate(content.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#") or _ENVIRONMENT_LINE_P.match(line):
            continue

        # @reboot has no recurrence to place on a calendar
        if line.startswith("@reboot"):
            continue

        if line.startswith("@"):
            parts = line.split(None, 1)
            field_count = 1
        else:
            parts = line.split(None, CRON_FIELD_COUNT)
            field_count = CRON_FIELD_COUNT

        if len(parts) <= field_count:
            raise JobFileError(f"Line {line_number} has no command: '{line}'")

        definitions.append(
            {
                "expression": " ".join(parts[:field_count]),
                "command": parts[field_count].strip(),
            }
        )

    return definitions


JOB_REPO = JobRepository()
