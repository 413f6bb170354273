# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "cronview"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_JOBS_PATH: Path = DATA_PATH / "jobs.yaml"

ALLOWED_HOURS_PER_LINE = [1, 2, 3, 4, 6, 8, 12, 24]
ALLOWED_RANGES = ["day", "week"]
ALLOWED_DISPLAYS = ["dot", "count", "list"]


class Configuration(TypedDict):
    jobs_path: Optional[str]
    default_range: str
    default_hours_per_line: int
    default_display: str
    terminal_width: Optional[int]


def default_configuration() -> Configuration:
    return {
        "jobs_path": None,
        "default_range": "day",
        "default_hours_per_line": 12,
        "default_display": "count",
        "terminal_width": None,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and point DATA_JOBS_PATH at the configured job file.

    This must be called after the config file exists and before the job
    repository is used.
    """
    global DATA_JOBS_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if not isinstance(config, dict):
        return

    jobs_path_setting = config.get("jobs_path")
    if jobs_path_setting is not None:
        DATA_JOBS_PATH = Path(jobs_path_setting).expanduser()
    else:
        DATA_JOBS_PATH = DATA_PATH / "jobs.yaml"
