# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from cronview import configuration
from cronview.model.job import JobFile


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    # A configured jobs_path is owned by the user, only the default file is created
    if configuration.DATA_JOBS_PATH.parent != configuration.DATA_PATH:
        return
    if not configuration.DATA_JOBS_PATH.is_file():
        configuration.DATA_JOBS_PATH.touch()
        jobs: JobFile = {"jobs": []}
        configuration.DATA_JOBS_PATH.write_text(dump(jobs, Dumper=Dumper))
