# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from cronview import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if not isinstance(self._config, dict):
            self._config = configuration.default_configuration()
            self.is_dirty = True
            return

        # Fill in settings added after the config file was written
        for key, value in configuration.default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]
                self.is_dirty = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        """Drop the cached config so the next access reloads it from disk."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        jobs_path: Optional[str] = None,
        remove_jobs_path: bool = False,
        default_range: Optional[str] = None,
        default_hours_per_line: Optional[int] = None,
        default_display: Optional[str] = None,
        terminal_width: Optional[int] = None,
        remove_terminal_width: bool = False,
    ) -> None:
        self.is_dirty = True

        if jobs_path is not None:
            self.config["jobs_path"] = jobs_path
        if remove_jobs_path:
            self.config["jobs_path"] = None
        if default_range is not None:
            self.config["default_range"] = default_range
        if default_hours_per_line is not None:
            self.config["default_hours_per_line"] = default_hours_per_line
        if default_display is not None:
            self.config["default_display"] = default_display
        if terminal_width is not None:
            self.config["terminal_width"] = terminal_width
        if remove_terminal_width:
            self.config["terminal_width"] = None


CONFIGURATION_REPO = ConfigurationRepository()
