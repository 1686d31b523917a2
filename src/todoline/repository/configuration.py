# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from todoline import configuration
from todoline.errors import ConfigurationError
from todoline.model.style import StyleOverride

log = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.config_path: Path = configuration.APP_CONFIG_PATH

    def load_path(self, config_path: Optional[Path]) -> None:
        """
        Point the repository at a config file and drop any cached config.

        Without an explicit path the default config file is used, and created
        with default settings when it does not exist yet.
        """
        self._config = None
        if config_path is None:
            self.config_path = configuration.APP_CONFIG_PATH
            self.__ensure_default_config_file()
        else:
            self.config_path = config_path

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __ensure_default_config_file(self) -> None:
        if self.config_path.is_file():
            return
        log.info("Creating default config file %s", self.config_path)
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(
                dump(configuration.get_default_configuration(), Dumper=Dumper)
            )
        except OSError as e:
            raise ConfigurationError(
                f"cannot create config file {self.config_path}: {e.strerror}"
            )

    def __load_data(self) -> None:
        log.info("Reading config from %s", self.config_path)
        try:
            raw_config = load(self.config_path.read_text(), Loader=Loader)
        except OSError as e:
            raise ConfigurationError(
                f"cannot read config file {self.config_path}: {e.strerror}"
            )
        except YAMLError as e:
            raise ConfigurationError(f"invalid config file {self.config_path}: {e}")

        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ConfigurationError(
                f"invalid config file {self.config_path}: expected a mapping"
            )
        self._config = self.__fill_defaults(raw_config)

    def __fill_defaults(self, raw_config: dict[str, Any]) -> configuration.Configuration:
        config = configuration.get_default_configuration()

        general = raw_config.get("general") or {}
        if not isinstance(general, dict):
            raise ConfigurationError(
                f"invalid config file {self.config_path}: 'general' must be a mapping"
            )
        for key, value in general.items():
            if key in config["general"] and value is not None:
                config["general"][key] = value  # type: ignore[literal-required]

        styles = raw_config.get("styles") or []
        if not isinstance(styles, list) or not all(
            isinstance(style, dict) and isinstance(style.get("name"), str)
            for style in styles
        ):
            raise ConfigurationError(
                f"invalid config file {self.config_path}: "
                "'styles' must be a list of entries with a name"
            )
        config["styles"] = cast(list[StyleOverride], styles)
        return config

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_settings(self) -> configuration.Settings:
        return deepcopy(self.config["general"])

    def get_styles(self) -> list[StyleOverride]:
        return deepcopy(self.config["styles"])


CONFIGURATION_REPO = ConfigurationRepository()
