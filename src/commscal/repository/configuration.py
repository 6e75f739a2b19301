# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from commscal import configuration

logger = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        config = configuration.get_default_configuration()
        if configuration.APP_CONFIG_PATH.is_file():
            stored = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
            # keys added in later versions fall back to their defaults
            if stored is not None:
                config.update(stored)
        self._config = self.__clamp_hours(config)

    def __clamp_hours(
        self, config: configuration.Configuration
    ) -> configuration.Configuration:
        # the day timeline has one row per hour 0-23
        start_hour = min(max(int(config["day_start_hour"]), 0), 23)
        end_hour = min(max(int(config["day_end_hour"]), start_hour), 23)
        if (start_hour, end_hour) != (config["day_start_hour"], config["day_end_hour"]):
            logger.warning(
                "day hours %s-%s out of range, using %s-%s",
                config["day_start_hour"],
                config["day_end_hour"],
                start_hour,
                end_hour,
            )
        config["day_start_hour"] = start_hour
        config["day_end_hour"] = end_hour
        return config

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def reset(self) -> None:
        self._config = None


CONFIGURATION_REPO = ConfigurationRepository()
