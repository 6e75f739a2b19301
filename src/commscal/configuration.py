# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "commscal"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ENTRIES_PATH: Path = DATA_PATH / "entries.yaml"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    month_cell_width: int
    week_day_width: int
    max_events_per_cell: int
    day_start_hour: int
    day_end_hour: int


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "month_cell_width": 20,
        "week_day_width": 24,
        "max_events_per_cell": 3,
        "day_start_hour": 0,
        "day_end_hour": 23,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the entry
    repository loads any data.
    """
    global DATA_PATH, DATA_ENTRIES_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_ENTRIES_PATH = DATA_PATH / "entries.yaml"


def set_entries_path(path: Path) -> None:
    global DATA_ENTRIES_PATH
    DATA_ENTRIES_PATH = path
