# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "hourbook"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_USERS_DIR: Path = DATA_PATH / "users"

DEFAULT_USER_ID = "default"


class Configuration(TypedDict):
    hourly_rate: float
    user_id: str
    data_path: Optional[str]
    show_header: bool
    cache_rollups: bool
    log_level: NotRequired[str]


def get_default_configuration() -> Configuration:
    return {
        "hourly_rate": 0.0,
        "user_id": DEFAULT_USER_ID,
        "data_path": None,
        "show_header": True,
        "cache_rollups": True,
        "log_level": "WARNING",
    }


def user_entries_dir(user_id: str) -> Path:
    return DATA_USERS_DIR / user_id / "entries"


def user_rollups_dir(user_id: str) -> Path:
    return DATA_USERS_DIR / user_id / "rollups"


def user_time_off_dir(user_id: str) -> Path:
    return DATA_USERS_DIR / user_id / "time_off"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories read from disk.
    """
    global DATA_PATH, DATA_USERS_DIR

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(
        APP_CONFIG_PATH.read_text(), Loader=Loader
    )
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_USERS_DIR = DATA_PATH / "users"
