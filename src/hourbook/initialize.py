# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from hourbook import configuration
from hourbook.logger import configure_logging
from hourbook.repository.configuration import CONFIGURATION_REPO
from hourbook.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    configuration.DATA_USERS_DIR.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config.get("log_level", "WARNING"))
    view_state.update_view_options(show_header=config["show_header"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
