# SPDX-License-Identifier: MIT

import atexit

from hourbook.repository.configuration import CONFIGURATION_REPO
from hourbook.repository.entry import ENTRY_REPO
from hourbook.repository.rollup import ROLLUP_REPO
from hourbook.repository.time_off import TIME_OFF_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    ENTRY_REPO.flush()
    TIME_OFF_REPO.flush()
    ROLLUP_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
