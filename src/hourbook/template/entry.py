# SPDX-License-Identifier: MIT

import pendulum

from hourbook.model.entry import Entry
from hourbook.service.period import weekday_name
from hourbook.time import date_to_str


def get_entry_template(date: pendulum.Date) -> Entry:
    return {
        "date": date_to_str(date),
        "weekday": weekday_name(date),
        "hours": 0.0,
        "hourly_rate": 0.0,
        "coworker": None,
        "notes": None,
        "created": None,
        "updated": None,
    }
