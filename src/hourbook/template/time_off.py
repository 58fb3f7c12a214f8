# SPDX-License-Identifier: MIT

from hourbook.model.time_off import TimeOff


def get_time_off_template(week_id: str) -> TimeOff:
    return {
        "week_id": week_id,
        "pto_hours": 0.0,
        "holiday_hours": 0.0,
        "updated": None,
    }
