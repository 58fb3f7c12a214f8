# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from hourbook.model.entry import Entry


class Rollup(TypedDict):
    period_start: str
    period_end: str
    total_hours: float
    regular_hours: float
    overtime_hours: float
    total_earnings: float
    regular_earnings: float
    overtime_earnings: float
    days_worked: int
    total_days: int
    average_hours_per_day: float
    average_hours_per_day_including_non_work: float

    # Supplemental non-worked hours, kept apart from worked hours
    pto_hours: float
    holiday_hours: float
    time_off_earnings: float
    paid_hours: float
    paid_earnings: float

    entries: list[Entry]
    last_updated: pendulum.DateTime
