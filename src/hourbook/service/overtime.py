# SPDX-License-Identifier: MIT

from typing import Iterable

from hourbook.model.entry import Entry
from hourbook.model.overtime import WeeklyOvertime

OVERTIME_THRESHOLD_HOURS = 40.0
OVERTIME_MULTIPLIER = 1.5


def effective_weekly_rate(week_entries: Iterable[Entry]) -> float:
    """
    The first nonzero hourly rate among the week's entries, or 0.

    A week is priced at a single rate; a rate change part-way through the
    week is not split.
    """
    for entry in week_entries:
        if entry["hourly_rate"]:
            return entry["hourly_rate"]
    return 0.0


def calculate_weekly_overtime(week_entries: Iterable[Entry]) -> WeeklyOvertime:
    """
    Split one week's hours into regular and overtime and price both.

    The caller groups entries by week; nothing here checks week boundaries.
    Money is rounded to cents, hours keep their source precision.
    """
    entry_list = list(week_entries)
    total_hours = sum((entry["hours"] for entry in entry_list), 0.0)
    rate = effective_weekly_rate(entry_list)

    if total_hours <= OVERTIME_THRESHOLD_HOURS:
        regular_hours = total_hours
        overtime_hours = 0.0
    else:
        regular_hours = OVERTIME_THRESHOLD_HOURS
        overtime_hours = total_hours - OVERTIME_THRESHOLD_HOURS

    regular_earnings = regular_hours * rate
    overtime_earnings = overtime_hours * rate * OVERTIME_MULTIPLIER

    return {
        "total_hours": total_hours,
        "hourly_rate": rate,
        "regular_hours": regular_hours,
        "overtime_hours": overtime_hours,
        "regular_earnings": round(regular_earnings, 2),
        "overtime_earnings": round(overtime_earnings, 2),
        "total_earnings": round(regular_earnings + overtime_earnings, 2),
    }
