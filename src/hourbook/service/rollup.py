# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, Mapping, Optional

from hourbook.model.entry import Entry
from hourbook.model.period import AffectedPeriodIds
from hourbook.model.rollup import Rollup
from hourbook.model.time_off import TimeOff
from hourbook.service.entry import entry_date, filter_by_period
from hourbook.service.overtime import calculate_weekly_overtime
from hourbook.service.period import (
    biweek_id,
    date_range,
    month_id,
    week_id,
    year_id,
)
from hourbook.time import DateLike, date_to_str, now_utc, to_date

logger = logging.getLogger(__name__)


def group_by_week(entries: Iterable[Entry]) -> dict[str, list[Entry]]:
    """Group entries by week id, preserving first-seen week order."""
    weeks: dict[str, list[Entry]] = {}
    for entry in entries:
        weeks.setdefault(week_id(entry_date(entry)), []).append(entry)
    return weeks


def calculate_rollup(
    entries: Iterable[Entry],
    period_start: DateLike,
    period_end: DateLike,
    time_off: Optional[Mapping[str, TimeOff]] = None,
    default_rate: float = 0.0,
) -> Rollup:
    """
    Compute the rollup for the closed range [period_start, period_end].

    Entries are filtered into the range, grouped by week, and each week is
    run through the overtime calculator before summing, so a partial first
    or last week is still priced on its own hours only. The result depends
    on nothing but the arguments (and the last_updated stamp), so it can be
    recomputed at any time and cached freely.

    time_off maps week ids to supplemental PTO/holiday hours. A week's time
    off is counted when its Monday lies inside the range; it is paid at the
    week's effective rate (default_rate if the week has no rated entry) and
    never counts toward the overtime threshold.
    """
    start = to_date(period_start)
    end = to_date(period_end)

    period_entries = filter_by_period(entries, start, end)
    total_hours = sum((entry["hours"] for entry in period_entries), 0.0)

    regular_hours = 0.0
    overtime_hours = 0.0
    regular_earnings = 0.0
    overtime_earnings = 0.0
    total_earnings = 0.0
    week_rates: dict[str, float] = {}

    for week, week_entries in group_by_week(period_entries).items():
        weekly = calculate_weekly_overtime(week_entries)
        regular_hours += weekly["regular_hours"]
        overtime_hours += weekly["overtime_hours"]
        regular_earnings += weekly["regular_earnings"]
        overtime_earnings += weekly["overtime_earnings"]
        total_earnings += weekly["total_earnings"]
        week_rates[week] = weekly["hourly_rate"]

    pto_hours = 0.0
    holiday_hours = 0.0
    time_off_earnings = 0.0
    if time_off is not None:
        for week, week_time_off in time_off.items():
            if not start <= to_date(week) <= end:
                continue
            rate = week_rates.get(week) or default_rate
            week_hours = week_time_off["pto_hours"] + week_time_off["holiday_hours"]
            pto_hours += week_time_off["pto_hours"]
            holiday_hours += week_time_off["holiday_hours"]
            time_off_earnings += round(week_hours * rate, 2)

    days_worked = len([entry for entry in period_entries if entry["hours"] > 0])
    average_hours_per_day = total_hours / days_worked if days_worked > 0 else 0.0

    total_days = len(date_range(start, end))
    average_including_non_work = total_hours / total_days if total_days > 0 else 0.0

    logger.debug(
        "Rolled up %d entries for %s..%s: %.2f hours",
        len(period_entries),
        date_to_str(start),
        date_to_str(end),
        total_hours,
    )

    return {
        "period_start": date_to_str(start),
        "period_end": date_to_str(end),
        "total_hours": round(total_hours, 2),
        "regular_hours": round(regular_hours, 2),
        "overtime_hours": round(overtime_hours, 2),
        "total_earnings": round(total_earnings, 2),
        "regular_earnings": round(regular_earnings, 2),
        "overtime_earnings": round(overtime_earnings, 2),
        "days_worked": days_worked,
        "total_days": total_days,
        "average_hours_per_day": round(average_hours_per_day, 2),
        "average_hours_per_day_including_non_work": round(
            average_including_non_work, 2
        ),
        "pto_hours": round(pto_hours, 2),
        "holiday_hours": round(holiday_hours, 2),
        "time_off_earnings": round(time_off_earnings, 2),
        "paid_hours": round(total_hours + pto_hours + holiday_hours, 2),
        "paid_earnings": round(total_earnings + time_off_earnings, 2),
        "entries": period_entries,
        "last_updated": now_utc(),
    }


def get_affected_period_ids(date: DateLike) -> AffectedPeriodIds:
    """Ids of every cached rollup that an edit to date's entry invalidates."""
    return {
        "weekly": week_id(date),
        "biweekly": biweek_id(date),
        "monthly": month_id(date),
        "yearly": year_id(date),
    }
