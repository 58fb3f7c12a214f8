# SPDX-License-Identifier: MIT

from typing import Any, Iterable, Mapping, Sequence

from hourbook.model.aggregate import Bucket, DayBucket, MonthBucket, WeekBucket
from hourbook.model.entry import Entry
from hourbook.service.entry import entry_date, entry_earnings
from hourbook.service.overtime import calculate_weekly_overtime
from hourbook.service.period import InvalidPeriodType, month_id
from hourbook.service.rollup import group_by_week
from hourbook.time import (
    date_from_str,
    date_to_short_display_str,
    month_to_display_str,
)


def by_day(entries: Iterable[Entry]) -> list[DayBucket]:
    """One bucket per date with naive hours x rate earnings, oldest first."""
    days: dict[str, DayBucket] = {}
    for entry in entries:
        bucket = days.setdefault(
            entry["date"], {"date": entry["date"], "hours": 0.0, "earnings": 0.0}
        )
        bucket["hours"] += entry["hours"]
        bucket["earnings"] += entry_earnings(entry)

    result: list[DayBucket] = []
    for date in sorted(days):
        bucket = days[date]
        result.append(
            {
                "date": date,
                "hours": round(bucket["hours"], 2),
                "earnings": round(bucket["earnings"], 2),
            }
        )
    return result


def by_week(entries: Iterable[Entry]) -> list[WeekBucket]:
    """One bucket per week id with overtime folded in, oldest first."""
    result: list[WeekBucket] = []
    for week, week_entries in group_by_week(entries).items():
        weekly = calculate_weekly_overtime(week_entries)
        result.append(
            {
                "week_id": week,
                "hours": round(weekly["total_hours"], 2),
                "earnings": weekly["total_earnings"],
                "regular_hours": weekly["regular_hours"],
                "overtime_hours": weekly["overtime_hours"],
                "regular_earnings": weekly["regular_earnings"],
                "overtime_earnings": weekly["overtime_earnings"],
            }
        )
    # week ids are zero-padded ISO dates, so string order is date order
    return sorted(result, key=lambda bucket: bucket["week_id"])


def by_month(entries: Iterable[Entry]) -> list[MonthBucket]:
    """
    One bucket per month id, built from overtime-adjusted weeks.

    Each week is priced first and then credited whole to the month of the
    earliest entry it contains, so a month's earnings are exactly the sum of
    its weeks' folded earnings.
    """
    months: dict[str, dict[str, float]] = {}
    for week_entries in group_by_week(entries).values():
        owner = month_id(min(entry_date(entry) for entry in week_entries))
        weekly = calculate_weekly_overtime(week_entries)
        totals = months.setdefault(
            owner,
            {
                "hours": 0.0,
                "earnings": 0.0,
                "regular_hours": 0.0,
                "overtime_hours": 0.0,
                "regular_earnings": 0.0,
                "overtime_earnings": 0.0,
            },
        )
        totals["hours"] += weekly["total_hours"]
        totals["earnings"] += weekly["total_earnings"]
        totals["regular_hours"] += weekly["regular_hours"]
        totals["overtime_hours"] += weekly["overtime_hours"]
        totals["regular_earnings"] += weekly["regular_earnings"]
        totals["overtime_earnings"] += weekly["overtime_earnings"]

    return [
        {
            "month_id": owner,
            "hours": round(months[owner]["hours"], 2),
            "earnings": round(months[owner]["earnings"], 2),
            "regular_hours": round(months[owner]["regular_hours"], 2),
            "overtime_hours": round(months[owner]["overtime_hours"], 2),
            "regular_earnings": round(months[owner]["regular_earnings"], 2),
            "overtime_earnings": round(months[owner]["overtime_earnings"], 2),
        }
        for owner in sorted(months)
    ]


def chart_data(entries: Sequence[Entry], period_type: str) -> list[Bucket]:
    """Pick the grouping that suits the period: days, weeks, or months."""
    if period_type in ("weekly", "biweekly"):
        return list(by_day(entries))
    elif period_type == "monthly":
        return list(by_week(entries))
    elif period_type == "yearly":
        return list(by_month(entries))
    raise InvalidPeriodType(period_type)


def format_chart_label(bucket: Mapping[str, Any]) -> str:
    if "date" in bucket:
        return date_to_short_display_str(date_from_str(bucket["date"]))
    elif "week_id" in bucket:
        return f"Week of {date_to_short_display_str(date_from_str(bucket['week_id']))}"
    elif "month_id" in bucket:
        return month_to_display_str(date_from_str(f"{bucket['month_id']}-01"))
    return ""
