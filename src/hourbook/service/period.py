# SPDX-License-Identifier: MIT

"""
Calendar boundaries and identifiers for the four period types.

Weeks run Monday through Sunday. Biweekly periods restart every calendar
month: the first Monday on or after the 1st opens block 0 and consecutive
14-day blocks follow until the next month's first Monday, so the final
block of a month can be only 7 days long.
"""

from typing import cast

import pendulum

from hourbook.model.period import PeriodDates, PeriodType
from hourbook.time import DateLike, date_to_str, to_date

PERIOD_TYPES: tuple[PeriodType, ...] = ("weekly", "biweekly", "monthly", "yearly")

BIWEEK_LENGTH_DAYS = 14

WEEKDAY_NAMES = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


class InvalidPeriodType(ValueError):
    """Raised when a period operation receives an unknown period type."""

    def __init__(self, period_type: object) -> None:
        super().__init__(
            f"Invalid period type: {period_type!r}. "
            f"Valid options: {', '.join(PERIOD_TYPES)}"
        )
        self.period_type = period_type


def is_valid_period_type(value: object) -> bool:
    return value in PERIOD_TYPES


def validate_period_type(value: object) -> PeriodType:
    if not is_valid_period_type(value):
        raise InvalidPeriodType(value)
    return cast(PeriodType, value)


# ─────────────────────────────────────────────────────────────
# Weeks
# ─────────────────────────────────────────────────────────────


def weekday_name(date: DateLike) -> str:
    return WEEKDAY_NAMES[int(to_date(date).day_of_week)]


def week_start(date: DateLike) -> pendulum.Date:
    day = to_date(date)
    # day_of_week is Monday=0 .. Sunday=6, so Sunday rolls back 6 days
    return day.subtract(days=int(day.day_of_week))


def week_end(date: DateLike) -> pendulum.Date:
    return week_start(date).add(days=6)


def week_dates(date: DateLike) -> list[pendulum.Date]:
    monday = week_start(date)
    return [monday.add(days=offset) for offset in range(7)]


def week_id(date: DateLike) -> str:
    return date_to_str(week_start(date))


# ─────────────────────────────────────────────────────────────
# Biweekly (month-anchored)
# ─────────────────────────────────────────────────────────────


def first_monday_of_month(year: int, month: int) -> pendulum.Date:
    first = pendulum.date(year, month, 1)
    return first.add(days=(7 - int(first.day_of_week)) % 7)


def biweek_dates(date: DateLike) -> PeriodDates:
    day = to_date(date)
    anchor = first_monday_of_month(day.year, day.month)
    if day < anchor:
        # Days before this month's first Monday close out last month's blocks
        previous_month = pendulum.date(day.year, day.month, 1).subtract(months=1)
        anchor = first_monday_of_month(previous_month.year, previous_month.month)

    following_month = pendulum.date(anchor.year, anchor.month, 1).add(months=1)
    next_anchor = first_monday_of_month(following_month.year, following_month.month)

    offset = anchor.diff(day).in_days()
    start = anchor.add(days=BIWEEK_LENGTH_DAYS * (offset // BIWEEK_LENGTH_DAYS))
    end = min(start.add(days=BIWEEK_LENGTH_DAYS - 1), next_anchor.subtract(days=1))
    return {"start": start, "end": end}


def biweek_id(date: DateLike) -> str:
    return date_to_str(biweek_dates(date)["start"])


# ─────────────────────────────────────────────────────────────
# Months and years
# ─────────────────────────────────────────────────────────────


def month_dates(date: DateLike) -> PeriodDates:
    day = to_date(date)
    return {"start": day.start_of("month"), "end": day.end_of("month")}


def month_id(date: DateLike) -> str:
    return to_date(date).format("YYYY-MM")


def year_dates(date: DateLike) -> PeriodDates:
    day = to_date(date)
    return {"start": day.start_of("year"), "end": day.end_of("year")}


def year_id(date: DateLike) -> str:
    return to_date(date).format("YYYY")


# ─────────────────────────────────────────────────────────────
# Dispatch
# ─────────────────────────────────────────────────────────────


def period_dates(period_type: str, date: DateLike) -> PeriodDates:
    if period_type == "weekly":
        return {"start": week_start(date), "end": week_end(date)}
    elif period_type == "biweekly":
        return biweek_dates(date)
    elif period_type == "monthly":
        return month_dates(date)
    elif period_type == "yearly":
        return year_dates(date)
    raise InvalidPeriodType(period_type)


def period_id(period_type: str, date: DateLike) -> str:
    if period_type == "weekly":
        return week_id(date)
    elif period_type == "biweekly":
        return biweek_id(date)
    elif period_type == "monthly":
        return month_id(date)
    elif period_type == "yearly":
        return year_id(date)
    raise InvalidPeriodType(period_type)


def previous_period_date(period_type: str, date: DateLike) -> pendulum.Date:
    """Start of the period immediately before the one containing date."""
    start = period_dates(period_type, date)["start"]
    return period_dates(period_type, start.subtract(days=1))["start"]


def next_period_date(period_type: str, date: DateLike) -> pendulum.Date:
    """Start of the period immediately after the one containing date."""
    end = period_dates(period_type, date)["end"]
    return end.add(days=1)


# ─────────────────────────────────────────────────────────────
# Arithmetic
# ─────────────────────────────────────────────────────────────


def add_weeks(date: DateLike, weeks: int) -> pendulum.Date:
    return to_date(date).add(weeks=weeks)


def add_months(date: DateLike, months: int) -> pendulum.Date:
    """Calendar month arithmetic; day-of-month clamps to the target month's end."""
    return to_date(date).add(months=months)


def add_years(date: DateLike, years: int) -> pendulum.Date:
    """Calendar year arithmetic; Feb 29 clamps to Feb 28 in common years."""
    return to_date(date).add(years=years)


def navigate_period(period_type: str, date: DateLike, steps: int) -> pendulum.Date:
    if period_type == "weekly":
        return add_weeks(date, steps)
    elif period_type == "biweekly":
        return add_weeks(date, steps * 2)
    elif period_type == "monthly":
        return add_months(date, steps)
    elif period_type == "yearly":
        return add_years(date, steps)
    raise InvalidPeriodType(period_type)


def date_range(start: DateLike, end: DateLike) -> list[pendulum.Date]:
    """Every date from start to end inclusive; empty when start > end."""
    current = to_date(start)
    last = to_date(end)
    dates: list[pendulum.Date] = []
    while current <= last:
        dates.append(current)
        current = current.add(days=1)
    return dates


def shift_period(period_type: str, date: DateLike, steps: int) -> pendulum.Date:
    """
    Start of the period steps periods away from the one containing date.

    Unlike navigate_period this walks period boundaries, so it never skips
    the short biweekly block at a month's end.
    """
    current = period_dates(period_type, date)["start"]
    for _ in range(abs(steps)):
        if steps < 0:
            current = previous_period_date(period_type, current)
        else:
            current = next_period_date(period_type, current)
    return current
