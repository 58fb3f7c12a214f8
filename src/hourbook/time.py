# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, Union, cast

import pendulum

DateLike = Union[pendulum.Date, datetime.date, str]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today() -> pendulum.Date:
    return pendulum.today("local").date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def to_date(value: DateLike) -> pendulum.Date:
    """
    Normalize a date-like value to a pendulum.Date at day granularity.

    Datetimes lose their time-of-day component in their own timezone, so a
    late-evening local timestamp never slides into the next or previous day.
    Strings must be a 'YYYY-MM-DD' date, optionally followed by a time.
    """
    if isinstance(value, str):
        parsed = pendulum.parse(value[:10], exact=True)
        if not isinstance(parsed, pendulum.Date) or isinstance(
            parsed, pendulum.DateTime
        ):
            raise ValueError(f"Not a calendar date: {value!r}")
        if len(value) > 10:
            # Anything after the date must be the time of the same timestamp
            if value[10] not in ("T", " ") or not isinstance(
                pendulum.parse(value), pendulum.DateTime
            ):
                raise ValueError(f"Not a calendar date: {value!r}")
        return parsed
    if isinstance(value, datetime.datetime):
        return pendulum.date(value.year, value.month, value.day)
    if isinstance(value, pendulum.Date):
        return value
    return pendulum.date(value.year, value.month, value.day)


def date_to_str(date: pendulum.Date) -> str:
    """Canonical 'YYYY-MM-DD' form used for keys and identifiers."""
    return date.format("YYYY-MM-DD")


def date_from_str(date_str: str) -> pendulum.Date:
    return to_date(date_str)


def date_to_display_str(date: pendulum.Date) -> str:
    """e.g. 'Mon, Oct 7'"""
    return date.format("ddd, MMM D")


def date_to_short_display_str(date: pendulum.Date) -> str:
    """e.g. 'Oct 7'"""
    return date.format("MMM D")


def date_range_to_display_str(start: pendulum.Date, end: pendulum.Date) -> str:
    if start.year == end.year:
        return f"{start.format('MMM D')} - {end.format('MMM D, YYYY')}"
    return f"{start.format('MMM D, YYYY')} - {end.format('MMM D, YYYY')}"


def month_to_display_str(date: pendulum.Date) -> str:
    """e.g. 'October 2024'"""
    return date.format("MMMM YYYY")
