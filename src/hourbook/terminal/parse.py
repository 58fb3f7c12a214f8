# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from hourbook.service.period import PERIOD_TYPES, is_valid_period_type
from hourbook.time import to_date, today


def parse_date(date_param: Optional[str | int]) -> pendulum.Date:
    """
    Parse a command-line date; defaults to today.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a signed
    offset in days from today.
    """
    if date_param is None:
        return today()

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return to_date(date)
        except ValueError:
            raise typer.BadParameter(f"Invalid date: {date}")

    if re.match(r"^[+-]?\d+$", date):
        return today().add(days=int(date))

    if date == "today" or date == "t":
        return today()
    if date == "yesterday" or date == "y":
        return today().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today().add(days=1)
    raise typer.BadParameter("Incorrect date format")


PERIOD_TYPE_ALIASES = {
    "w": "weekly",
    "week": "weekly",
    "b": "biweekly",
    "biweek": "biweekly",
    "m": "monthly",
    "month": "monthly",
    "y": "yearly",
    "year": "yearly",
}


def parse_period_type(period_type: str) -> str:
    value = period_type.strip().lower()
    value = PERIOD_TYPE_ALIASES.get(value, value)
    if not is_valid_period_type(value):
        raise typer.BadParameter(
            f"Invalid period type: {period_type}. Valid options: {', '.join(PERIOD_TYPES)}"
        )
    return value
