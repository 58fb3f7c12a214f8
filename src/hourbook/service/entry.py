# SPDX-License-Identifier: MIT

import logging
import math
from typing import Any, Iterable, Optional

import pendulum

from hourbook.model.entry import Entry, EntrySummary
from hourbook.service.period import week_dates, weekday_name
from hourbook.template.entry import get_entry_template
from hourbook.time import DateLike, date_to_str, datetime_from_str_optional, to_date

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("hours", "hourly_rate", "coworker", "notes")


class EntryValidationError(Exception):
    """Raised when entry validation fails."""

    pass


def coerce_number(value: Any) -> float:
    """
    Lenient numeric parsing for hours and rates.

    Anything that is not a finite, non-negative number (None, blank or
    non-numeric strings, NaN, negatives) becomes 0.0 so that partially
    written records never break aggregation.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _is_malformed_number(value: Any) -> bool:
    if value is None or value == "":
        return False
    if isinstance(value, bool):
        return True
    try:
        number = float(value)
    except (TypeError, ValueError):
        return True
    return not math.isfinite(number) or number < 0


def _coerce_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text if text != "" else None


def normalize_entry(raw: dict[str, Any]) -> Entry:
    """
    Build a typed Entry from a raw stored document.

    This is the single place the lenient-parsing policy is applied; the
    aggregation code downstream trusts the numeric fields it receives.
    """
    if not isinstance(raw, dict):
        raise EntryValidationError("Entry document is not a mapping.")
    if "date" not in raw or raw["date"] is None:
        raise EntryValidationError("Entry document has no date.")
    try:
        date = to_date(str(raw["date"]))
    except ValueError:
        raise EntryValidationError(f"Entry document has a malformed date: {raw['date']!r}")

    hours = coerce_number(raw.get("hours"))
    hourly_rate = coerce_number(raw.get("hourly_rate"))
    for field in ("hours", "hourly_rate"):
        original = raw.get(field)
        if _is_malformed_number(original):
            logger.warning(
                "Coerced malformed %s %r to 0 for %s", field, original, date_to_str(date)
            )

    created = raw.get("created")
    updated = raw.get("updated")
    return {
        "date": date_to_str(date),
        "weekday": weekday_name(date),
        "hours": hours,
        "hourly_rate": hourly_rate,
        "coworker": _coerce_text(raw.get("coworker")),
        "notes": _coerce_text(raw.get("notes")),
        "created": datetime_from_str_optional(created)
        if isinstance(created, str)
        else created,
        "updated": datetime_from_str_optional(updated)
        if isinstance(updated, str)
        else updated,
    }


def entry_date(entry: Entry) -> pendulum.Date:
    return to_date(entry["date"])


def filter_by_period(
    entries: Iterable[Entry],
    start: DateLike,
    end: DateLike,
) -> list[Entry]:
    """
    Select the entries whose date lies in the closed range [start, end].

    Bounds are compared at day granularity; any time-of-day component is
    dropped first. Input order is preserved.
    """
    start_date = to_date(start)
    end_date = to_date(end)
    return [entry for entry in entries if start_date <= entry_date(entry) <= end_date]


def week_entries_with_placeholders(
    entries: Iterable[Entry],
    date: DateLike,
) -> list[Entry]:
    """
    Return the Monday-Sunday entries of the week containing date.

    Missing days are filled with zero-hours placeholders for display. The
    placeholders are never persisted and never fed into aggregation.
    """
    by_date = {entry["date"]: entry for entry in entries}
    week: list[Entry] = []
    for day in week_dates(date):
        existing = by_date.get(date_to_str(day))
        week.append(existing if existing is not None else get_entry_template(day))
    return week


def entry_earnings(entry: Entry) -> float:
    return entry["hours"] * entry["hourly_rate"]


def generate_summary(entries: Iterable[Entry]) -> EntrySummary:
    """Naive (no overtime) totals for the week grid."""
    entry_list = list(entries)
    total_hours = sum((entry["hours"] for entry in entry_list), 0.0)
    days_worked = len([entry for entry in entry_list if entry["hours"] > 0])
    average_hours = total_hours / days_worked if days_worked > 0 else 0.0
    total_earnings = sum((entry_earnings(entry) for entry in entry_list), 0.0)
    return {
        "total_hours": round(total_hours, 2),
        "days_worked": days_worked,
        "average_hours": round(average_hours, 2),
        "total_earnings": round(total_earnings, 2),
    }


def parse_non_negative(field: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise EntryValidationError(f"{field} must be a number. Got: {value!r}")
    if not math.isfinite(number):
        raise EntryValidationError(f"{field} must be a finite number. Got: {value!r}")
    if number < 0:
        raise EntryValidationError(f"{field} cannot be negative. Got: {value!r}")
    return number


def validate_entry_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """
    Validate user-supplied fields before they are written.

    Unlike normalize_entry this is strict: negative or non-numeric hours
    and rates are rejected rather than coerced.
    """
    validated: dict[str, Any] = {}
    for field, value in fields.items():
        if field not in EDITABLE_FIELDS:
            raise EntryValidationError(f"Unknown entry field: {field}")
        if field in ("hours", "hourly_rate"):
            number = parse_non_negative(field, value)
            if field == "hours" and number > 24:
                raise EntryValidationError(
                    f"hours cannot exceed 24 in a single day. Got: {value!r}"
                )
            validated[field] = number
        else:
            validated[field] = _coerce_text(value)
    return validated
