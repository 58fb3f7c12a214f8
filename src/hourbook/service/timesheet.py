# SPDX-License-Identifier: MIT

"""
Orchestration between the stores and the pure rollup engine.

Every write is persisted first and the affected rollups are recomputed
from entries right after; reports always recompute rather than trusting
the cache.
"""

import logging
from typing import Any, Optional, TypedDict

from hourbook.model.entry import Entry, EntrySummary
from hourbook.model.period import PeriodType
from hourbook.model.report import PeriodReport
from hourbook.model.rollup import Rollup
from hourbook.model.time_off import TimeOff
from hourbook.repository.entry import ENTRY_REPO
from hourbook.repository.rollup import ROLLUP_REPO
from hourbook.repository.time_off import TIME_OFF_REPO
from hourbook.service.aggregate import chart_data
from hourbook.service.comparison import compare
from hourbook.service.entry import (
    generate_summary,
    parse_non_negative,
    validate_entry_fields,
    week_entries_with_placeholders,
)
from hourbook.service.period import (
    PERIOD_TYPES,
    period_dates,
    period_id,
    previous_period_date,
    validate_period_type,
    week_dates,
)
from hourbook.service.rollup import calculate_rollup, get_affected_period_ids
from hourbook.time import DateLike, to_date

logger = logging.getLogger(__name__)


class WeekView(TypedDict):
    entries: list[Entry]
    summary: EntrySummary


def compute_period_rollup(
    user_id: str,
    period_type: str,
    date: DateLike,
    default_rate: float = 0.0,
) -> Rollup:
    dates = period_dates(period_type, date)
    entries = ENTRY_REPO.load_entries(user_id, dates["start"], dates["end"])
    time_off = TIME_OFF_REPO.load_time_off(user_id, dates["start"], dates["end"])
    return calculate_rollup(
        entries,
        dates["start"],
        dates["end"],
        time_off=time_off,
        default_rate=default_rate,
    )


def refresh_rollups(
    user_id: str,
    date: DateLike,
    default_rate: float = 0.0,
) -> dict[str, Rollup]:
    """Recompute and cache the rollup of every period containing date."""
    affected = get_affected_period_ids(date)
    rollups: dict[str, Rollup] = {}
    for period_type in PERIOD_TYPES:
        rollup = compute_period_rollup(user_id, period_type, date, default_rate)
        ROLLUP_REPO.save_rollup(user_id, period_type, affected[period_type], rollup)
        rollups[period_type] = rollup
        logger.debug(
            "Refreshed %s rollup %s for user %s",
            period_type,
            affected[period_type],
            user_id,
        )
    ROLLUP_REPO.flush()
    return rollups


def record_entry(
    user_id: str,
    date: DateLike,
    fields: dict[str, Any],
    default_rate: float = 0.0,
    cache_rollups: bool = True,
) -> Entry:
    """
    Validate and persist a change to one day's entry.

    A brand-new entry snapshots default_rate unless fields carries an
    explicit hourly_rate. The affected rollups are recomputed once the
    entry is on disk.
    """
    validated = validate_entry_fields(fields)
    entry = ENTRY_REPO.save_entry(
        user_id, to_date(date), validated, default_rate=default_rate
    )
    ENTRY_REPO.flush()
    if cache_rollups:
        refresh_rollups(user_id, date, default_rate)
    return entry


def record_time_off(
    user_id: str,
    date: DateLike,
    pto_hours: Optional[float | str] = None,
    holiday_hours: Optional[float | str] = None,
    default_rate: float = 0.0,
    cache_rollups: bool = True,
) -> TimeOff:
    """Validate and persist one week's PTO and holiday hours."""
    pto: Optional[float] = None
    holiday: Optional[float] = None
    if pto_hours is not None:
        pto = parse_non_negative("pto_hours", pto_hours)
    if holiday_hours is not None:
        holiday = parse_non_negative("holiday_hours", holiday_hours)
    time_off = TIME_OFF_REPO.save_time_off(user_id, date, pto, holiday)
    TIME_OFF_REPO.flush()
    if cache_rollups:
        # Time off counts toward the periods containing the week's Monday
        refresh_rollups(user_id, week_dates(date)[0], default_rate)
    return time_off


def load_week(user_id: str, date: DateLike) -> WeekView:
    days = week_dates(date)
    stored = ENTRY_REPO.load_entries(user_id, days[0], days[-1])
    return {
        "entries": week_entries_with_placeholders(stored, date),
        "summary": generate_summary(stored),
    }


def build_period_report(
    user_id: str,
    period_type: str,
    date: DateLike,
    default_rate: float = 0.0,
    cache_rollups: bool = True,
) -> PeriodReport:
    """
    Current rollup, previous rollup, their comparison and chart buckets.

    Both rollups are recomputed from entries so that a stale cache is
    never what the user sees.
    """
    valid_period_type: PeriodType = validate_period_type(period_type)
    current_id = period_id(valid_period_type, date)
    previous_date = previous_period_date(valid_period_type, date)
    previous_id = period_id(valid_period_type, previous_date)

    rollup = compute_period_rollup(user_id, valid_period_type, date, default_rate)
    previous_rollup = compute_period_rollup(
        user_id, valid_period_type, previous_date, default_rate
    )

    if cache_rollups:
        ROLLUP_REPO.save_rollup(user_id, valid_period_type, current_id, rollup)
        ROLLUP_REPO.save_rollup(
            user_id, valid_period_type, previous_id, previous_rollup
        )
        ROLLUP_REPO.flush()

    return {
        "user_id": user_id,
        "period_type": valid_period_type,
        "period_id": current_id,
        "rollup": rollup,
        "previous_period_id": previous_id,
        "previous_rollup": previous_rollup
        if previous_rollup["total_hours"] > 0
        else None,
        "comparison": compare(rollup, previous_rollup),
        "chart_data": chart_data(rollup["entries"], valid_period_type),
    }
