# SPDX-License-Identifier: MIT

from typing import Optional

from hourbook.model.comparison import Comparison
from hourbook.model.rollup import Rollup


def neutral_comparison() -> Comparison:
    return {
        "hours_change": 0.0,
        "hours_change_percent": 0.0,
        "earnings_change": 0.0,
        "earnings_change_percent": 0.0,
        "days_worked_change": 0,
        "days_worked_change_percent": 0.0,
        "average_hours_change": 0.0,
        "average_hours_change_percent": 0.0,
    }


def _percent_change(change: float, previous: float) -> float:
    if previous == 0:
        return 0.0
    return round((change / previous) * 100, 1)


def compare(current: Rollup, previous: Optional[Rollup]) -> Comparison:
    """
    Signed changes from the previous period's rollup to the current one.

    A missing previous rollup, or one with no hours, is not an error: the
    first period a user ever records has nothing to compare against, so
    every change is zero.
    """
    if previous is None or not previous.get("total_hours"):
        return neutral_comparison()

    hours_change = current["total_hours"] - previous["total_hours"]
    earnings_change = current["total_earnings"] - previous["total_earnings"]
    days_worked_change = current["days_worked"] - previous["days_worked"]
    average_hours_change = (
        current["average_hours_per_day"] - previous["average_hours_per_day"]
    )

    return {
        "hours_change": round(hours_change, 2),
        "hours_change_percent": _percent_change(
            hours_change, previous["total_hours"]
        ),
        "earnings_change": round(earnings_change, 2),
        "earnings_change_percent": _percent_change(
            earnings_change, previous["total_earnings"]
        ),
        "days_worked_change": days_worked_change,
        "days_worked_change_percent": _percent_change(
            days_worked_change, previous["days_worked"]
        ),
        "average_hours_change": round(average_hours_change, 2),
        "average_hours_change_percent": _percent_change(
            average_hours_change, previous["average_hours_per_day"]
        ),
    }


def format_comparison(
    value: float,
    percent: bool = False,
    currency: bool = False,
) -> str:
    """Render a change with an explicit sign, e.g. '+1.50', '-2.0%', '+$12.00'."""
    sign = "+" if value >= 0 else "-"
    if currency:
        return f"{sign}${abs(value):.2f}"
    if percent:
        return f"{sign}{abs(value):.1f}%"
    return f"{sign}{abs(value):.2f}"
