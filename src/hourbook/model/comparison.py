# SPDX-License-Identifier: MIT

from typing import TypedDict


class Comparison(TypedDict):
    hours_change: float
    hours_change_percent: float
    earnings_change: float
    earnings_change_percent: float
    days_worked_change: int
    days_worked_change_percent: float
    average_hours_change: float
    average_hours_change_percent: float
