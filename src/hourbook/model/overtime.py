# SPDX-License-Identifier: MIT

from typing import TypedDict


class WeeklyOvertime(TypedDict):
    total_hours: float
    hourly_rate: float  # Effective rate for the week
    regular_hours: float
    overtime_hours: float
    regular_earnings: float
    overtime_earnings: float
    total_earnings: float
