# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Entry(TypedDict):
    date: str  # YYYY-MM-DD, unique per user
    weekday: str  # Always derived from date
    hours: float  # 0 means no work logged
    hourly_rate: float  # Rate in effect when the entry was last written
    coworker: Optional[str]
    notes: Optional[str]
    created: Optional[pendulum.DateTime]  # None for display placeholders
    updated: Optional[pendulum.DateTime]


class EntrySummary(TypedDict):
    total_hours: float
    days_worked: int
    average_hours: float
    total_earnings: float
