# SPDX-License-Identifier: MIT

from typing import TypedDict, Union


class DayBucket(TypedDict):
    date: str
    hours: float
    earnings: float  # hours x rate, no overtime folding


class WeekBucket(TypedDict):
    week_id: str
    hours: float
    earnings: float
    regular_hours: float
    overtime_hours: float
    regular_earnings: float
    overtime_earnings: float


class MonthBucket(TypedDict):
    month_id: str
    hours: float
    earnings: float
    regular_hours: float
    overtime_hours: float
    regular_earnings: float
    overtime_earnings: float


Bucket = Union[DayBucket, WeekBucket, MonthBucket]
