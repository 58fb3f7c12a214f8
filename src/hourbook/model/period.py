# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import pendulum

PeriodType = Literal["weekly", "biweekly", "monthly", "yearly"]


class PeriodDates(TypedDict):
    start: pendulum.Date
    end: pendulum.Date


class AffectedPeriodIds(TypedDict):
    weekly: str
    biweekly: str
    monthly: str
    yearly: str
