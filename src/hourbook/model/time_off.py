# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class TimeOff(TypedDict):
    week_id: str  # Monday of the week, YYYY-MM-DD
    pto_hours: float
    holiday_hours: float
    updated: Optional[pendulum.DateTime]
