# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from hourbook.model.aggregate import Bucket
from hourbook.model.comparison import Comparison
from hourbook.model.period import PeriodType
from hourbook.model.rollup import Rollup


class PeriodReport(TypedDict):
    user_id: str
    period_type: PeriodType
    period_id: str
    rollup: Rollup
    previous_period_id: str
    previous_rollup: Optional[Rollup]
    comparison: Comparison
    chart_data: list[Bucket]
