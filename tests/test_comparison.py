from typing import Callable

import pytest

from hourbook.model.entry import Entry
from hourbook.service.comparison import compare, format_comparison, neutral_comparison
from hourbook.service.rollup import calculate_rollup

EntryFactory = Callable[..., Entry]


def rollup_of(entry: EntryFactory, days: int, monday: int = 8):
    entries = [
        entry(f"2024-01-{monday + offset:02d}", hours=8, hourly_rate=20)
        for offset in range(days)
    ]
    return calculate_rollup(
        entries, f"2024-01-{monday:02d}", f"2024-01-{monday + 6:02d}"
    )


@pytest.mark.unit
def test_changes_against_previous_period(entry: EntryFactory) -> None:
    previous = rollup_of(entry, 4, monday=1)
    current = rollup_of(entry, 5)
    assert compare(current, previous) == {
        "hours_change": 8.0,
        "hours_change_percent": 25.0,
        "earnings_change": 160.0,
        "earnings_change_percent": 25.0,
        "days_worked_change": 1,
        "days_worked_change_percent": 25.0,
        "average_hours_change": 0.0,
        "average_hours_change_percent": 0.0,
    }


@pytest.mark.unit
def test_decrease_is_negative(entry: EntryFactory) -> None:
    comparison = compare(rollup_of(entry, 3), rollup_of(entry, 4, monday=1))
    assert comparison["hours_change"] == -8.0
    assert comparison["hours_change_percent"] == -25.0
    assert comparison["days_worked_change"] == -1


@pytest.mark.unit
def test_no_previous_period_is_neutral(entry: EntryFactory) -> None:
    current = rollup_of(entry, 5)
    assert compare(current, None) == neutral_comparison()
    assert compare(current, rollup_of(entry, 0, monday=1)) == neutral_comparison()


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, kwargs, expected",
    [
        (1.5, {}, "+1.50"),
        (0, {}, "+0.00"),
        (-2.0, {"percent": True}, "-2.0%"),
        (12, {"currency": True}, "+$12.00"),
        (-7.126, {"currency": True}, "-$7.13"),
    ],
)
def test_format_comparison(value: float, kwargs: dict, expected: str) -> None:
    assert format_comparison(value, **kwargs) == expected
