import datetime

import pendulum
import pytest

from hourbook.service.period import (
    InvalidPeriodType,
    add_months,
    add_years,
    biweek_dates,
    biweek_id,
    date_range,
    first_monday_of_month,
    is_valid_period_type,
    navigate_period,
    next_period_date,
    period_dates,
    period_id,
    previous_period_date,
    shift_period,
    week_dates,
    week_end,
    week_id,
    week_start,
    weekday_name,
)


@pytest.mark.unit
class TestWeeks:
    def test_sunday_belongs_to_the_preceding_monday(self) -> None:
        assert week_start("2024-01-07") == pendulum.date(2024, 1, 1)
        assert week_id("2024-03-10") == "2024-03-04"

    def test_monday_starts_its_own_week(self) -> None:
        assert week_start("2024-01-08") == pendulum.date(2024, 1, 8)
        assert week_end("2024-01-08") == pendulum.date(2024, 1, 14)

    def test_week_dates_are_monday_through_sunday(self) -> None:
        days = week_dates("2024-01-10")
        assert len(days) == 7
        assert [weekday_name(day) for day in days] == [
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
            "Sunday",
        ]

    def test_datetimes_are_truncated_to_their_day(self) -> None:
        late = pendulum.datetime(2024, 1, 7, 23, 59, tz="America/New_York")
        assert week_id(late) == "2024-01-01"
        assert week_id(datetime.date(2024, 1, 7)) == "2024-01-01"


@pytest.mark.unit
class TestBiweekly:
    def test_first_monday_of_month(self) -> None:
        assert first_monday_of_month(2024, 1) == pendulum.date(2024, 1, 1)
        assert first_monday_of_month(2024, 2) == pendulum.date(2024, 2, 5)

    def test_blocks_start_at_the_months_first_monday(self) -> None:
        assert biweek_dates("2024-01-10") == {
            "start": pendulum.date(2024, 1, 1),
            "end": pendulum.date(2024, 1, 14),
        }
        assert biweek_id("2024-01-20") == "2024-01-15"

    def test_last_block_of_a_month_can_be_one_week(self) -> None:
        assert biweek_dates("2024-01-30") == {
            "start": pendulum.date(2024, 1, 29),
            "end": pendulum.date(2024, 2, 4),
        }

    def test_days_before_the_first_monday_close_the_previous_month(self) -> None:
        assert biweek_id("2024-02-02") == "2024-01-29"

    def test_previous_period_steps_over_the_short_block(self) -> None:
        assert previous_period_date("biweekly", "2024-02-05") == pendulum.date(
            2024, 1, 29
        )
        assert previous_period_date("biweekly", "2024-01-29") == pendulum.date(
            2024, 1, 15
        )
        assert next_period_date("biweekly", "2024-01-30") == pendulum.date(2024, 2, 5)


@pytest.mark.unit
class TestDispatch:
    @pytest.mark.parametrize(
        "period_type, expected_id, start, end",
        [
            ("weekly", "2024-01-15", "2024-01-15", "2024-01-21"),
            ("biweekly", "2024-01-15", "2024-01-15", "2024-01-28"),
            ("monthly", "2024-01", "2024-01-01", "2024-01-31"),
            ("yearly", "2024", "2024-01-01", "2024-12-31"),
        ],
    )
    def test_period_dates_and_ids(
        self, period_type: str, expected_id: str, start: str, end: str
    ) -> None:
        dates = period_dates(period_type, "2024-01-17")
        assert period_id(period_type, "2024-01-17") == expected_id
        assert dates["start"] == pendulum.parse(start).date()
        assert dates["end"] == pendulum.parse(end).date()

    def test_every_date_lies_in_exactly_its_own_period(self) -> None:
        for day in date_range("2023-12-01", "2024-03-31"):
            for period_type in ("weekly", "biweekly", "monthly", "yearly"):
                dates = period_dates(period_type, day)
                assert dates["start"] <= day <= dates["end"]
                assert period_id(period_type, dates["start"]) == period_id(
                    period_type, day
                )

    def test_unknown_period_type_is_rejected(self) -> None:
        assert not is_valid_period_type("fortnightly")
        with pytest.raises(InvalidPeriodType) as error:
            period_dates("fortnightly", "2024-01-01")
        assert error.value.period_type == "fortnightly"
        with pytest.raises(ValueError):
            period_id("quarterly", "2024-01-01")


@pytest.mark.unit
class TestArithmetic:
    def test_month_arithmetic_clamps_to_month_end(self) -> None:
        assert add_months("2024-01-31", 1) == pendulum.date(2024, 2, 29)
        assert add_months("2023-03-31", -1) == pendulum.date(2023, 2, 28)

    def test_year_arithmetic_clamps_leap_day(self) -> None:
        assert add_years("2024-02-29", 1) == pendulum.date(2025, 2, 28)

    def test_navigate_period(self) -> None:
        assert navigate_period("weekly", "2024-01-10", -1) == pendulum.date(2024, 1, 3)
        assert navigate_period("biweekly", "2024-01-10", 1) == pendulum.date(
            2024, 1, 24
        )
        assert navigate_period("yearly", "2024-06-01", 2) == pendulum.date(2026, 6, 1)
        with pytest.raises(InvalidPeriodType):
            navigate_period("daily", "2024-01-10", 1)

    def test_shift_period_walks_boundaries(self) -> None:
        assert shift_period("biweekly", "2024-02-10", -1) == pendulum.date(2024, 1, 29)
        assert shift_period("biweekly", "2024-02-10", -2) == pendulum.date(2024, 1, 15)
        assert shift_period("monthly", "2024-01-31", 1) == pendulum.date(2024, 2, 1)
        assert shift_period("weekly", "2024-01-10", 0) == pendulum.date(2024, 1, 8)

    def test_date_range_is_inclusive(self) -> None:
        days = date_range("2024-02-27", "2024-03-01")
        assert [day.day for day in days] == [27, 28, 29, 1]
        assert date_range("2024-03-01", "2024-02-27") == []
