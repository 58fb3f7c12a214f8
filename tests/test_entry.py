import logging
from typing import Callable

import pendulum
import pytest

from hourbook.model.entry import Entry
from hourbook.service.entry import (
    EntryValidationError,
    coerce_number,
    filter_by_period,
    generate_summary,
    normalize_entry,
    validate_entry_fields,
    week_entries_with_placeholders,
)

EntryFactory = Callable[..., Entry]


@pytest.mark.unit
class TestCoerceNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (8, 8.0),
            ("7.5", 7.5),
            (None, 0.0),
            ("", 0.0),
            ("abc", 0.0),
            (float("nan"), 0.0),
            (-3, 0.0),
            (True, 0.0),
        ],
    )
    def test_coerce_number(self, value: object, expected: float) -> None:
        assert coerce_number(value) == expected


@pytest.mark.unit
class TestNormalizeEntry:
    def test_fills_weekday_and_defaults(self) -> None:
        entry = normalize_entry({"date": "2024-01-10", "hours": "6"})
        assert entry["weekday"] == "Wednesday"
        assert entry["hours"] == 6.0
        assert entry["hourly_rate"] == 0.0
        assert entry["coworker"] is None
        assert entry["notes"] is None

    def test_blank_text_becomes_none(self) -> None:
        entry = normalize_entry({"date": "2024-01-10", "coworker": "  ", "notes": "ok"})
        assert entry["coworker"] is None
        assert entry["notes"] == "ok"

    def test_parses_timestamps(self) -> None:
        entry = normalize_entry(
            {"date": "2024-01-10", "created": "2024-01-10T12:00:00+00:00"}
        )
        assert entry["created"] == pendulum.datetime(2024, 1, 10, 12)

    def test_logs_coerced_values(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="hourbook"):
            entry = normalize_entry({"date": "2024-01-10", "hours": "lots"})
        assert entry["hours"] == 0.0
        assert "Coerced malformed hours" in caplog.text

    def test_zero_is_not_reported_as_malformed(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="hourbook"):
            normalize_entry({"date": "2024-01-10", "hours": 0, "hourly_rate": "0"})
        assert caplog.text == ""

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            {"date": None},
            {"date": "2024-13-40"},
            {"date": "2024-01-05x"},
            ["2024-01-05"],
        ],
    )
    def test_rejects_missing_or_malformed_date(self, raw: object) -> None:
        with pytest.raises(EntryValidationError):
            normalize_entry(raw)


@pytest.mark.unit
class TestFilterAndSummary:
    def test_filter_is_inclusive_and_keeps_order(self, entry: EntryFactory) -> None:
        entries = [
            entry("2024-01-14"),
            entry("2024-01-07"),
            entry("2024-01-08"),
            entry("2024-01-15"),
        ]
        selected = filter_by_period(entries, "2024-01-08", "2024-01-14")
        assert [e["date"] for e in selected] == ["2024-01-14", "2024-01-08"]

    def test_filter_drops_time_of_day(self, entry: EntryFactory) -> None:
        entries = [entry("2024-01-14")]
        end = pendulum.datetime(2024, 1, 14, 0, 0, 1)
        assert len(filter_by_period(entries, "2024-01-08", end)) == 1

    def test_placeholders_fill_the_week(self, entry: EntryFactory) -> None:
        week = week_entries_with_placeholders(
            [entry("2024-01-09", hours=5, coworker="Sam")], "2024-01-12"
        )
        assert [e["date"] for e in week] == [
            "2024-01-08",
            "2024-01-09",
            "2024-01-10",
            "2024-01-11",
            "2024-01-12",
            "2024-01-13",
            "2024-01-14",
        ]
        assert week[1]["coworker"] == "Sam"
        assert week[0]["hours"] == 0.0
        assert week[0]["created"] is None

    def test_summary_ignores_overtime(self, entry: EntryFactory) -> None:
        entries = [entry(f"2024-01-{day:02d}", hours=9, hourly_rate=20) for day in range(8, 13)]
        entries.append(entry("2024-01-13", hours=0))
        summary = generate_summary(entries)
        assert summary == {
            "total_hours": 45.0,
            "days_worked": 5,
            "average_hours": 9.0,
            "total_earnings": 900.0,
        }

    def test_summary_of_nothing(self) -> None:
        assert generate_summary([]) == {
            "total_hours": 0.0,
            "days_worked": 0,
            "average_hours": 0.0,
            "total_earnings": 0.0,
        }


@pytest.mark.unit
class TestValidateEntryFields:
    def test_accepts_and_converts(self) -> None:
        assert validate_entry_fields(
            {"hours": "7.5", "hourly_rate": 20, "notes": " shift "}
        ) == {"hours": 7.5, "hourly_rate": 20.0, "notes": "shift"}

    @pytest.mark.parametrize(
        "fields",
        [
            {"hours": "-1"},
            {"hours": "eight"},
            {"hours": 25},
            {"hourly_rate": "nan"},
            {"weekday": "Friday"},
        ],
    )
    def test_rejects_bad_input(self, fields: dict) -> None:
        with pytest.raises(EntryValidationError):
            validate_entry_fields(fields)

    def test_non_finite_numbers_have_their_own_message(self) -> None:
        with pytest.raises(EntryValidationError, match="finite"):
            validate_entry_fields({"hourly_rate": "inf"})
        with pytest.raises(EntryValidationError, match="negative"):
            validate_entry_fields({"hourly_rate": "-1"})
