# SPDX-License-Identifier: MIT

import csv
import io
from typing import Any, Iterable

from hourbook.model.entry import Entry
from hourbook.model.report import PeriodReport
from hourbook.service.comparison import format_comparison
from hourbook.service.entry import entry_earnings
from hourbook.time import date_to_str, today

ENTRY_HEADERS = [
    "Date",
    "Weekday",
    "Hours",
    "Coworker",
    "Notes",
    "Hourly Rate",
    "Total Earnings",
]


def _money(value: float) -> str:
    return f"{value:.2f}"


def _hours(value: float) -> str:
    return f"{value:g}"


def _write_entry_rows(writer: Any, entries: Iterable[Entry]) -> None:
    sorted_entries = sorted(entries, key=lambda entry: entry["date"])
    total_hours = 0.0
    total_earnings = 0.0

    writer.writerow(ENTRY_HEADERS)
    for entry in sorted_entries:
        earnings = entry_earnings(entry)
        total_hours += entry["hours"]
        total_earnings += earnings
        writer.writerow(
            [
                entry["date"],
                entry["weekday"],
                _hours(entry["hours"]),
                entry["coworker"] or "",
                entry["notes"] or "",
                _money(entry["hourly_rate"]),
                _money(earnings),
            ]
        )
    writer.writerow([])
    writer.writerow(
        [
            "TOTALS",
            "",
            _hours(round(total_hours, 2)),
            "",
            "",
            "",
            f"${_money(total_earnings)}",
        ]
    )


def entries_to_csv(entries: Iterable[Entry]) -> str:
    """Entry rows sorted by date, a blank line, then a TOTALS line."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    _write_entry_rows(writer, entries)
    return buffer.getvalue()


def report_to_csv(report: PeriodReport) -> str:
    """
    A full period report: identification, rollup summary, comparison with
    the previous period, then the entry rows and totals.
    """
    rollup = report["rollup"]
    comparison = report["comparison"]

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    writer.writerow(["Period Type", report["period_type"]])
    writer.writerow(["Period", report["period_id"]])
    writer.writerow(["Start", rollup["period_start"]])
    writer.writerow(["End", rollup["period_end"]])
    writer.writerow([])

    writer.writerow(["Summary", "Value"])
    writer.writerow(["Total Hours", _money(rollup["total_hours"])])
    writer.writerow(["Regular Hours", _money(rollup["regular_hours"])])
    writer.writerow(["Overtime Hours", _money(rollup["overtime_hours"])])
    writer.writerow(["Regular Earnings", _money(rollup["regular_earnings"])])
    writer.writerow(["Overtime Earnings", _money(rollup["overtime_earnings"])])
    writer.writerow(["Total Earnings", _money(rollup["total_earnings"])])
    if rollup["pto_hours"] or rollup["holiday_hours"]:
        writer.writerow(["PTO Hours", _money(rollup["pto_hours"])])
        writer.writerow(["Holiday Hours", _money(rollup["holiday_hours"])])
        writer.writerow(["Time Off Earnings", _money(rollup["time_off_earnings"])])
        writer.writerow(["Paid Hours", _money(rollup["paid_hours"])])
        writer.writerow(["Paid Earnings", _money(rollup["paid_earnings"])])
    writer.writerow(["Days Worked", rollup["days_worked"]])
    writer.writerow(["Total Days", rollup["total_days"]])
    writer.writerow(["Average Hours/Day", _money(rollup["average_hours_per_day"])])
    writer.writerow(
        [
            "Average Hours/Day (all days)",
            _money(rollup["average_hours_per_day_including_non_work"]),
        ]
    )
    writer.writerow([])

    writer.writerow(["Compared To", report["previous_period_id"]])
    writer.writerow(
        [
            "Hours Change",
            format_comparison(comparison["hours_change"]),
            format_comparison(comparison["hours_change_percent"], percent=True),
        ]
    )
    writer.writerow(
        [
            "Earnings Change",
            format_comparison(comparison["earnings_change"], currency=True),
            format_comparison(comparison["earnings_change_percent"], percent=True),
        ]
    )
    writer.writerow(
        [
            "Days Worked Change",
            f"{comparison['days_worked_change']:+d}",
            format_comparison(comparison["days_worked_change_percent"], percent=True),
        ]
    )
    writer.writerow(
        [
            "Average Hours Change",
            format_comparison(comparison["average_hours_change"]),
            format_comparison(
                comparison["average_hours_change_percent"], percent=True
            ),
        ]
    )
    writer.writerow([])

    _write_entry_rows(writer, rollup["entries"])
    return buffer.getvalue()


def export_filename(kind: str, ident: str) -> str:
    if kind == "week":
        return f"work-hours-week-{ident}.csv"
    elif kind == "all":
        return f"work-hours-all-{ident}.csv"
    return f"work-hours-{kind}-{ident}.csv"


def all_entries_filename() -> str:
    return export_filename("all", date_to_str(today()))
