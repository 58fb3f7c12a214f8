# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from hourbook.model.report import PeriodReport
from hourbook.service.aggregate import format_chart_label
from hourbook.service.entry import entry_earnings
from hourbook.time import (
    date_from_str,
    date_range_to_display_str,
    date_to_display_str,
    month_to_display_str,
)
from hourbook.view.state import get_view_options
from hourbook.view.view.util import (
    format_change,
    format_hours,
    format_money,
    format_optional_text,
    render_bar,
)
from hourbook.view.view.views.header import header


def period_title(report: PeriodReport) -> str:
    start = date_from_str(report["rollup"]["period_start"])
    end = date_from_str(report["rollup"]["period_end"])
    period_type = report["period_type"]
    if period_type == "weekly":
        return f"Week of {date_range_to_display_str(start, end)}"
    elif period_type == "biweekly":
        return f"Biweekly: {date_range_to_display_str(start, end)}"
    elif period_type == "monthly":
        return month_to_display_str(start)
    return str(start.year)


def period_report_view(
    report: PeriodReport, no_wrap: Optional[bool] = None
) -> None:
    if no_wrap is None:
        no_wrap = get_view_options()["no_wrap"]
    header(report["user_id"], period_title(report))
    console = Console()
    __summary_cards(console, report)
    __breakdown_table(console, report, no_wrap)
    __chart_table(console, report)


def __summary_cards(console: Console, report: PeriodReport) -> None:
    rollup = report["rollup"]
    comparison = report["comparison"]

    cards = Table(box=box.SIMPLE)
    cards.add_column("metric", style="cyan")
    cards.add_column("value", justify="right")
    cards.add_column(f"vs {report['previous_period_id']}")

    cards.add_row(
        "total hours",
        format_hours(rollup["total_hours"]),
        format_change(
            comparison["hours_change"], comparison["hours_change_percent"]
        ),
    )
    cards.add_row(
        "total earnings",
        format_money(rollup["total_earnings"]),
        format_change(
            comparison["earnings_change"],
            comparison["earnings_change_percent"],
            currency=True,
        ),
    )
    cards.add_row(
        "days worked",
        str(rollup["days_worked"]),
        format_change(comparison["days_worked_change"]),
    )
    cards.add_row(
        "avg hours/day",
        f"{rollup['average_hours_per_day']:.2f}",
        format_change(comparison["average_hours_change"]),
    )
    cards.add_row("regular hours", format_hours(rollup["regular_hours"]), "")
    cards.add_row("overtime hours", format_hours(rollup["overtime_hours"]), "")
    cards.add_row("regular earnings", format_money(rollup["regular_earnings"]), "")
    cards.add_row("overtime earnings", format_money(rollup["overtime_earnings"]), "")
    if rollup["pto_hours"] or rollup["holiday_hours"]:
        cards.add_row("pto hours", format_hours(rollup["pto_hours"]), "")
        cards.add_row("holiday hours", format_hours(rollup["holiday_hours"]), "")
        cards.add_row("paid earnings", format_money(rollup["paid_earnings"]), "")
    console.print(cards)


def __breakdown_table(
    console: Console, report: PeriodReport, no_wrap: bool
) -> None:
    rollup = report["rollup"]
    if len(rollup["entries"]) == 0:
        console.print("  [grey50]No entries for this period[/grey50]")
        return

    breakdown = Table(box=box.SIMPLE, show_footer=True)
    breakdown.add_column("date", footer="total")
    breakdown.add_column("weekday")
    breakdown.add_column(
        "hours", justify="right", footer=format_hours(rollup["total_hours"])
    )
    breakdown.add_column("rate", justify="right")
    breakdown.add_column(
        "earnings", justify="right", footer=format_money(rollup["total_earnings"])
    )
    for column in ("coworker", "notes"):
        if no_wrap:
            breakdown.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            breakdown.add_column(column)

    for entry in sorted(rollup["entries"], key=lambda entry: entry["date"]):
        breakdown.add_row(
            date_to_display_str(date_from_str(entry["date"])),
            entry["weekday"],
            format_hours(entry["hours"]),
            format_money(entry["hourly_rate"]),
            format_money(entry_earnings(entry)),
            format_optional_text(entry["coworker"]),
            format_optional_text(entry["notes"]),
        )
    console.print(breakdown)


def __chart_table(console: Console, report: PeriodReport) -> None:
    buckets = report["chart_data"]
    if len(buckets) == 0:
        return

    max_hours = max(bucket["hours"] for bucket in buckets)
    chart = Table(box=box.SIMPLE)
    chart.add_column("")
    chart.add_column("hours", justify="right")
    chart.add_column("")
    chart.add_column("earnings", justify="right")
    for bucket in buckets:
        chart.add_row(
            format_chart_label(bucket),
            format_hours(bucket["hours"]),
            f"[dark_orange]{render_bar(bucket['hours'], max_hours)}[/dark_orange]",
            format_money(bucket["earnings"]),
        )
    console.print(chart)
