# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from hourbook.model.entry import Entry, EntrySummary
from hourbook.service.entry import entry_earnings
from hourbook.time import (
    date_from_str,
    date_range_to_display_str,
    date_to_display_str,
    today,
)
from hourbook.view.state import get_view_options
from hourbook.view.view.util import (
    format_hours,
    format_money,
    format_optional_text,
)
from hourbook.view.view.views.header import header


def week_view(
    user_id: str,
    entries: list[Entry],
    summary: EntrySummary,
    columns: list[str] = ["date", "weekday", "hours", "rate", "coworker", "notes"],
    no_wrap: Optional[bool] = None,
) -> None:
    """Display one Monday-Sunday week, placeholders included."""
    if no_wrap is None:
        no_wrap = get_view_options()["no_wrap"]
    first = date_from_str(entries[0]["date"])
    last = date_from_str(entries[-1]["date"])
    header(user_id, f"week of {date_range_to_display_str(first, last)}")

    week_table = Table(box=box.SIMPLE)
    for column in columns:
        if no_wrap and column in ("coworker", "notes"):
            week_table.add_column(column, no_wrap=True, overflow="ellipsis")
        elif column in ("hours", "rate", "earnings"):
            week_table.add_column(column, justify="right")
        else:
            week_table.add_column(column)

    current_day = today()
    for entry in entries:
        row = []
        for column in columns:
            column_value = ""
            if column == "date":
                column_value = date_to_display_str(date_from_str(entry["date"]))
            elif column == "weekday":
                column_value = entry["weekday"]
            elif column == "hours":
                column_value = format_hours(entry["hours"])
            elif column == "rate":
                column_value = (
                    format_money(entry["hourly_rate"]) if entry["hourly_rate"] else "-"
                )
            elif column == "earnings":
                column_value = format_money(entry_earnings(entry))
            elif column == "coworker":
                column_value = format_optional_text(entry["coworker"])
            elif column == "notes":
                column_value = format_optional_text(entry["notes"])
            row.append(column_value)

        style = "bold" if entry["date"] == current_day.format("YYYY-MM-DD") else None
        week_table.add_row(*row, style=style)

    console = Console()
    console.print(week_table)

    summary_table = Table(box=box.SIMPLE, show_header=False)
    summary_table.add_column("metric", style="cyan")
    summary_table.add_column("value", justify="right")
    summary_table.add_row("total hours", format_hours(summary["total_hours"]))
    summary_table.add_row("days worked", str(summary["days_worked"]))
    summary_table.add_row("average hours", f"{summary['average_hours']:.2f}")
    summary_table.add_row("earnings", format_money(summary["total_earnings"]))
    console.print(summary_table)
