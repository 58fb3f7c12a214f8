# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich import box
from rich.console import Console
from rich.table import Table

from hourbook.model.time_off import TimeOff
from hourbook.repository.time_off import TIME_OFF_REPO
from hourbook.service.entry import EntryValidationError
from hourbook.service.timesheet import record_time_off
from hourbook.terminal.custom_typer import AliasedTyperGroup
from hourbook.terminal.parse import parse_date
from hourbook.terminal.session import cache_rollups_enabled, get_session
from hourbook.time import date_from_str, date_to_display_str, today
from hourbook.view.view.util import format_hours
from hourbook.view.view.views.header import header

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __time_off_view(user_id: str, time_off: TimeOff) -> None:
    header(
        user_id,
        f"time off, week of {date_to_display_str(date_from_str(time_off['week_id']))}",
    )
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("kind", style="cyan")
    table.add_column("hours", justify="right")
    table.add_row("pto", format_hours(time_off["pto_hours"]))
    table.add_row("holiday", format_hours(time_off["holiday_hours"]))
    Console().print(table)


@app.command("set, s", no_args_is_help=True)
def set(
    ctx: typer.Context,
    date: Annotated[
        pendulum.Date,
        typer.Argument(parser=parse_date, help="any day in the week"),
    ],
    pto: Annotated[
        Optional[str], typer.Option("--pto", "-p", help="paid time off hours")
    ] = None,
    holiday: Annotated[
        Optional[str], typer.Option("--holiday", "-hd", help="holiday hours")
    ] = None,
) -> None:
    """Record PTO and holiday hours for the week containing date."""
    session = get_session(ctx)
    try:
        time_off = record_time_off(
            session["user_id"],
            date,
            pto_hours=pto,
            holiday_hours=holiday,
            default_rate=session["hourly_rate"],
            cache_rollups=cache_rollups_enabled(),
        )
    except EntryValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    __time_off_view(session["user_id"], time_off)


@app.command("view, v")
def view(
    ctx: typer.Context,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Argument(parser=parse_date, help="any day in the week"),
    ] = None,
) -> None:
    session = get_session(ctx)
    day = date if date is not None else today()
    __time_off_view(
        session["user_id"], TIME_OFF_REPO.load_weekly_time_off(session["user_id"], day)
    )
