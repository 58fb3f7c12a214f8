# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Any, Optional

import pendulum
import typer

from hourbook.repository.entry import ENTRY_REPO
from hourbook.service.entry import EntryValidationError
from hourbook.service.export import (
    all_entries_filename,
    entries_to_csv,
    export_filename,
)
from hourbook.service.period import week_dates, week_id
from hourbook.service.timesheet import load_week, record_entry
from hourbook.terminal.custom_typer import AliasedTyperGroup
from hourbook.terminal.parse import parse_date
from hourbook.terminal.session import cache_rollups_enabled, get_session
from hourbook.time import today
from hourbook.view.view.views import entry as entry_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("set, s", no_args_is_help=True)
def set(
    ctx: typer.Context,
    date: Annotated[
        pendulum.Date,
        typer.Argument(
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ],
    hours: Annotated[
        Optional[str], typer.Option("--hours", "-hr", help="hours worked, 0-24")
    ] = None,
    rate: Annotated[
        Optional[str],
        typer.Option("--rate", "-r", help="hourly rate for this day"),
    ] = None,
    coworker: Annotated[
        Optional[str], typer.Option("--coworker", "-c", help="who you worked with")
    ] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
) -> None:
    """Record or update the entry for one day."""
    session = get_session(ctx)

    fields: dict[str, Any] = {}
    if hours is not None:
        fields["hours"] = hours
    if rate is not None:
        fields["hourly_rate"] = rate
    if coworker is not None:
        fields["coworker"] = coworker
    if notes is not None:
        fields["notes"] = notes
    if len(fields) == 0:
        typer.echo("Nothing to update: pass --hours, --rate, --coworker or --notes")
        raise typer.Exit(1)

    try:
        record_entry(
            session["user_id"],
            date,
            fields,
            default_rate=session["hourly_rate"],
            cache_rollups=cache_rollups_enabled(),
        )
    except EntryValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    week = load_week(session["user_id"], date)
    entry_report.week_view(session["user_id"], week["entries"], week["summary"])


@app.command("week, w")
def week(
    ctx: typer.Context,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Argument(
            parser=parse_date,
            help="any day in the week; defaults to today",
        ),
    ] = None,
) -> None:
    """Show the Monday-Sunday week containing date."""
    session = get_session(ctx)
    day = date if date is not None else today()
    week = load_week(session["user_id"], day)
    entry_report.week_view(
        session["user_id"],
        week["entries"],
        week["summary"],
        columns=["date", "weekday", "hours", "rate", "earnings", "coworker", "notes"],
    )


@app.command("export, x")
def export(
    ctx: typer.Context,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Argument(
            parser=parse_date,
            help="any day in the week to export; defaults to today",
        ),
    ] = None,
    all_entries: Annotated[
        bool, typer.Option("--all", "-a", help="export every stored entry")
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="file to write; defaults to ./<name>.csv"),
    ] = None,
) -> None:
    """Write entries to a CSV file."""
    session = get_session(ctx)
    day = date if date is not None else today()

    if all_entries:
        entries = ENTRY_REPO.load_all_entries(session["user_id"])
        filename = all_entries_filename()
    else:
        days = week_dates(day)
        entries = ENTRY_REPO.load_entries(session["user_id"], days[0], days[-1])
        filename = export_filename("week", week_id(day))

    target = output if output is not None else Path(filename)
    target.write_text(entries_to_csv(entries))
    typer.echo(f"Exported {len(entries)} entries to {target}")
