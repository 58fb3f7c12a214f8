# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer

from hourbook.model.report import PeriodReport
from hourbook.service.export import export_filename, report_to_csv
from hourbook.service.period import InvalidPeriodType, shift_period
from hourbook.service.timesheet import build_period_report
from hourbook.terminal.custom_typer import AliasedTyperGroup
from hourbook.terminal.parse import parse_date, parse_period_type
from hourbook.terminal.session import cache_rollups_enabled, get_session
from hourbook.time import today
from hourbook.view.view.views import report as period_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

PERIOD_TYPE_HELP = "valid inputs: weekly, biweekly, monthly, yearly (or w, b, m, y)"


def __build_report(
    ctx: typer.Context,
    period_type: str,
    date: Optional[pendulum.Date],
    offset: int,
) -> PeriodReport:
    session = get_session(ctx)
    day = date if date is not None else today()
    try:
        if offset != 0:
            day = shift_period(period_type, day, offset)
        return build_period_report(
            session["user_id"],
            period_type,
            day,
            default_rate=session["hourly_rate"],
            cache_rollups=cache_rollups_enabled(),
        )
    except InvalidPeriodType as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("show, s")
def show(
    ctx: typer.Context,
    period_type: Annotated[
        str,
        typer.Argument(parser=parse_period_type, help=PERIOD_TYPE_HELP),
    ] = "weekly",
    date: Annotated[
        Optional[pendulum.Date],
        typer.Argument(
            parser=parse_date,
            help="any day in the period; defaults to today",
        ),
    ] = None,
    offset: Annotated[
        int,
        typer.Option(
            "--offset",
            "-o",
            help="periods to move from date, e.g. -1 for the previous period",
        ),
    ] = 0,
) -> None:
    """Hours, earnings, overtime and comparison for one period."""
    report = __build_report(ctx, period_type, date, offset)
    period_report.period_report_view(report)


@app.command("export, x")
def export(
    ctx: typer.Context,
    period_type: Annotated[
        str,
        typer.Argument(parser=parse_period_type, help=PERIOD_TYPE_HELP),
    ] = "weekly",
    date: Annotated[
        Optional[pendulum.Date],
        typer.Argument(
            parser=parse_date,
            help="any day in the period; defaults to today",
        ),
    ] = None,
    offset: Annotated[int, typer.Option("--offset", "-o")] = 0,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", help="file to write; defaults to ./<name>.csv"),
    ] = None,
) -> None:
    """Write a period report to a CSV file."""
    report = __build_report(ctx, period_type, date, offset)
    target = (
        output
        if output is not None
        else Path(export_filename(report["period_type"], report["period_id"]))
    )
    target.write_text(report_to_csv(report))
    typer.echo(f"Exported {report['period_type']} report {report['period_id']} to {target}")
