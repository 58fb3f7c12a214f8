# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from hourbook.terminal import configuration, entry, report, time_off
from hourbook.terminal.custom_typer import OrderedAliasedTyperGroup
from hourbook.terminal.session import build_session
from hourbook.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="hourbook - Work hours, earnings and overtime in the CLI",
    no_args_is_help=True,
)
app.add_typer(entry.app, name="entry, e")
app.add_typer(report.app, name="report, r")
app.add_typer(time_off.app, name="timeoff, to")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    ctx: typer.Context,
    user: Annotated[
        Optional[str],
        typer.Option(
            "--user",
            "-u",
            help="Data set to use instead of the configured user_id",
        ),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    no_wrap: Annotated[
        bool,
        typer.Option(
            "--no-wrap",
            "-nw",
            help="Truncate long coworker and notes columns",
        ),
    ] = False,
) -> None:
    """
    hourbook - Work hours, earnings and overtime in the CLI

    Global options that apply to all commands.
    """
    ctx.obj = build_session(user)
    if no_header:
        view_state.update_view_options(show_header=False)
    if no_wrap:
        view_state.update_view_options(no_wrap=True)


def run() -> None:
    app()
