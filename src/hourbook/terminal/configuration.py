# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from hourbook import configuration
from hourbook.configuration import Configuration
from hourbook.repository.configuration import (
    CONFIGURATION_REPO,
)
from hourbook.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def __enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def __configuration_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("hourly_rate", f"{config['hourly_rate']:.2f}")
    table.add_row("user_id", config["user_id"])
    table.add_row(
        "data_path",
        config["data_path"]
        if config["data_path"]
        else f"None (default: {configuration.DATA_PATH})",
    )
    table.add_row("show_header", __enabled(config["show_header"]))
    table.add_row("cache_rollups", __enabled(config["cache_rollups"]))
    table.add_row("log_level", config.get("log_level", "WARNING"))
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(__configuration_table(config))
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")
    console.print(f"Data directory: {configuration.DATA_USERS_DIR}")


@app.command("set, s", no_args_is_help=True)
def set(
    hourly_rate: Annotated[
        Optional[float],
        typer.Option(
            "--hourly-rate",
            "--rate",
            "-r",
            min=0,
            help="Rate snapshotted onto new entries",
        ),
    ] = None,
    user_id: Annotated[
        Optional[str],
        typer.Option("--user-id", "--user", help="Data set used when --user is not given"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above reports",
        ),
    ] = None,
    cache_rollups: Annotated[
        Optional[bool],
        typer.Option(
            "--cache-rollups/--no-cache-rollups",
            help="Enable/disable writing rollup snapshots after each change",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=f"One of {', '.join(LOG_LEVELS)}"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if user_id is not None and user_id.strip() == "":
        typer.echo("Error: user_id cannot be empty", err=True)
        raise typer.Exit(1)
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        typer.echo(f"Error: invalid log level: {log_level}", err=True)
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        hourly_rate=hourly_rate,
        user_id=user_id.strip() if user_id is not None else None,
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        cache_rollups=cache_rollups,
        log_level=log_level,
    )

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(__configuration_table(config, title="Updated Configuration"))
