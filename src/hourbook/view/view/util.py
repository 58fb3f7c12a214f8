# SPDX-License-Identifier: MIT

from typing import Optional

from hourbook.service.comparison import format_comparison


def format_money(value: float) -> str:
    return f"${value:,.2f}"


def format_hours(value: float) -> str:
    return f"{value:.1f}"


def format_optional_text(value: Optional[str]) -> str:
    return value if value else "-"


def format_change(
    change: float,
    change_percent: Optional[float] = None,
    currency: bool = False,
) -> str:
    """
    Comparison line for a summary card, e.g. '+$40.00 (+5.0%) vs previous'.

    Returns 'No change' when nothing moved.
    """
    if change == 0 and not change_percent:
        return "No change"

    color = "green" if change >= 0 else "red"
    text = format_comparison(change, currency=currency)
    if change_percent is not None:
        text += f" ({format_comparison(change_percent, percent=True)})"
    return f"[{color}]{text} vs previous[/{color}]"


def render_bar(value: float, maximum: float, width: int = 30) -> str:
    if maximum <= 0 or value <= 0:
        return ""
    return "█" * max(1, round(width * value / maximum))
