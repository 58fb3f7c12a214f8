# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from hourbook.view.state import get_view_options


def header(user_id: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the active data set.

    Args:
        user_id: The data set the report was built from
        sub_header: Optional sub-header text to display
    """
    if not get_view_options()["show_header"]:
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"
    user = f"[plum1]{user_id}[/plum1]"

    print(Padding("[dark_orange]hourbook[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(user, (0, 1)))
