# SPDX-License-Identifier: MIT

"""Display options for the current invocation, held in a context variable."""

from contextvars import ContextVar
from typing import Optional, TypedDict


class ViewOptions(TypedDict):
    show_header: bool
    no_wrap: bool  # Truncate coworker and notes columns instead of wrapping


_view_options_var: ContextVar[Optional[ViewOptions]] = ContextVar(
    "view_options", default=None
)


def get_view_options() -> ViewOptions:
    options = _view_options_var.get()
    if options is None:
        return {"show_header": True, "no_wrap": False}
    return {"show_header": options["show_header"], "no_wrap": options["no_wrap"]}


def update_view_options(
    show_header: Optional[bool] = None,
    no_wrap: Optional[bool] = None,
) -> None:
    options = get_view_options()
    if show_header is not None:
        options["show_header"] = show_header
    if no_wrap is not None:
        options["no_wrap"] = no_wrap
    _view_options_var.set(options)


def reset_view_options() -> None:
    _view_options_var.set(None)
