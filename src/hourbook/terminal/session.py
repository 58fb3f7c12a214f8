# SPDX-License-Identifier: MIT

from typing import Optional, cast

import typer

from hourbook.model.session import Session
from hourbook.repository.configuration import CONFIGURATION_REPO


def build_session(user_id: Optional[str]) -> Session:
    config = CONFIGURATION_REPO.get_config()
    return {
        "user_id": user_id if user_id else config["user_id"],
        "hourly_rate": config["hourly_rate"],
    }


def get_session(ctx: typer.Context) -> Session:
    """The session the root callback stored on the click context."""
    if ctx.obj is None:
        ctx.obj = build_session(None)
    return cast(Session, ctx.obj)


def cache_rollups_enabled() -> bool:
    return CONFIGURATION_REPO.get_config()["cache_rollups"]
