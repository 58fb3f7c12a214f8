# SPDX-License-Identifier: MIT

from typing import TypedDict


class Session(TypedDict):
    """Per-invocation context handed from the terminal layer to services."""

    user_id: str
    hourly_rate: float
