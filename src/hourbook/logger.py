# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler

LOGGER_NAME = "hourbook"


def configure_logging(level: str = "WARNING") -> None:
    """Attach a Rich handler to the package logger; safe to call repeatedly."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
