"""Console logging configuration."""

import logging

from rich.logging import RichHandler

from .output import err_console

LOG_FORMAT = "%(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Route package logs to stderr through Rich.

    Args:
        level: Log level name or number
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("zbxexport")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
