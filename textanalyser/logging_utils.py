"""Logging helpers for textanalyser."""
import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED = False

LOG_LEVEL_ENV = "TEXTANALYSER_LOG_LEVEL"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the package logger to write to stderr through rich.

    The TEXTANALYSER_LOG_LEVEL environment variable takes precedence over
    the level passed in. Later calls only adjust the level.

    Args:
        level: Level name such as "DEBUG" or "WARNING"

    Returns:
        The package logger
    """
    global _CONFIGURED
    logger = logging.getLogger("textanalyser")

    level_name = (os.environ.get(LOG_LEVEL_ENV) or level or "WARNING").upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    if _CONFIGURED:
        return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    _CONFIGURED = True
    return logger
