"""
Logging setup for pwforge. Modules log through logging.getLogger(__name__);
the CLI calls setup_logging() once to render records with rich.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "pwforge"


def setup_logging(level: int = logging.WARNING, console: Optional[Console] = None) -> logging.Logger:
    """
    Attach a RichHandler to the package logger. Calling it again only
    updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            return logger

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
