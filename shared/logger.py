"""Logging setup shared by all tools."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logger(name: str, level: str = "INFO", console: Optional[Console] = None) -> logging.Logger:
    """
    Configure a logger that renders through rich.

    Calling this more than once for the same name only updates the level.

    Args:
        name: Logger name (usually a package name)
        level: Logging level name (DEBUG, INFO, ...)
        console: Console to log to (defaults to stderr)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
