"""Logging setup for purlinfo."""
from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "purlinfo"


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure the purlinfo logger.

    Log records go to stderr through Rich. Verbose mode enables debug
    messages; otherwise only errors are shown.

    Args:
        verbose: Whether to log debug messages.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.ERROR)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
