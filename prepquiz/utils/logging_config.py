"""Logging configuration helpers for the quiz application."""

import logging
from logging import Logger

from rich.logging import RichHandler

_configured = False


def configure_logging(level: str | int = logging.WARNING) -> Logger:
    """Configure Rich-backed logging once and return the package logger."""
    global _configured
    if not _configured:
        logging.basicConfig(
            level=level,
            format="%(name)s | %(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        )
        _configured = True
    logger = logging.getLogger("prepquiz")
    logger.setLevel(level)
    return logger
