# locloom/log_config.py
"""Logging configuration for the locloom library using Loguru.

locloom logs through the shared Loguru ``logger`` re-exported here. As a
library it stays silent until the application opts in: records emitted from
the ``locloom`` package are disabled at import, and `configure_logging`
(or `enable_logging`) turns them back on.
"""

import sys

from loguru import logger

__all__ = ["LOGGER_NAME", "configure_logging", "disable_logging", "enable_logging", "logger"]

LOGGER_NAME = "locloom"

logger.disable(LOGGER_NAME)


def enable_logging() -> None:
    """Let records from the locloom package reach the configured sinks."""
    logger.enable(LOGGER_NAME)


def disable_logging() -> None:
    """Silence the locloom package again, leaving other sinks untouched."""
    logger.disable(LOGGER_NAME)


def configure_logging(level: str = "INFO", sink=sys.stderr, *, locloom_only: bool = False):
    """
    Configures Loguru logger and enables locloom's own records.

    Removes default handlers and adds a new one with the specified level and sink.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "file.log").
        locloom_only: Only pass records emitted from the locloom package to
            the sink, leaving the application's own records out.
    """
    enable_logging()
    logger.remove()  # Remove default handler
    logger.add(
        sink,
        level=level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        filter=LOGGER_NAME if locloom_only else None,
        colorize=sink is sys.stderr,  # Only colorize if writing to stderr
        backtrace=True,
        diagnose=True,
    )
    logger.info(
        f"Loguru logger configured with level={level.upper()} writing to {sink}"
    )
