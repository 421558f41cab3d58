# graphloom/log_config.py
"""Logging configuration for graphloom using Loguru.

Every module logs through the shared ``logger`` imported from here, so a
single call to :func:`configure_logging` controls the whole library.
"""

import sys

from loguru import logger


def configure_logging(level: str = "INFO", sink=sys.stderr):
    """
    Configures Loguru logger.

    Removes default handlers and adds a new one with the specified level and sink.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "file.log").
    """
    logger.remove()
    logger.add(
        sink,
        level=level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=False,  # locals may hold client secrets
    )
    logger.info(f"Loguru logger configured with level={level.upper()} writing to {sink}")


__all__ = ["configure_logging", "logger"]
