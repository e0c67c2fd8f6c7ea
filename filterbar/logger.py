"""Logging configuration for filterbar using loguru.

The package disables its own log output on import. Applications that want
to see it call setup_logger().
"""

import sys
from typing import Optional

from loguru import logger

PACKAGE = "filterbar"

_handler_ids: list[int] = []


def setup_logger(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    console_output: bool = True,
) -> None:
    """Enable filterbar logging and add its sinks.

    Calling it again replaces the sinks added by the previous call.

    Args:
        log_level: Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a log file to write to
        console_output: Whether to output to stderr
    """
    while _handler_ids:
        logger.remove(_handler_ids.pop())

    only_filterbar = {PACKAGE: log_level, "": False}

    if console_output:
        _handler_ids.append(logger.add(
            sys.stderr,
            level=log_level,
            filter=only_filterbar,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            colorize=True,
        ))

    if log_file:
        _handler_ids.append(logger.add(
            log_file,
            level=log_level,
            filter=only_filterbar,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            encoding="utf-8",
        ))

    logger.enable(PACKAGE)


def disable_logger() -> None:
    """Silence filterbar logging and drop the sinks added by setup_logger()."""
    while _handler_ids:
        logger.remove(_handler_ids.pop())
    logger.disable(PACKAGE)
