"""
Logging setup for scripts that read Swinging Wild input files.
"""
import logging
import sys
from typing import Optional

from swinging_wild.config import LOGGER_NAME, LOG_FORMAT, LOG_DATE_FORMAT


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the package logger to stdout and, optionally, to a log file.

    Args:
        level: threshold applied to the logger and to every handler.
        log_file: file to write records to; truncated on each call.

    Returns:
        The configured 'swinging_wild' logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # a repeated call replaces the handlers of the previous one
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to {len(handlers)} handler(s) at level {logging.getLevelName(level)}")
    return logger
