"""
Logging helpers for the javawriter package.

Nothing is configured on import; applications call setup_logging() when
they want to see the writer's debug output.
"""

import logging
import os
from typing import Optional


LOGGER_NAME = "javawriter"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the javawriter logger.

    Args:
        level: Logging level name; defaults to $JAVAWRITER_LOG_LEVEL or WARNING
        log_file: Optional file path for log output

    Returns:
        The configured package logger
    """
    if level is None:
        level = os.environ.get("JAVAWRITER_LOG_LEVEL", "WARNING")
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package logger (typically for __name__)."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
