"""
Logging setup for pdf_digest.

Modules log through ``logging.getLogger(__name__)``; the runner calls
``setup_logging`` once to attach a console handler to the package logger.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "pdf_digest"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level.

    Returns:
        The configured ``pdf_digest`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger
