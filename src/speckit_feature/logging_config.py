"""
Feature Bootstrap Logging Configuration

Configurable logging with debug mode support. All output goes to stderr so
stdout stays reserved for the feature report.
"""

import os
import logging
import sys
from typing import Optional


LOGGER_NAME = "speckit_feature"


def is_debug_mode() -> bool:
    """Check the SPECIFY_DEBUG environment variable."""
    return os.environ.get("SPECIFY_DEBUG", "").lower() in ("1", "true", "yes")


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """Set up logging configuration.

    Args:
        level: Logging level (default: DEBUG if SPECIFY_DEBUG, else INFO)

    Returns:
        Configured logger
    """
    debug = is_debug_mode()
    if level is None:
        level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    if debug or level <= logging.DEBUG:
        console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    else:
        console_format = "%(message)s"

    console_handler.setFormatter(logging.Formatter(console_format))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger under the package namespace.

    Args:
        name: Logger name (will be prefixed with 'speckit_feature.')

    Returns:
        Logger instance
    """
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)

    parent = logging.getLogger(LOGGER_NAME)
    if not parent.handlers:
        setup_logging()

    return logger
