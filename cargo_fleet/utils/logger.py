"""
Centralized logging configuration for the cargo fleet package.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)
        level: Logging level; when omitted an existing level is kept
               and a fresh logger starts at INFO

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        if level is None:
            level = logging.INFO

    if level is not None:
        logger.setLevel(level)
    return logger


def set_package_level(level: int) -> None:
    """Apply a logging level to every logger already created under cargo_fleet."""
    for name in list(logging.root.manager.loggerDict):
        if name == "cargo_fleet" or name.startswith("cargo_fleet."):
            logging.getLogger(name).setLevel(level)
