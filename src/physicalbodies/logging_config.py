"""
Logging Configuration
Sets up the logger for the physicalbodies package.
"""
import logging
import sys
from typing import List, Optional

from physicalbodies.config import LOG_DATE_FORMAT, LOG_FORMAT, get_log_level

PACKAGE_LOGGER_NAME = "physicalbodies"


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'physicalbodies' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO). When omitted,
            the level is taken from the PHYSICALBODIES_LOG_LEVEL environment variable.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = get_log_level()

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    # Reconfiguring replaces previous handlers instead of stacking them
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")
    return logger
