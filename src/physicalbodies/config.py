"""
Configuration & Global Constants
================================
This module serves as the central registry for package-wide constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents report labels and defaults from being hardcoded
   in several places throughout the code.
2. Environment: It resolves the log level requested through the
   PHYSICALBODIES_LOG_LEVEL environment variable.

Exports:
    REPORT_SEPARATOR (str): Separator between label and value in body reports.
    DEFAULT_TIME_UNIT (TimeUnit): Unit used for rotation periods by default.
    LOG_LEVEL_ENV_VAR (str): Name of the environment variable for the log level.
"""
import logging
import os
from typing import Optional

from physicalbodies.model.enums import TimeUnit


# Global Constants
REPORT_SEPARATOR: str = "----------"
DEFAULT_TIME_UNIT: TimeUnit = TimeUnit.SECOND
LOG_LEVEL_ENV_VAR: str = "PHYSICALBODIES_LOG_LEVEL"

# Format: Time - Module - Level - Message
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"


def get_log_level(default: int = logging.INFO) -> int:
    """
    Resolve the log level from the environment.

    Accepts level names ("DEBUG", "warning") or numeric strings ("10").
    Unknown values fall back to `default`.
    """
    raw: Optional[str] = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return default

    raw = raw.strip()
    if raw.isdigit():
        return int(raw)

    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for unknown names
    if isinstance(level, int):
        return level
    return default
