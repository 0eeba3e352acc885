"""
Unit conversion constants.
"""
from typing import Dict

from physicalbodies.model.enums import TimeUnit

MINUTE_SECONDS: float = 60.0
HOUR_SECONDS: float = 60.0 * MINUTE_SECONDS
DAY_SECONDS: float = 24.0 * HOUR_SECONDS
WEEK_SECONDS: float = 7.0 * DAY_SECONDS
YEAR_SECONDS: float = 365.25 * DAY_SECONDS  # Julian year
MONTH_SECONDS: float = YEAR_SECONDS / 12.0

SECONDS_PER_UNIT: Dict[TimeUnit, float] = {
    TimeUnit.SECOND: 1.0,
    TimeUnit.MINUTE: MINUTE_SECONDS,
    TimeUnit.HOUR: HOUR_SECONDS,
    TimeUnit.DAY: DAY_SECONDS,
    TimeUnit.WEEK: WEEK_SECONDS,
    TimeUnit.MONTH: MONTH_SECONDS,
    TimeUnit.YEAR: YEAR_SECONDS,
}
