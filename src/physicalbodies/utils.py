from physicalbodies.model.constants import SECONDS_PER_UNIT
from physicalbodies.model.enums import TimeUnit


def seconds_to(seconds: float, unit: TimeUnit) -> float:
    """Convert a duration in seconds to the given time unit."""
    return seconds / SECONDS_PER_UNIT[TimeUnit(unit)]

def to_seconds(value: float, unit: TimeUnit) -> float:
    """Convert a duration in the given time unit to seconds."""
    return value * SECONDS_PER_UNIT[TimeUnit(unit)]
