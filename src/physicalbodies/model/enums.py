"""
Enumerations shared by the model layer.
"""
from enum import StrEnum


class Axis(StrEnum):
    X = "x"
    Y = "y"
    Z = "z"
    DEFAULT = "default"

    @property
    def component(self) -> str:
        """Name of the Vector attribute read for this axis. DEFAULT reads Z."""
        if self is Axis.DEFAULT:
            return Axis.Z.value
        return self.value


class TimeUnit(StrEnum):
    SECOND = "s"
    MINUTE = "min"
    HOUR = "h"
    DAY = "d"
    WEEK = "wk"
    MONTH = "mo"
    YEAR = "yr"


class BodyKind(StrEnum):
    """
    Closed set of body variants.

    POINT_MASS bodies own a single settable mass. EXTENDED bodies derive their
    mass from constituent mass points and reject direct assignment.
    """
    POINT_MASS = "point_mass"
    EXTENDED = "extended"

    @property
    def allows_direct_mass(self) -> bool:
        return self is BodyKind.POINT_MASS
