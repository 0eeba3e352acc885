"""
Errors raised by the physical body model.
"""


class PhysicalBodyError(Exception):
    """Base class for all physical body errors."""


class InvalidOperationError(PhysicalBodyError):
    """Raised when an operation is not permitted for the body variant."""


class NoRotationError(PhysicalBodyError, ValueError):
    """Raised when a rotation period is requested for a non-rotating axis."""


class ZeroMassError(PhysicalBodyError, ZeroDivisionError):
    """Raised when a force is applied to a body without mass."""
