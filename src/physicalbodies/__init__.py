"""
physicalbodies
==============
Kinematic and dynamic state of rigid physical bodies: position, velocity,
acceleration, rotation, mass, charge, momentum and energy.
"""
from physicalbodies.model.bodies import (
    ExtendedBody,
    MassPoint,
    PhysicalBody,
    PointMassBody,
    create_body,
)
from physicalbodies.model.enums import Axis, BodyKind, TimeUnit
from physicalbodies.model.exceptions import (
    InvalidOperationError,
    NoRotationError,
    PhysicalBodyError,
    ZeroMassError,
)
from physicalbodies.model.force import Force
from physicalbodies.model.vector import Vector

__all__ = [
    "Axis",
    "BodyKind",
    "ExtendedBody",
    "Force",
    "InvalidOperationError",
    "MassPoint",
    "NoRotationError",
    "PhysicalBody",
    "PhysicalBodyError",
    "PointMassBody",
    "TimeUnit",
    "Vector",
    "ZeroMassError",
    "create_body",
]
