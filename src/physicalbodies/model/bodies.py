"""
Physical Bodies
===============
Defines the mechanical state of a single rigid body and the formulas that
advance or query it.

Classes:
    PhysicalBody: Abstract base holding kinematic and dynamic state.
    PointMassBody: Body whose mass is a single settable scalar.
    ExtendedBody: Body whose mass and moment of inertia are derived from
        constituent mass points.
    MassPoint: One constituent point of an ExtendedBody.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import logging
import math
from typing import Dict, Iterable, Optional, Tuple, Type

import numpy as np

from physicalbodies.config import DEFAULT_TIME_UNIT, REPORT_SEPARATOR
from physicalbodies.model.enums import Axis, BodyKind, TimeUnit
from physicalbodies.model.exceptions import InvalidOperationError, NoRotationError, ZeroMassError
from physicalbodies.model.vector import Vector
from physicalbodies.utils import seconds_to

logger = logging.getLogger(__name__)


class PhysicalBody(ABC):
    """Abstract base class for the state of one rigid body."""

    def __init__(
        self,
        charge: float = 0.0,
        position: Optional[Vector] = None,
        velocity: Optional[Vector] = None,
        acceleration: Optional[Vector] = None,
        rotation: Optional[Vector] = None,
        rotational_acceleration: Optional[Vector] = None,
    ):
        """Initialize the body at rest at the origin unless state is given.

        Args:
            charge: Electric charge in coulombs (A·s).
            position: Position in m.
            velocity: Velocity in m/s.
            acceleration: Acceleration in m/s².
            rotation: Angular velocity per axis in rad/s.
            rotational_acceleration: Angular acceleration per axis in rad/s².
        """
        self._mass: float = 0.0
        self._moment_of_inertia: Vector = Vector()

        self.charge = charge
        self.position = position.copy() if position is not None else Vector()
        self.velocity = velocity.copy() if velocity is not None else Vector()
        self.acceleration = acceleration.copy() if acceleration is not None else Vector()
        self.rotation = rotation.copy() if rotation is not None else Vector()
        self.rotational_acceleration = (
            rotational_acceleration.copy() if rotational_acceleration is not None else Vector()
        )

    @property
    @abstractmethod
    def kind(self) -> BodyKind:
        pass

    # ------------------------------------------------------------------
    # Mass
    # ------------------------------------------------------------------
    @property
    def mass(self) -> float:
        """Mass in kg. For extended bodies, set the mass via mass points."""
        return self._mass

    @mass.setter
    def mass(self, value: float) -> None:
        self.set_mass(value)

    def set_mass(self, mass: float) -> None:
        if not self.kind.allows_direct_mass:
            logger.warning("Rejected direct mass assignment on %s body", self.kind.value)
            raise InvalidOperationError(
                f"Mass of a {self.kind.value} body is derived from its mass points; "
                "set it via the mass points instead."
            )
        self._mass = float(mass)
        logger.debug("Mass set to %s kg", self._mass)

    @property
    def moment_of_inertia(self) -> Vector:
        """Per-axis moment of inertia in kg·m². Read-only."""
        return self._moment_of_inertia.copy()

    # ------------------------------------------------------------------
    # Derived quantities
    # ------------------------------------------------------------------
    @property
    def momentum(self) -> Vector:
        return self.velocity * self._mass

    @property
    def kinetic_energy_translational(self) -> Vector:
        """Per-axis translational kinetic energy, 1/2 m v², in J."""
        return 0.5 * self._mass * self.velocity.hadamard(self.velocity)

    @property
    def kinetic_energy_rotational(self) -> Vector:
        """Per-axis rotational kinetic energy, 1/2 I ω², in J."""
        return 0.5 * self._moment_of_inertia.hadamard(self.rotation.hadamard(self.rotation))

    @property
    def total_energy(self) -> float:
        """Sum of the magnitudes of translational and rotational kinetic energy."""
        return abs(self.kinetic_energy_translational) + abs(self.kinetic_energy_rotational)

    @property
    def angular_momentum(self) -> Vector:
        """Per-axis angular momentum, I ω, in kg·m²/s."""
        return self._moment_of_inertia.hadamard(self.rotation)

    # ------------------------------------------------------------------
    # Motion
    # ------------------------------------------------------------------
    def accelerate(self, acceleration: Vector, time_delta: float) -> None:
        """Updates velocity via v = u + at."""
        self.velocity = self.velocity + acceleration * time_delta

    def move(self, time_delta: float) -> None:
        """Updates position via s = ut + 1/2 at². Velocity is left untouched."""
        self.position = self.position + (
            self.velocity * time_delta + 0.5 * self.acceleration * time_delta * time_delta
        )

    def advance(self, time_delta: float) -> None:
        """
        Perform one full constant-acceleration step.

        Moves the body, then updates velocity with the current acceleration
        and rotation with the current rotational acceleration.
        """
        self.move(time_delta)
        self.accelerate(self.acceleration, time_delta)
        self.rotation = self.rotation + self.rotational_acceleration * time_delta

    def add_translational_force(self, force: Vector) -> None:
        """
        Adds an extra force to the body, updating acceleration via F = ma.

        Forces accumulate: applying several forces in sequence superposes them.

        Raises:
            ZeroMassError: If the body has no mass.
        """
        if self._mass == 0.0:
            logger.warning("Force %s applied to a body without mass", force)
            raise ZeroMassError("Cannot apply a force to a body with zero mass.")
        self.acceleration = self.acceleration + force / self._mass

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------
    def rotation_period(self, axis: Axis, time_unit: TimeUnit = DEFAULT_TIME_UNIT) -> float:
        """
        Gives the time to complete one full rotation about the given axis.

        Args:
            axis: Axis to measure. DEFAULT measures about Z.
            time_unit: Desired time unit of the returned value.

        Returns:
            Rotation period, 2π / ω, in the desired time unit.

        Raises:
            NoRotationError: If the angular velocity on the axis is zero.
        """
        axis = Axis(axis)
        rate: float = getattr(self.rotation, axis.component)
        if rate == 0:
            message = (
                "Object is not rotating!" if axis is Axis.DEFAULT
                else "There is no rotation on this axis!"
            )
            logger.warning("Rotation period requested on axis %s: %s", axis.value, message)
            raise NoRotationError(message)

        period_seconds = 2 * math.pi / rate
        return seconds_to(period_seconds, time_unit)

    # ------------------------------------------------------------------
    # Report
    # ------------------------------------------------------------------
    def describe(self) -> str:
        """Fixed-order, human-readable report of the body state."""
        rows = [
            ("Mass", self._mass, "kg"),
            ("Position", self.position, None),
            ("Velocity", self.velocity, "m/s"),
            ("Momentum", self.momentum, "kg m/s"),
            ("Acceleration", self.acceleration, "m/s^2"),
            ("Charge", self.charge, "As"),
            ("Kinetic Energy", self.kinetic_energy_translational, "J"),
            ("Total Kinetic Energy", self.total_energy, "J"),
        ]
        lines = []
        for label, value, unit in rows:
            line = f"{label} {REPORT_SEPARATOR} {value}"
            if unit is not None:
                line += f" ( {unit} )"
            lines.append(line)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()


class PointMassBody(PhysicalBody):
    """Body whose mass is a single scalar that can be set directly."""

    def __init__(self, mass: float = 0.0, **state):
        super().__init__(**state)
        self.set_mass(mass)

    @property
    def kind(self) -> BodyKind:
        return BodyKind.POINT_MASS


@dataclass(frozen=True)
class MassPoint:
    """A point mass at a position relative to the owning body's origin."""
    mass: float
    position: Vector = field(default_factory=Vector)

    def __post_init__(self):
        if not math.isfinite(self.mass) or self.mass < 0:
            raise ValueError(f"Mass point mass must be finite and non-negative, got {self.mass}.")
        # Owned copy; the caller's vector stays independent
        object.__setattr__(self, "position", self.position.copy())


class ExtendedBody(PhysicalBody):
    """
    Body built from constituent mass points.

    Mass and moment of inertia are recomputed whenever the mass points change.
    Direct mass assignment raises InvalidOperationError.
    """

    def __init__(
        self,
        mass_points: Iterable[MassPoint] = (),
        mass: Optional[float] = None,
        **state
    ):
        """
        Args:
            mass_points: Constituent point masses.
            mass: Only accepted so that a direct mass reaches the variant
                guard; any value raises InvalidOperationError.
            **state: Kinematic state forwarded to PhysicalBody.
        """
        super().__init__(**state)
        if mass is not None:
            self.set_mass(mass)
        self._mass_points: Tuple[MassPoint, ...] = ()
        self.set_mass_points(mass_points)

    @property
    def kind(self) -> BodyKind:
        return BodyKind.EXTENDED

    @property
    def mass_points(self) -> Tuple[MassPoint, ...]:
        return self._mass_points

    @mass_points.setter
    def mass_points(self, points: Iterable[MassPoint]) -> None:
        self.set_mass_points(points)

    def set_mass_points(self, points: Iterable[MassPoint]) -> None:
        self._mass_points = tuple(points)
        self._aggregate()

    def add_mass_point(self, point: MassPoint) -> None:
        self._mass_points = self._mass_points + (point,)
        self._aggregate()

    def _aggregate(self) -> None:
        """Derive mass and per-axis moment of inertia from the mass points."""
        if not self._mass_points:
            self._mass = 0.0
            self._moment_of_inertia = Vector()
            return

        masses = np.array([p.mass for p in self._mass_points], dtype=np.float64)
        coords = np.array([p.position.to_array() for p in self._mass_points])
        sq = coords ** 2

        # I_x = Σ m (y² + z²), etc.
        inertia = np.array([
            np.sum(masses * (sq[:, 1] + sq[:, 2])),
            np.sum(masses * (sq[:, 0] + sq[:, 2])),
            np.sum(masses * (sq[:, 0] + sq[:, 1])),
        ])

        self._mass = float(masses.sum())
        self._moment_of_inertia = Vector.from_array(inertia)
        logger.debug(
            "Aggregated %d mass points: mass=%s kg, inertia=%s",
            len(self._mass_points), self._mass, self._moment_of_inertia
        )


BODY_CLASSES: Dict[BodyKind, Type[PhysicalBody]] = {
    BodyKind.POINT_MASS: PointMassBody,
    BodyKind.EXTENDED: ExtendedBody,
}


def create_body(kind: BodyKind, **kwargs) -> PhysicalBody:
    """Factory method to build the concrete body for a BodyKind."""
    kind = BodyKind(kind)
    return BODY_CLASSES[kind](**kwargs)
