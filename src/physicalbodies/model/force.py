"""
Force value object consumed by PhysicalBody.add_translational_force.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from physicalbodies.model.vector import Vector


@dataclass
class Force(Vector):
    """
    A directed force in newtons.

    The components (x, y, z) are the force itself and `magnitude` is their norm.
    `direction` is stored separately and is not derived from the components;
    it is neither normalized nor checked against them.
    """
    direction: Vector = field(default_factory=Vector)

    @classmethod
    def from_direction(cls, magnitude: float, direction: Vector) -> Force:
        """
        Build a force of the given magnitude acting along `direction`.

        Args:
            magnitude: Force magnitude in newtons.
            direction: Any non-zero vector; only its orientation is used for
                the components, but it is stored as given.

        Returns:
            Force whose components equal normalize(direction) * magnitude.
        """
        components = direction.normalize() * magnitude
        return cls(components.x, components.y, components.z, direction=direction.copy())

    def copy(self) -> Force:
        """Independent copy, including its own direction vector."""
        return Force(self.x, self.y, self.z, direction=self.direction.copy())
