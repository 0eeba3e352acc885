"""
Three-component vector value type used for all vector-valued body state.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Sequence, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt

@dataclass
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self * scalar

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0:
            raise ZeroDivisionError("Vector division by zero")
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __abs__(self) -> float:
        return self.magnitude

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def hadamard(self, other: Vector) -> Vector:
        """Component-wise product."""
        return Vector(self.x * other.x, self.y * other.y, self.z * other.z)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0:
            return Vector()
        return self / mag

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def copy(self) -> Vector:
        return replace(self)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @staticmethod
    def from_array(values: Sequence[float] | npt.NDArray[np.float64]) -> Vector:
        """Build a Vector from any 3-element sequence or array."""
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 components, got {arr.shape[0]}.")
        return Vector(float(arr[0]), float(arr[1]), float(arr[2]))
