"""A small three-component vector with a homogeneous ``w`` coordinate."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Vector3D"]


@dataclass
class Vector3D:
    """A 3D vector; ``w`` is carried along for matrix work and defaults to 1."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __add__(self, other: object) -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __xor__(self, other: object) -> "Vector3D":
        """Cross product."""
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __mul__(self, other: object) -> float:
        """Dot product of the x, y and z components."""
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Euclidean length of the x, y and z components."""
        return math.sqrt(self * self)

    def normalize(self) -> None:
        """Scale the vector in place to unit length; a zero vector is left as is."""
        size = self.length()
        if size == 0.0:
            return
        self.x /= size
        self.y /= size
        self.z /= size