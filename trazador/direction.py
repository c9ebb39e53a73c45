"""Free vectors in three-dimensional space."""

from __future__ import annotations

import math
from dataclasses import dataclass

_NORMALIZED_EPSILON = 1e-6


@dataclass(frozen=True)
class Direction:
    """A direction (free vector) with x, y and z components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Direction) -> Direction:
        if not isinstance(other, Direction):
            return NotImplemented
        return Direction(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Direction) -> Direction:
        if not isinstance(other, Direction):
            return NotImplemented
        return Direction(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Direction:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Direction(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> Direction:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Direction(self.x / scalar, self.y / scalar, self.z / scalar)

    def __gt__(self, other: Direction) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self.x > other.x and self.y > other.y and self.z > other.z

    def __lt__(self, other: Direction) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self.x < other.x and self.y < other.y and self.z < other.z

    def __ge__(self, other: Direction) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self.x >= other.x and self.y >= other.y and self.z >= other.z

    def __le__(self, other: Direction) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self.x <= other.x and self.y <= other.y and self.z <= other.z

    def dot(self, other: Direction) -> float:
        """Scalar product with another direction."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Direction) -> Direction:
        """Vector product with another direction."""
        return Direction(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def modulus(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Direction:
        """Unit vector with the same direction; the zero vector stays zero."""
        mod = self.modulus()
        if mod > 0:
            return Direction(self.x / mod, self.y / mod, self.z / mod)
        return Direction(0.0, 0.0, 0.0)

    def is_normalized(self) -> bool:
        """True when the vector has unit length."""
        length_squared = self.x * self.x + self.y * self.y + self.z * self.z
        return abs(length_squared - 1.0) < _NORMALIZED_EPSILON

    def is_perpendicular(self, other: Direction) -> bool:
        """True when the cross product with ``other`` is the zero vector."""
        return self.cross(other) == Direction(0.0, 0.0, 0.0)

    def angle_to(self, other: Direction) -> float:
        """Angle with another direction, in degrees."""
        cosine = self.dot(other) / (self.modulus() * other.modulus())
        cosine = max(-1.0, min(1.0, cosine))
        return math.acos(cosine) * 180.0 / math.pi

    def __str__(self) -> str:
        return f"-->({self.x:g}, {self.y:g}, {self.z:g})"