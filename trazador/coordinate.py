"""Homogeneous coordinates: three components plus a point/vector flag."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A homogeneous coordinate ``(x, y, z, is_point)``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    is_point: float = 0.0

    @classmethod
    def from_components(cls, components: Iterable[float]) -> Coordinate:
        """Build a coordinate from exactly four components."""
        values = tuple(components)
        if len(values) != 4:
            raise ValueError(f"a coordinate needs 4 components, got {len(values)}")
        return cls(*values)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.is_point

    def __str__(self) -> str:
        return f"( {self.x:g}, {self.y:g}, {self.z:g}, {self.is_point:g} )"