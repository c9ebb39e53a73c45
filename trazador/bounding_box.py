"""Axis-aligned bounding boxes and the nodes of a bounding volume hierarchy."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from trazador.point3d import Point3D
from trazador.ray import Ray


def _components(point: Point3D) -> tuple[float, float, float]:
    return (point.x, point.y, point.z)


@dataclass
class BoundingBox:
    """An axis-aligned box; the default box is empty and grows as items are added."""

    min_point: Point3D = field(default_factory=lambda: Point3D(math.inf, math.inf, math.inf))
    max_point: Point3D = field(
        default_factory=lambda: Point3D(-math.inf, -math.inf, -math.inf)
    )

    @classmethod
    def empty(cls) -> BoundingBox:
        """A box containing nothing."""
        return cls()

    @classmethod
    def from_point(cls, point: Point3D) -> BoundingBox:
        """A degenerate box holding a single point."""
        return cls(point, point)

    def extent(self) -> Point3D:
        """Size of the box along each axis."""
        return self.max_point.subtract_points(self.min_point)

    def grow_to_include(self, item: Point3D | BoundingBox) -> None:
        """Enlarge the box so that it contains a point or another box."""
        if isinstance(item, BoundingBox):
            self.grow_to_include(item.min_point)
            self.grow_to_include(item.max_point)
            return
        if not isinstance(item, Point3D):
            raise TypeError(f"cannot include {type(item).__name__} in a bounding box")
        self.min_point = Point3D(
            min(self.min_point.x, item.x),
            min(self.min_point.y, item.y),
            min(self.min_point.z, item.z),
        )
        self.max_point = Point3D(
            max(self.max_point.x, item.x),
            max(self.max_point.y, item.y),
            max(self.max_point.z, item.z),
        )

    def center(self) -> Point3D:
        """Midpoint of the box."""
        return (self.max_point + self.min_point) * 0.5

    def intersects(self, ray: Ray, t_enter: float, t_exit: float) -> bool:
        """True when the ray passes through the box between distances ``t_enter`` and ``t_exit``."""
        t_near, t_far = t_enter, t_exit
        direction = (ray.direction.x, ray.direction.y, ray.direction.z)
        for low, high, origin, d in zip(
            _components(self.min_point),
            _components(self.max_point),
            _components(ray.origin),
            direction,
        ):
            if d == 0:
                if origin < low or origin > high:
                    return False
                continue
            t0 = (low - origin) / d
            t1 = (high - origin) / d
            if t0 > t1:
                t0, t1 = t1, t0
            t_near = max(t_near, t0)
            t_far = min(t_far, t1)
            if t_near > t_far:
                return False
        return True


@dataclass
class BVHNode:
    """A node of a bounding volume hierarchy."""

    bounds: BoundingBox = field(default_factory=BoundingBox.empty)
    triangles: list[Any] = field(default_factory=list)
    first_child: BVHNode | None = None
    second_child: BVHNode | None = None