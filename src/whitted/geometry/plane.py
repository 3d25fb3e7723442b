"""Infinite plane primitive.

The plane is the local xz plane (y = 0) with its normal pointing along +y.
A ray intersects it at most once, at ``t = -origin.y / direction.y``; rays
parallel to the plane (including rays lying in it) never intersect.
"""

from __future__ import annotations

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Point, Vector
from src.whitted.geometry.shape import Shape

_UP = Vector(0.0, 1.0, 0.0)


class Plane(Shape):
    """The local y=0 plane."""

    def local_intersect(self, local_ray: Ray) -> list[float]:
        if abs(local_ray.direction.y) < EPSILON:
            return []
        return [-local_ray.origin.y / local_ray.direction.y]

    def local_normal_at(self, local_point: Point) -> Vector:
        return _UP
