"""Axis-aligned cube primitive.

The cube spans [-1, 1] on every local axis. Intersection uses the slab test:
each axis contributes the interval of t values for which the ray lies between
that axis' two faces, and the ray is inside the cube over the intersection of
the three intervals. If that intersection is empty the ray misses.

A ray parallel to an axis never crosses that axis' faces, so its interval is
unbounded. Dividing by a near-zero direction component would be unstable; the
bounds are instead set to signed infinity, which leaves the other axes to
decide the result.

The normal at a point on the surface is the axis with the largest absolute
coordinate, keeping that coordinate's sign. At edges and corners the first
matching axis (x, then y, then z) wins.
"""

from __future__ import annotations

import math

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Point, Vector
from src.whitted.geometry.shape import Shape


def check_axis(origin: float, direction: float) -> tuple[float, float]:
    """Compute the entry and exit times for one pair of cube faces.

    Args:
        origin: The ray origin's coordinate on this axis.
        direction: The ray direction's component on this axis.

    Returns:
        Tuple of (tmin, tmax) with tmin <= tmax. Either may be infinite when
        the ray is parallel to the faces.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = math.copysign(math.inf, tmin_numerator)
        tmax = math.copysign(math.inf, tmax_numerator)

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Shape):
    """An axis-aligned cube spanning [-1, 1] in local space."""

    def local_intersect(self, local_ray: Ray) -> list[float]:
        origin, direction = local_ray.origin, local_ray.direction
        xtmin, xtmax = check_axis(origin.x, direction.x)
        ytmin, ytmax = check_axis(origin.y, direction.y)
        ztmin, ztmax = check_axis(origin.z, direction.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        if tmin > tmax:
            return []
        return [tmin, tmax]

    def local_normal_at(self, local_point: Point) -> Vector:
        abs_x, abs_y, abs_z = abs(local_point.x), abs(local_point.y), abs(local_point.z)
        max_component = max(abs_x, abs_y, abs_z)

        if max_component == abs_x:
            return Vector(local_point.x, 0.0, 0.0)
        if max_component == abs_y:
            return Vector(0.0, local_point.y, 0.0)
        return Vector(0.0, 0.0, local_point.z)
