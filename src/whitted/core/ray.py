"""Ray data structure.

A ray is a half-line ``origin + t * direction``. Shapes intersect rays in
their own local space, so rays are transformed by the inverse of a shape's
transform before the primitive-specific intersection math runs. The
direction is deliberately left unnormalized by transforms: intersection times
computed in local space then stay valid in world space.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import Point, Vector
    >>> ray = Ray(Point(2.0, 3.0, 4.0), Vector(1.0, 0.0, 0.0))
    >>> ray.position(2.5)
    Point(4.5, 3.0, 4.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.matrix import Matrix
from src.whitted.core.tuples import Point, Vector


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Primary and secondary
            rays are normalized; rays mapped into object space generally
            are not.
    """

    origin: Point
    direction: Vector

    def position(self, t: float) -> Point:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return a new ray with origin and direction mapped by ``matrix``."""
        return Ray(matrix * self.origin, matrix * self.direction)
