"""Unit sphere primitive.

The sphere is centered at the local origin with radius 1; position and size
come from its transform.

The ray-sphere intersection is found by solving:
    |origin + t * direction - center|^2 = 1

Expanding gives the quadratic a*t^2 + b*t + c = 0 with:
    a = dot(direction, direction)
    b = 2 * dot(direction, origin - center)
    c = dot(origin - center, origin - center) - 1

A negative discriminant means the ray misses. Otherwise both roots are
returned in ascending order, including the tangent case where they are equal.

Example:
    >>> from src.whitted.core.matrix import scaling
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import Point, Vector
    >>> sphere = Sphere(transform=scaling(2.0, 2.0, 2.0))
    >>> sphere.intersect(Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0)))
    [3.0, 7.0]
"""

from __future__ import annotations

import math

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import Point, Vector
from src.whitted.geometry.shape import Shape
from src.whitted.materials.material import Material

_CENTER = Point(0.0, 0.0, 0.0)


class Sphere(Shape):
    """A unit sphere centered at the local origin."""

    def local_intersect(self, local_ray: Ray) -> list[float]:
        sphere_to_ray = local_ray.origin - _CENTER
        direction = local_ray.direction

        a = direction.dot(direction)
        b = 2.0 * direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t0 = (-b - sqrt_d) / (2.0 * a)
        t1 = (-b + sqrt_d) / (2.0 * a)
        return [t0, t1]

    def local_normal_at(self, local_point: Point) -> Vector:
        return local_point - _CENTER


def glass_sphere(**kwargs) -> Sphere:
    """Create a fully transparent sphere with the refractive index of glass.

    Any keyword accepted by Sphere may be passed; ``material`` defaults to
    transparency 1.0 and refractive index 1.5.
    """
    kwargs.setdefault("material", Material(transparency=1.0, refractive_index=1.5))
    return Sphere(**kwargs)
