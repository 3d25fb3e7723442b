"""Intersection records, hit selection and shading computations.

This module turns raw intersection times into everything the shader needs:

1. ``Intersection`` pairs a time with the shape that produced it.
2. ``hit`` / ``shadow_hit`` pick the visible intersection from a list.
3. ``Intersection.prepare_computations*`` derive the ray-specific shading
   state (``Computations``) at the hit.

Refractive indices on either side of the hit (n1, n2) come from a
containment stack: walking the intersections in ascending time order, each
crossing either enters a shape (push) or leaves it (remove). The shape on top
of the stack just before and just after the crossing of interest gives n1 and
n2. Removal is by identity and not necessarily from the top, which is what
makes overlapping transparent volumes work. The stack only lives for the
duration of one call.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import Point, Vector
    >>> from src.whitted.geometry.sphere import Sphere
    >>> shape = Sphere()
    >>> ray = Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
    >>> xs = [Intersection(t, shape) for t in shape.intersect(ray)]
    >>> comps = hit(xs).prepare_computations(ray)
    >>> comps.point
    Point(0.0, 0.0, -1.0)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Point, Vector
from src.whitted.geometry.shape import Shape

# Refractive index outside every shape
VACUUM_INDEX = 1.0


@dataclass(frozen=True)
class Intersection:
    """A ray-shape intersection.

    Attributes:
        t: The parameter value along the ray where the intersection occurs.
        shape: The shape that was hit. Shapes compare by identity, so two
            intersections are equal only if they refer to the same shape.
    """

    t: float
    shape: Shape

    def prepare_computations(self, ray: Ray) -> Computations:
        """Compute shading state at this intersection, assuming vacuum on both sides.

        Args:
            ray: The ray that produced this intersection.

        Returns:
            Computations with n1 = n2 = 1.0.
        """
        point = ray.position(self.t)
        normal = self.shape.normal_at(point)
        eye_vector = -ray.direction

        inside = normal.dot(eye_vector) < 0.0
        if inside:
            normal = -normal

        offset = normal * EPSILON
        return Computations(
            t=self.t,
            shape=self.shape,
            point=point,
            eye_vector=eye_vector,
            normal=normal,
            inside=inside,
            reflect_vector=ray.direction.reflect(normal),
            over_point=point + offset,
            under_point=point - offset,
            n1=VACUUM_INDEX,
            n2=VACUUM_INDEX,
        )

    def prepare_computations_with_intersections(
        self, ray: Ray, intersections: Sequence[Intersection]
    ) -> Computations:
        """Compute shading state including refractive indices at the hit.

        Args:
            ray: The ray that produced this intersection.
            intersections: Every intersection along ``ray`` (this one
                included). They are walked in ascending time order.

        Returns:
            Computations with n1 and n2 filled in from the containment stack.
        """
        comps = self.prepare_computations(ray)
        comps.n1, comps.n2 = self._refractive_indices(intersections)
        return comps

    def _refractive_indices(self, intersections: Sequence[Intersection]) -> tuple[float, float]:
        containers: list[Shape] = []
        n1 = n2 = VACUUM_INDEX

        for intersection in sorted(intersections, key=lambda i: i.t):
            is_hit = intersection == self
            if is_hit:
                n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

            if intersection.shape in containers:
                containers.remove(intersection.shape)
            else:
                containers.append(intersection.shape)

            if is_hit:
                n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
                break

        return n1, n2


@dataclass
class Computations:
    """Precomputed shading state for one intersection.

    Attributes:
        t: Intersection time.
        shape: The shape that was hit.
        point: World-space hit point.
        eye_vector: Unit vector from the hit point back toward the ray origin.
        normal: Unit surface normal, flipped to face the eye when ``inside``.
        inside: True if the ray hit the surface from inside the shape.
        reflect_vector: The ray direction reflected about the normal.
        over_point: Hit point nudged along the normal; origin for shadow
            and reflection rays so they do not re-hit the same surface.
        under_point: Hit point nudged against the normal; origin for
            refraction rays.
        n1: Refractive index of the medium the ray is leaving.
        n2: Refractive index of the medium the ray is entering.
    """

    t: float
    shape: Shape
    point: Point
    eye_vector: Vector
    normal: Vector
    inside: bool
    reflect_vector: Vector
    over_point: Point
    under_point: Point
    n1: float = VACUUM_INDEX
    n2: float = VACUUM_INDEX


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """Select the visible intersection: the smallest positive time.

    Args:
        intersections: Intersections in any order.

    Returns:
        The intersection with the smallest t > 0, or None if there is none.
    """
    return min((i for i in intersections if i.t > 0.0), key=lambda i: i.t, default=None)


def shadow_hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """Like ``hit`` but ignoring shapes that do not cast shadows."""
    return min(
        (i for i in intersections if i.t > 0.0 and i.shape.casts_shadow),
        key=lambda i: i.t,
        default=None,
    )
