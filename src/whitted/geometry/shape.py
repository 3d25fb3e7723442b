"""Shape base class shared by all primitives.

Every primitive is defined in a canonical local space (unit sphere at the
origin, the y=0 plane, the [-1, 1] cube) and placed in the world by its
transform. The base class owns the transform-related work so that each
primitive only implements the local math:

    intersect(ray):  ray -> inverse transform -> local_intersect
    normal_at(p):    p -> inverse transform -> local_normal_at
                     -> inverse-transpose -> normalize

Normals go through the inverse-transpose rather than the transform itself
because they transform contravariantly: under a non-uniform scale, mapping a
normal with the transform would tilt it off the surface.

The set of primitives is closed (Sphere, Plane, Cube). Shapes compare by
identity, which is what the refraction containment stack relies on.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from src.whitted.core.matrix import IDENTITY, Matrix, SingularTransformError
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import Point, Vector
from src.whitted.materials.material import Material

if TYPE_CHECKING:
    from src.whitted.scene.intersection import Intersection

logger = logging.getLogger(__name__)

# Local ray directions shorter than this are treated as degenerate
_MIN_DIRECTION_LENGTH_SQUARED = 1e-20


class Shape(ABC):
    """Abstract base for ray-intersectable primitives.

    The transform is fixed at construction and its inverse is computed
    immediately, so a singular transform fails when the scene is built
    rather than part-way through a render.

    Args:
        transform: Object-to-world transform. Defaults to identity.
        material: Surface material. Defaults to ``Material()``.
        casts_shadow: Whether the shape blocks light in shadow tests.

    Raises:
        SingularTransformError: If ``transform`` is not invertible.
    """

    def __init__(
        self,
        transform: Matrix | None = None,
        material: Material | None = None,
        casts_shadow: bool = True,
    ) -> None:
        self._transform = IDENTITY if transform is None else transform
        try:
            self._inverse_transform = self._transform.inverse()
        except SingularTransformError as exc:
            logger.error("%s has a singular transform: %r", type(self).__name__, self._transform)
            raise SingularTransformError(
                f"{type(self).__name__} transform is not invertible: {self._transform!r}"
            ) from exc
        self._normal_transform = self._inverse_transform.transpose()
        self._material = Material() if material is None else material
        self._casts_shadow = casts_shadow

    @property
    def transform(self) -> Matrix:
        return self._transform

    @property
    def inverse_transform(self) -> Matrix:
        return self._inverse_transform

    @property
    def material(self) -> Material:
        return self._material

    @property
    def casts_shadow(self) -> bool:
        return self._casts_shadow

    def world_to_object(self, point: Point) -> Point:
        """Map a world-space point into this shape's local space."""
        return self._inverse_transform * point

    def intersect(self, ray: Ray) -> list[float]:
        """Intersect a world-space ray with the shape.

        Args:
            ray: The ray to test, in world space.

        Returns:
            Intersection times in ascending order (possibly empty). Times are
            valid along the world ray because the local ray's direction is
            left unnormalized.
        """
        local_ray = ray.transform(self._inverse_transform)
        direction = local_ray.direction
        if direction.dot(direction) < _MIN_DIRECTION_LENGTH_SQUARED:
            return []
        return self.local_intersect(local_ray)

    def intersections(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray and wrap the times as Intersection records."""
        from src.whitted.scene.intersection import Intersection

        return [Intersection(t, self) for t in self.intersect(ray)]

    def normal_at(self, world_point: Point) -> Vector:
        """Compute the unit world-space surface normal at a point on the shape."""
        local_normal = self.local_normal_at(self.world_to_object(world_point))
        world_normal = self._normal_transform * local_normal
        return world_normal.normalize()

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> list[float]:
        """Intersect a ray already expressed in local space."""

    @abstractmethod
    def local_normal_at(self, local_point: Point) -> Vector:
        """Compute the (not necessarily normalized) local-space normal."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(transform={self._transform!r}, "
            f"casts_shadow={self._casts_shadow})"
        )
