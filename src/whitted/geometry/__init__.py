"""Geometry module for shape primitives.

This module provides the closed family of analytic primitives:

Components:
    shape: Shape base class (transform handling, normal mapping)
    sphere: Unit sphere at the origin
    plane: The y=0 plane
    cube: Axis-aligned cube spanning [-1, 1]

Every primitive intersects rays in its own local space. The base class maps
world-space rays in through the inverse transform and local normals out
through the inverse-transpose.

Ray-object intersection follows the pattern:
    times = shape.intersect(ray)
    normal = shape.normal_at(point)
"""

from .cube import Cube, check_axis
from .plane import Plane
from .shape import Shape
from .sphere import Sphere, glass_sphere

__all__ = [
    "Shape",
    "Sphere",
    "glass_sphere",
    "Plane",
    "Cube",
    "check_axis",
]
