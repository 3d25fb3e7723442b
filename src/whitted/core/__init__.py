"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tuples: Points, vectors and tolerant float comparison
    color: Linear RGB colors
    matrix: 4x4 transforms, transform builders and inversion
    ray: Ray data structure
    canvas: Taichi-backed pixel buffer
    integrator: Recursive shading (direct light, reflection, refraction)

Matrices are immutable and compose right-to-left: ``translation(...) *
rotation_x(...)`` rotates first, then translates. Comparisons of points,
vectors, colors and matrices use ``EPSILON``.
"""

from .color import BLACK, WHITE, Color
from .matrix import (
    IDENTITY,
    Matrix,
    SingularTransformError,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    uniform_scaling,
)
from .ray import Ray
from .tuples import EPSILON, Point, Vector, approx_equal

# Note: canvas and integrator are NOT imported here. The integrator depends on
# the scene package, which itself imports from core. Import them directly:
#   from src.whitted.core.canvas import Canvas
#   from src.whitted.core.integrator import color_at, shade_hit

__all__ = [
    "EPSILON",
    "approx_equal",
    "Point",
    "Vector",
    "Color",
    "BLACK",
    "WHITE",
    "Matrix",
    "IDENTITY",
    "SingularTransformError",
    "translation",
    "scaling",
    "uniform_scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "Ray",
]
