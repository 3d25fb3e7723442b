"""Whitted-style recursive integrator.

This module resolves the color seen along a ray. Unlike a Monte Carlo path
tracer it is fully deterministic: every hit spawns at most one reflected and
one refracted ray, and the recursion is bounded by a depth budget that
decreases by one per bounce.

The color at a hit is the sum of:
    - Phong direct lighting from every light, with a shadow test per light
    - The reflected color, scaled by ``material.reflective``
    - The refracted color, scaled by ``material.transparency``

When a material is both reflective and transparent, the reflected and
refracted terms are weighted by Schlick's approximation of the Fresnel
reflectance instead of being added unweighted.

Example:
    >>> from src.whitted.core.color import Color
    >>> from src.whitted.core.integrator import color_at
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import Point, Vector
    >>> from src.whitted.scene.showcase import default_world
    >>> world = default_world()
    >>> ray = Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
    >>> color_at(world, ray) == Color(0.38066, 0.47583, 0.2855)
    True
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from src.whitted.core.color import BLACK, Color
from src.whitted.core.ray import Ray
from src.whitted.scene.intersection import Computations, hit

if TYPE_CHECKING:
    from src.whitted.scene.world import World

# =============================================================================
# Rendering Constants
# =============================================================================

# Recursion budget for reflection/refraction rays
DEFAULT_MAX_DEPTH = 5

# Color returned for rays that miss every shape
BACKGROUND_COLOR = BLACK


# =============================================================================
# Direct and Recursive Shading
# =============================================================================


def shade_hit(world: World, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
    """Compute the color at a prepared intersection.

    Args:
        world: The scene being rendered.
        comps: Shading state from ``prepare_computations_with_intersections``.
        remaining: Recursion budget left for secondary rays.

    Returns:
        Direct lighting from all lights plus reflected and refracted color.
    """
    material = comps.shape.material

    surface = BLACK
    for light in world.lights:
        shadowed = world.is_shadowed(light, comps.over_point)
        surface = surface + material.lighting(
            comps.shape,
            light,
            comps.point,
            comps.eye_vector,
            comps.normal,
            shadowed,
        )

    reflected = reflected_color(world, comps, remaining)
    refracted = refracted_color(world, comps, remaining)

    if material.reflective > 0.0 and material.transparency > 0.0:
        reflectance = schlick(comps)
        return surface + reflected * reflectance + refracted * (1.0 - reflectance)

    return surface + reflected + refracted


def reflected_color(world: World, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
    """Color arriving from the mirror direction, scaled by ``reflective``.

    Returns black for non-reflective materials or once the budget is spent.
    """
    reflective = comps.shape.material.reflective
    if remaining <= 0 or reflective == 0.0:
        return BLACK

    reflect_ray = Ray(comps.over_point, comps.reflect_vector)
    return color_at(world, reflect_ray, remaining - 1) * reflective


def refracted_color(world: World, comps: Computations, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
    """Color arriving through the surface, scaled by ``transparency``.

    The refracted direction follows Snell's law with n1/n2 from ``comps``.
    Returns black for opaque materials, once the budget is spent, and under
    total internal reflection.
    """
    transparency = comps.shape.material.transparency
    if remaining <= 0 or transparency == 0.0:
        return BLACK

    n_ratio = comps.n1 / comps.n2
    cos_i = comps.eye_vector.dot(comps.normal)
    sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
    if sin2_t > 1.0:
        # Total internal reflection
        return BLACK

    cos_t = math.sqrt(1.0 - sin2_t)
    direction = comps.normal * (n_ratio * cos_i - cos_t) - comps.eye_vector * n_ratio
    refract_ray = Ray(comps.under_point, direction)
    return color_at(world, refract_ray, remaining - 1) * transparency


def schlick(comps: Computations) -> float:
    """Schlick's approximation of the Fresnel reflectance at the hit.

    Returns:
        Fraction of light reflected, in [0, 1]. 1.0 under total internal
        reflection.
    """
    cos = comps.eye_vector.dot(comps.normal)

    if comps.n1 > comps.n2:
        n_ratio = comps.n1 / comps.n2
        sin2_t = n_ratio * n_ratio * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        # Use cos(theta_t) when leaving the denser medium
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5


def color_at(world: World, ray: Ray, remaining: int = DEFAULT_MAX_DEPTH) -> Color:
    """Resolve the color seen along ``ray``.

    Args:
        world: The scene being rendered.
        ray: World-space ray.
        remaining: Recursion budget for secondary rays.

    Returns:
        The shaded color at the nearest visible hit, or ``BACKGROUND_COLOR``
        if the ray misses everything.
    """
    intersections = world.intersect(ray)
    nearest = hit(intersections)
    if nearest is None:
        return BACKGROUND_COLOR

    comps = nearest.prepare_computations_with_intersections(ray, intersections)
    return shade_hit(world, comps, remaining)
