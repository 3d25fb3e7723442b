"""World container: the shapes and lights of a scene.

The world is the query surface used by the integrator. It answers two
geometric questions (what does a ray hit, is a point shadowed from a light)
and exposes the recursive shading entry points as methods that delegate to
``src.whitted.core.integrator``.

A world is assembled before rendering and not mutated while a render is in
progress; shapes are shared by reference between the world, intersections
and shading computations.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.whitted.core import integrator
from src.whitted.core.color import Color
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import EPSILON, Point
from src.whitted.geometry.shape import Shape
from src.whitted.scene.intersection import Computations, Intersection, shadow_hit
from src.whitted.scene.light import PointLight


class World:
    """An ordered collection of shapes and point lights.

    Args:
        shapes: Shapes in the scene. Order only affects tie-breaking between
            intersections at identical times.
        lights: Point lights illuminating the scene.
    """

    def __init__(
        self,
        shapes: Iterable[Shape] | None = None,
        lights: Iterable[PointLight] | None = None,
    ) -> None:
        self.shapes: list[Shape] = list(shapes) if shapes is not None else []
        self.lights: list[PointLight] = list(lights) if lights is not None else []

    def add_shape(self, shape: Shape) -> Shape:
        """Append a shape and return it."""
        self.shapes.append(shape)
        return shape

    def add_light(self, light: PointLight) -> PointLight:
        """Append a light and return it."""
        self.lights.append(light)
        return light

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect ``ray`` with every shape.

        Returns:
            All intersections, including negative times, sorted by ascending t.
        """
        intersections: list[Intersection] = []
        for shape in self.shapes:
            intersections.extend(shape.intersections(ray))
        intersections.sort(key=lambda i: i.t)
        return intersections

    def is_shadowed(self, light: PointLight, point: Point) -> bool:
        """Check whether a shadow-casting shape lies between ``point`` and ``light``.

        Args:
            light: The light to test visibility against.
            point: World-space point, normally an over_point.

        Returns:
            True if the nearest shadow-casting hit toward the light is closer
            than the light itself.
        """
        to_light = light.position - point
        distance = to_light.magnitude()
        if distance < EPSILON:
            # Point coincides with the light
            return False

        ray = Ray(point, to_light / distance)
        blocker = shadow_hit(self.intersect(ray))
        return blocker is not None and blocker.t < distance

    def shade_hit(
        self, comps: Computations, remaining: int = integrator.DEFAULT_MAX_DEPTH
    ) -> Color:
        return integrator.shade_hit(self, comps, remaining)

    def reflected_color(
        self, comps: Computations, remaining: int = integrator.DEFAULT_MAX_DEPTH
    ) -> Color:
        return integrator.reflected_color(self, comps, remaining)

    def refracted_color(
        self, comps: Computations, remaining: int = integrator.DEFAULT_MAX_DEPTH
    ) -> Color:
        return integrator.refracted_color(self, comps, remaining)

    def schlick(self, comps: Computations) -> float:
        return integrator.schlick(comps)

    def color_at(self, ray: Ray, remaining: int = integrator.DEFAULT_MAX_DEPTH) -> Color:
        """Color seen along ``ray``; ``BACKGROUND_COLOR`` on a miss."""
        return integrator.color_at(self, ray, remaining)

    def __repr__(self) -> str:
        return f"World(shapes={len(self.shapes)}, lights={len(self.lights)})"
