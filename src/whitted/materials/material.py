"""Surface material and Phong local illumination.

A Material bundles everything the shader needs to know about a surface:

- Phong coefficients (ambient, diffuse, specular, shininess) for direct light
- An optional Pattern that replaces the flat color
- ``reflective``: fraction of light taken from the mirror direction
- ``transparency`` and ``refractive_index``: how much light passes through
  the surface and how strongly it bends (1.0 is vacuum, 1.5 typical glass)

Materials are immutable. Build them with keyword arguments and derive
variants with ``with_changes``:

    >>> glass = Material(transparency=1.0, refractive_index=1.5)
    >>> tinted = glass.with_changes(color=Color(0.8, 1.0, 0.8))

The Phong model used by ``lighting`` sums three terms per light:

    ambient  = effective_color * ambient
    diffuse  = effective_color * diffuse * dot(light_v, normal)
    specular = intensity * specular * dot(reflect_v, eye)^shininess

where ``effective_color`` is the surface color modulated by the light
intensity. Diffuse and specular vanish when the light is behind the surface
or the point is in shadow; ambient always contributes.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from src.whitted.core.color import BLACK, Color
from src.whitted.core.tuples import Point, Vector
from src.whitted.materials.pattern import Pattern

if TYPE_CHECKING:
    from src.whitted.geometry.shape import Shape
    from src.whitted.scene.light import PointLight


def _white() -> Color:
    return Color(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Material:
    """Surface parameters for Phong shading, reflection and refraction.

    Attributes:
        color: Base surface color, used when no pattern is set.
        ambient: Ambient reflection coefficient (>= 0).
        diffuse: Diffuse reflection coefficient (>= 0).
        specular: Specular reflection coefficient (>= 0).
        shininess: Specular exponent; larger values give smaller highlights.
        pattern: Optional pattern overriding ``color``.
        reflective: Mirror reflectance in [0, 1].
        transparency: Fraction of light transmitted, in [0, 1].
        refractive_index: Index of refraction (> 0).

    Raises:
        ValueError: If any coefficient is out of range.
    """

    color: Color = field(default_factory=_white)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    pattern: Pattern | None = None
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} = {value} is negative.")

        for name in ("reflective", "transparency"):
            value = getattr(self, name)
            if value < 0.0 or value > 1.0:
                raise ValueError(f"Material {name} = {value} is outside [0, 1].")

        if self.refractive_index <= 0.0:
            raise ValueError(
                f"Refractive index = {self.refractive_index} must be positive "
                "(1.0 is vacuum)."
            )

    def with_changes(self, **changes: Any) -> Material:
        """Return a copy of this material with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def color_at(self, shape: Shape | None, position: Point) -> Color:
        """Return the surface color at ``position``, sampling the pattern if set."""
        if self.pattern is not None:
            return self.pattern.color_at_shape(shape, position)
        return self.color

    def lighting(
        self,
        shape: Shape | None,
        light: PointLight,
        position: Point,
        eye_vector: Vector,
        normal: Vector,
        in_shadow: bool = False,
    ) -> Color:
        """Compute Phong illumination at a surface point from one light.

        Args:
            shape: The shape being shaded (used to place the pattern), or None.
            light: The point light illuminating the surface.
            position: The world-space surface point.
            eye_vector: Unit vector from the point toward the eye.
            normal: Unit surface normal at the point, facing the eye.
            in_shadow: Whether the light is blocked from the point.

        Returns:
            The ambient + diffuse + specular contribution of ``light``.
        """
        effective_color = self.color_at(shape, position) * light.intensity
        ambient = effective_color * self.ambient

        if in_shadow:
            return ambient

        light_vector = (light.position - position).normalize()
        light_dot_normal = light_vector.dot(normal)
        if light_dot_normal < 0.0:
            # Light is on the other side of the surface
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)

        reflect_vector = (-light_vector).reflect(normal)
        reflect_dot_eye = reflect_vector.dot(eye_vector)
        if reflect_dot_eye < 0.0:
            specular = BLACK
        else:
            factor = reflect_dot_eye**self.shininess
            specular = light.intensity * (self.specular * factor)

        return ambient + diffuse + specular
