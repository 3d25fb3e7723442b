"""Point light source."""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.color import Color
from src.whitted.core.tuples import Point


@dataclass(frozen=True)
class PointLight:
    """An omnidirectional light with no size and no distance falloff.

    Attributes:
        position: World-space position of the light.
        intensity: Color and brightness of the emitted light.
    """

    position: Point
    intensity: Color
