"""Procedural color patterns.

A pattern maps a point to a color. Patterns are evaluated in their own
pattern space, which is reached from world space in two steps: first through
the inverse of the shape's transform (world -> object), then through the
inverse of the pattern's transform (object -> pattern). That way a pattern
scales, rotates and moves with the shape it is attached to, and can also be
adjusted independently of it.

Supported patterns:
    StripePattern: alternates between two colors on integer steps of x.
    GradientPattern: interpolates linearly from ``a`` to ``b`` over each unit of x.

Example:
    >>> from src.whitted.core.color import BLACK, WHITE
    >>> from src.whitted.core.tuples import Point
    >>> StripePattern(WHITE, BLACK).color_at(Point(1.5, 0.0, 0.0))
    Color(0.0, 0.0, 0.0)
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from src.whitted.core.color import Color
from src.whitted.core.matrix import IDENTITY, Matrix, SingularTransformError
from src.whitted.core.tuples import Point

if TYPE_CHECKING:
    from src.whitted.geometry.shape import Shape

logger = logging.getLogger(__name__)


class Pattern(ABC):
    """Base class for two-color patterns with their own transform.

    Args:
        a: First color.
        b: Second color.
        transform: Object-to-pattern placement. Defaults to identity.

    Raises:
        SingularTransformError: If ``transform`` is not invertible.
    """

    def __init__(self, a: Color, b: Color, transform: Matrix | None = None) -> None:
        self.a = a
        self.b = b
        self._transform = IDENTITY if transform is None else transform
        try:
            self._inverse_transform = self._transform.inverse()
        except SingularTransformError as exc:
            logger.error("%s has a singular transform: %r", type(self).__name__, self._transform)
            raise SingularTransformError(
                f"{type(self).__name__} transform is not invertible: {self._transform!r}"
            ) from exc

    @property
    def transform(self) -> Matrix:
        return self._transform

    @abstractmethod
    def color_at(self, pattern_point: Point) -> Color:
        """Evaluate the pattern at a point already in pattern space."""

    def color_at_shape(self, shape: Shape | None, world_point: Point) -> Color:
        """Evaluate the pattern at a world-space point on ``shape``.

        Args:
            shape: The shape the pattern is applied to, or None to treat the
                object transform as identity.
            world_point: The point to color, in world space.

        Returns:
            The pattern color at that point.
        """
        object_point = world_point if shape is None else shape.world_to_object(world_point)
        pattern_point = self._inverse_transform * object_point
        return self.color_at(pattern_point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.a == other.a
            and self.b == other.b
            and self._transform == other._transform
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={self.a!r}, b={self.b!r})"


class StripePattern(Pattern):
    """Stripes of ``a`` and ``b`` alternating every unit along x."""

    def color_at(self, pattern_point: Point) -> Color:
        if math.floor(pattern_point.x) % 2 == 0:
            return self.a
        return self.b


class GradientPattern(Pattern):
    """Linear blend from ``a`` to ``b`` repeating every unit along x."""

    def color_at(self, pattern_point: Point) -> Color:
        fraction = pattern_point.x - math.floor(pattern_point.x)
        return self.a + (self.b - self.a) * fraction
