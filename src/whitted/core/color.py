"""RGB color values used throughout shading.

Channels are linear floats. They are not clamped while shading: summing
several lights, reflections and refractions can push a channel above 1.0,
and clamping only happens when a canvas is converted to 8-bit.
"""

from __future__ import annotations

from src.whitted.core.tuples import approx_equal


class Color:
    """A linear RGB color.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float) -> None:
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Color | float) -> Color:
        # Color * Color is the Hadamard (channel-wise) product
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Color:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Color(self.r * scalar, self.g * scalar, self.b * scalar)

    def __truediv__(self, scalar: float) -> Color:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Color(self.r / scalar, self.g / scalar, self.b / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_equal(self.r, other.r)
            and approx_equal(self.g, other.g)
            and approx_equal(self.b, other.b)
        )

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
