"""Points, vectors and tolerant float comparison.

Points and vectors are the two halves of the homogeneous tuple: a point
carries an implicit w=1 (it is moved by translations), a vector carries w=0
(it is not). Keeping them as separate types lets the arithmetic operators
enforce the affine rules:

    point - point  -> Vector
    point + vector -> Point
    point - vector -> Point
    vector +/- vector -> Vector

Equality is approximate. Every geometric quantity in the renderer goes
through trig, square roots and divisions, so exact float comparison would
make otherwise identical results compare unequal.

Example:
    >>> from src.whitted.core.tuples import Point, Vector
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vector(0.0, 0.0, 1.0)
    >>> p + v * 2.0
    Point(1.0, 2.0, 5.0)
"""

from __future__ import annotations

import math

# Project-wide comparison tolerance, also used to nudge shading points
EPSILON = 1e-5


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Return True if two floats differ by less than ``epsilon``.

    Infinities of the same sign compare equal.
    """
    if a == b:
        return True
    return abs(a - b) < epsilon


class Point:
    """A position in 3-D space (homogeneous w=1).

    Attributes:
        x: X coordinate.
        y: Y coordinate.
        z: Z coordinate.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def origin(cls) -> Point:
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: Vector) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point | Vector) -> Point | Vector:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
        )

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y}, {self.z})"


class Vector:
    """A direction or displacement in 3-D space (homogeneous w=0).

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
        )

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y}, {self.z})"

    def magnitude(self) -> float:
        """Compute the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector:
        """Scale the vector to unit length.

        Returns:
            A unit vector with the same direction.

        Raises:
            ValueError: If the vector has zero magnitude.
        """
        length = self.magnitude()
        if length == 0.0:
            raise ValueError("Cannot normalize a zero-length vector")
        return Vector(self.x / length, self.y / length, self.z / length)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Compute the right-handed cross product ``self x other``."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Vector) -> Vector:
        """Reflect this vector about a surface normal.

        The normal should be unit length; the result then has the same
        magnitude as ``self``.

        Args:
            normal: The surface normal to reflect about.

        Returns:
            The reflected vector ``v - 2 (v . n) n``.
        """
        return self - normal * (2.0 * self.dot(normal))
