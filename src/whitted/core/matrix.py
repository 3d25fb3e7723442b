"""Square matrices and 4x4 affine transforms.

Transforms are 4x4 homogeneous matrices stored in NumPy arrays. Matrices are
immutable: every operation returns a new Matrix, and the inverse is computed
once and cached, so shapes and cameras can share them freely during a render.

The inverse is computed by cofactor expansion (transpose of the cofactor
matrix divided by the determinant), recursing through submatrices down to
the 2x2 case. Inverting a singular matrix raises SingularTransformError; a
transform that cannot be inverted is a scene-construction error and must
surface as one.

Transforms compose right-to-left, so in

    transform = translation(5, 0, 0) * rotation_y(pi / 2) * scaling(2, 2, 2)

the scaling is applied first. The fluent methods read left-to-right instead:

    transform = Matrix.identity().scale(2, 2, 2).rotate_y(pi / 2).translate(5, 0, 0)

Example:
    >>> from src.whitted.core.matrix import translation
    >>> from src.whitted.core.tuples import Point
    >>> translation(5.0, -3.0, 2.0) * Point(-3.0, 4.0, 5.0)
    Point(2.0, 1.0, 7.0)
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import overload

import numpy as np
import numpy.typing as npt

from src.whitted.core.tuples import EPSILON, Point, Vector

# Determinants smaller than this are treated as zero
SINGULAR_TOLERANCE = 1e-12


class SingularTransformError(ValueError):
    """Raised when a non-invertible matrix is inverted."""


class Matrix:
    """An immutable square matrix of float64 values.

    Any square size is accepted so that submatrices produced during cofactor
    expansion are Matrix instances too, but only 4x4 matrices can transform
    points and vectors.

    Attributes:
        size: Number of rows (and columns).
    """

    __slots__ = ("_data", "_rows", "_inverse", "size")

    def __init__(self, rows: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        data.setflags(write=False)
        self._data = data
        self._rows: tuple[tuple[float, ...], ...] = tuple(tuple(row) for row in data.tolist())
        self._inverse: Matrix | None = None
        self.size = data.shape[0]

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        return cls(np.identity(size, dtype=np.float64))

    # -------------------------------------------------------------------------
    # Element access
    # -------------------------------------------------------------------------

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self._rows[row][col]

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying array."""
        return self._data.copy()

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    @overload
    def __mul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __mul__(self, other: Point) -> Point: ...

    @overload
    def __mul__(self, other: Vector) -> Vector: ...

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(
                    f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size} matrix"
                )
            return Matrix(self._data @ other._data)
        if isinstance(other, (Point, Vector)):
            if self.size != 4:
                raise ValueError("Only 4x4 matrices can transform points and vectors")
            (m00, m01, m02, m03), (m10, m11, m12, m13), (m20, m21, m22, m23), _ = self._rows
            x, y, z = other.x, other.y, other.z
            if isinstance(other, Point):
                return Point(
                    m00 * x + m01 * y + m02 * z + m03,
                    m10 * x + m11 * y + m12 * z + m13,
                    m20 * x + m21 * y + m22 * z + m23,
                )
            # Vectors have w=0, so the translation column drops out
            return Vector(
                m00 * x + m01 * y + m02 * z,
                m10 * x + m11 * y + m12 * z,
                m20 * x + m21 * y + m22 * z,
            )
        return NotImplemented

    __matmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.size != self.size:
            return False
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{v:g}" for v in row) + "]" for row in self._rows)
        return f"Matrix([{rows}])"

    # -------------------------------------------------------------------------
    # Cofactor expansion
    # -------------------------------------------------------------------------

    def transpose(self) -> Matrix:
        return Matrix(self._data.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return a copy with the given row and column removed."""
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix(reduced)

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix at (row, col)."""
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Minor at (row, col), negated when row + col is odd."""
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 == 1 else minor

    def determinant(self) -> float:
        """Compute the determinant by expanding along the first row."""
        if self.size == 1:
            return self._rows[0][0]
        if self.size == 2:
            (a, b), (c, d) = self._rows
            return a * d - b * c
        return sum(self._rows[0][col] * self.cofactor(0, col) for col in range(self.size))

    def is_invertible(self) -> bool:
        return abs(self.determinant()) >= SINGULAR_TOLERANCE

    def inverse(self) -> Matrix:
        """Compute the inverse as transpose(cofactors) / determinant.

        The result is cached; matrices are immutable so it never goes stale.

        Returns:
            The inverse matrix.

        Raises:
            SingularTransformError: If the determinant is zero.
        """
        if self._inverse is not None:
            return self._inverse

        det = self.determinant()
        if abs(det) < SINGULAR_TOLERANCE:
            raise SingularTransformError(
                f"Matrix is not invertible (determinant {det:g}): {self!r}"
            )

        cofactors = [
            [self.cofactor(row, col) for col in range(self.size)] for row in range(self.size)
        ]
        # Transposing while dividing: element (col, row) of the result
        inverse = np.array(cofactors, dtype=np.float64).T / det
        self._inverse = Matrix(inverse)
        return self._inverse

    # -------------------------------------------------------------------------
    # Fluent transform chaining (applied in reading order)
    # -------------------------------------------------------------------------

    def translate(self, x: float, y: float, z: float) -> Matrix:
        return translation(x, y, z) * self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        return scaling(x, y, z) * self

    def rotate_x(self, radians: float) -> Matrix:
        return rotation_x(radians) * self

    def rotate_y(self, radians: float) -> Matrix:
        return rotation_y(radians) * self

    def rotate_z(self, radians: float) -> Matrix:
        return rotation_z(radians) * self


# =============================================================================
# Transform Builders
# =============================================================================

IDENTITY = Matrix.identity()


def translation(x: float, y: float, z: float) -> Matrix:
    """Build a translation matrix. Vectors are unaffected by it."""
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Build a scaling matrix. A zero factor makes it singular."""
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def uniform_scaling(factor: float) -> Matrix:
    return scaling(factor, factor, factor)


def rotation_x(radians: float) -> Matrix:
    """Build a rotation about the x axis by ``radians``."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Build a shearing matrix.

    Each parameter moves one coordinate in proportion to another, e.g. ``xy``
    moves x in proportion to y.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
