"""Unit tests for matrices and transforms.

Tests cover:
- Multiplication, identity and transpose
- Determinants, minors and cofactors
- Inversion and SingularTransformError
- Transform builders applied to points and vectors
- Composition order and fluent chaining
"""

import math

import pytest

M4 = [
    [-5.0, 2.0, 6.0, -8.0],
    [1.0, -5.0, 1.0, 8.0],
    [7.0, 7.0, -6.0, -7.0],
    [1.0, -3.0, 7.0, 4.0],
]


class TestMatrixBasics:
    """Tests for construction, access and arithmetic."""

    def test_element_access(self):
        """Test reading elements by (row, col)."""
        from src.whitted.core.matrix import Matrix

        m = Matrix([[1.0, 2.0], [5.5, 6.5]])
        assert m[0, 1] == 2.0
        assert m[1, 0] == 5.5
        assert m.size == 2

    def test_non_square_rejected(self):
        """Test non-square input raises ValueError."""
        from src.whitted.core.matrix import Matrix

        with pytest.raises(ValueError):
            Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    def test_approximate_equality(self):
        """Test matrices compare equal within EPSILON."""
        from src.whitted.core.matrix import Matrix

        a = Matrix([[1.0, 2.0], [3.0, 4.0]])
        assert a == Matrix([[1.000001, 2.0], [3.0, 4.0]])
        assert a != Matrix([[1.1, 2.0], [3.0, 4.0]])

    def test_multiply(self):
        """Test 4x4 matrix multiplication."""
        from src.whitted.core.matrix import Matrix

        a = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 8, 7, 6], [5, 4, 3, 2]])
        b = Matrix([[-2, 1, 2, 3], [3, 2, 1, -1], [4, 3, 6, 5], [1, 2, 7, 8]])
        expected = Matrix(
            [[20, 22, 50, 48], [44, 54, 114, 108], [40, 58, 110, 102], [16, 26, 46, 42]]
        )
        assert a * b == expected
        assert a @ b == expected

    def test_multiply_by_identity(self):
        """Test the identity is the multiplicative identity."""
        from src.whitted.core.matrix import IDENTITY, Matrix

        a = Matrix(M4)
        assert a * IDENTITY == a
        assert IDENTITY * a == a

    def test_transpose(self):
        """Test transposing swaps rows and columns."""
        from src.whitted.core.matrix import IDENTITY, Matrix

        a = Matrix([[0, 9, 3, 0], [9, 8, 0, 8], [1, 8, 5, 3], [0, 0, 5, 8]])
        expected = Matrix([[0, 9, 1, 0], [9, 8, 8, 0], [3, 0, 5, 5], [0, 8, 3, 8]])
        assert a.transpose() == expected
        assert IDENTITY.transpose() == IDENTITY

    def test_immutable(self):
        """Test the backing array cannot be modified in place."""
        from src.whitted.core.matrix import Matrix

        m = Matrix.identity()
        copy = m.to_numpy()
        copy[0, 0] = 5.0
        assert m[0, 0] == 1.0


class TestDeterminant:
    """Tests for determinants and cofactor expansion."""

    def test_2x2(self):
        """Test the 2x2 determinant."""
        from src.whitted.core.matrix import Matrix

        assert Matrix([[1, 5], [-3, 2]]).determinant() == pytest.approx(17.0)

    def test_submatrix(self):
        """Test removing a row and a column."""
        from src.whitted.core.matrix import Matrix

        a = Matrix([[1, 5, 0], [-3, 2, 7], [0, 6, -3]])
        assert a.submatrix(0, 2) == Matrix([[-3, 2], [0, 6]])

    def test_minor_and_cofactor(self):
        """Test minors and sign-adjusted cofactors."""
        from src.whitted.core.matrix import Matrix

        a = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
        assert a.minor(0, 0) == pytest.approx(-12.0)
        assert a.cofactor(0, 0) == pytest.approx(-12.0)
        assert a.minor(1, 0) == pytest.approx(25.0)
        assert a.cofactor(1, 0) == pytest.approx(-25.0)

    def test_4x4(self):
        """Test the 4x4 determinant and its first-row cofactors."""
        from src.whitted.core.matrix import Matrix

        a = Matrix([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])
        assert a.cofactor(0, 0) == pytest.approx(690.0)
        assert a.cofactor(0, 1) == pytest.approx(447.0)
        assert a.cofactor(0, 2) == pytest.approx(210.0)
        assert a.cofactor(0, 3) == pytest.approx(51.0)
        assert a.determinant() == pytest.approx(-4071.0)


class TestInverse:
    """Tests for matrix inversion."""

    def test_invertibility(self):
        """Test is_invertible against the determinant."""
        from src.whitted.core.matrix import Matrix

        assert Matrix([[6, 4, 4, 4], [5, 5, 7, 6], [4, -9, 3, -7], [9, 1, 7, -6]]).is_invertible()
        assert not Matrix(
            [[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]]
        ).is_invertible()

    def test_inverse(self):
        """Test the inverse of a 4x4 matrix."""
        from src.whitted.core.matrix import Matrix

        a = Matrix(M4)
        b = a.inverse()
        assert a.determinant() == pytest.approx(532.0)
        assert a.cofactor(2, 3) == pytest.approx(-160.0)
        assert b[3, 2] == pytest.approx(-160.0 / 532.0)
        assert a.cofactor(3, 2) == pytest.approx(105.0)
        assert b[2, 3] == pytest.approx(105.0 / 532.0)
        assert b == Matrix(
            [
                [0.21805, 0.45113, 0.24060, -0.04511],
                [-0.80827, -1.45677, -0.44361, 0.52068],
                [-0.07895, -0.22368, -0.05263, 0.19737],
                [-0.52256, -0.81391, -0.30075, 0.30639],
            ]
        )

    def test_product_times_inverse(self):
        """Test multiplying a product by an inverse recovers the other factor."""
        from src.whitted.core.matrix import Matrix

        a = Matrix([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]])
        b = Matrix([[8, 2, 2, 2], [3, -1, 7, 0], [7, 0, 5, 4], [6, -2, 0, 5]])
        c = a * b
        assert c * b.inverse() == a

    def test_inverse_of_identity(self):
        """Test the identity is its own inverse."""
        from src.whitted.core.matrix import IDENTITY

        assert IDENTITY.inverse() == IDENTITY

    def test_singular_raises(self):
        """Test inverting a singular matrix raises SingularTransformError."""
        from src.whitted.core.matrix import SingularTransformError, scaling

        with pytest.raises(SingularTransformError):
            scaling(1.0, 0.0, 1.0).inverse()

    def test_singular_error_is_value_error(self):
        """Test SingularTransformError can be caught as ValueError."""
        from src.whitted.core.matrix import SingularTransformError

        assert issubclass(SingularTransformError, ValueError)


class TestTransforms:
    """Tests for transform builders."""

    def test_translation(self):
        """Test translating points but not vectors."""
        from src.whitted.core.matrix import translation
        from src.whitted.core.tuples import Point, Vector

        t = translation(5.0, -3.0, 2.0)
        assert t * Point(-3.0, 4.0, 5.0) == Point(2.0, 1.0, 7.0)
        assert t.inverse() * Point(-3.0, 4.0, 5.0) == Point(-8.0, 7.0, 3.0)
        assert t * Vector(-3.0, 4.0, 5.0) == Vector(-3.0, 4.0, 5.0)

    def test_scaling(self):
        """Test scaling points and vectors, including reflection."""
        from src.whitted.core.matrix import scaling, uniform_scaling
        from src.whitted.core.tuples import Point, Vector

        s = scaling(2.0, 3.0, 4.0)
        assert s * Point(-4.0, 6.0, 8.0) == Point(-8.0, 18.0, 32.0)
        assert s * Vector(-4.0, 6.0, 8.0) == Vector(-8.0, 18.0, 32.0)
        assert s.inverse() * Vector(-4.0, 6.0, 8.0) == Vector(-2.0, 2.0, 2.0)
        assert scaling(-1.0, 1.0, 1.0) * Point(2.0, 3.0, 4.0) == Point(-2.0, 3.0, 4.0)
        assert uniform_scaling(2.0) == scaling(2.0, 2.0, 2.0)

    def test_rotations(self):
        """Test rotations about each axis by a quarter turn."""
        from src.whitted.core.matrix import rotation_x, rotation_y, rotation_z
        from src.whitted.core.tuples import Point

        quarter = math.pi / 2.0
        half = math.sqrt(2.0) / 2.0
        assert rotation_x(math.pi / 4.0) * Point(0.0, 1.0, 0.0) == Point(0.0, half, half)
        assert rotation_x(quarter) * Point(0.0, 1.0, 0.0) == Point(0.0, 0.0, 1.0)
        assert rotation_y(quarter) * Point(0.0, 0.0, 1.0) == Point(1.0, 0.0, 0.0)
        assert rotation_z(quarter) * Point(0.0, 1.0, 0.0) == Point(-1.0, 0.0, 0.0)

    def test_inverse_rotation_goes_backwards(self):
        """Test the inverse of a rotation rotates the opposite way."""
        from src.whitted.core.matrix import rotation_x
        from src.whitted.core.tuples import Point

        half = math.sqrt(2.0) / 2.0
        inverse = rotation_x(math.pi / 4.0).inverse()
        assert inverse * Point(0.0, 1.0, 0.0) == Point(0.0, half, -half)

    @pytest.mark.parametrize(
        "params,expected",
        [
            ((1, 0, 0, 0, 0, 0), (5.0, 3.0, 4.0)),
            ((0, 1, 0, 0, 0, 0), (6.0, 3.0, 4.0)),
            ((0, 0, 1, 0, 0, 0), (2.0, 5.0, 4.0)),
            ((0, 0, 0, 1, 0, 0), (2.0, 7.0, 4.0)),
            ((0, 0, 0, 0, 1, 0), (2.0, 3.0, 6.0)),
            ((0, 0, 0, 0, 0, 1), (2.0, 3.0, 7.0)),
        ],
    )
    def test_shearing(self, params, expected):
        """Test each shearing parameter moves one coordinate by another."""
        from src.whitted.core.matrix import shearing
        from src.whitted.core.tuples import Point

        assert shearing(*params) * Point(2.0, 3.0, 4.0) == Point(*expected)


class TestComposition:
    """Tests for chaining transforms."""

    def test_compose_right_to_left(self):
        """Test chained transforms apply in reverse multiplication order."""
        from src.whitted.core.matrix import rotation_x, scaling, translation
        from src.whitted.core.tuples import Point

        p = Point(1.0, 0.0, 1.0)
        a = rotation_x(math.pi / 2.0)
        b = scaling(5.0, 5.0, 5.0)
        c = translation(10.0, 5.0, 7.0)

        p2 = a * p
        assert p2 == Point(1.0, -1.0, 0.0)
        p3 = b * p2
        assert p3 == Point(5.0, -5.0, 0.0)
        assert c * p3 == Point(15.0, 0.0, 7.0)
        assert (c * b * a) * p == Point(15.0, 0.0, 7.0)

    def test_fluent_chain_reads_in_order(self):
        """Test the fluent API applies operations in reading order."""
        from src.whitted.core.matrix import Matrix, rotation_x, scaling, translation
        from src.whitted.core.tuples import Point

        fluent = (
            Matrix.identity()
            .rotate_x(math.pi / 2.0)
            .scale(5.0, 5.0, 5.0)
            .translate(10.0, 5.0, 7.0)
        )
        assert fluent == translation(10.0, 5.0, 7.0) * scaling(5.0, 5.0, 5.0) * rotation_x(
            math.pi / 2.0
        )
        assert fluent * Point(1.0, 0.0, 1.0) == Point(15.0, 0.0, 7.0)

    def test_associative(self):
        """Test matrix multiplication is associative."""
        from src.whitted.core.matrix import rotation_y, shearing, translation

        a = rotation_y(0.3)
        b = shearing(1, 0, 0, 0.5, 0, 0)
        c = translation(1.0, 2.0, 3.0)
        assert (a * b) * c == a * (b * c)
