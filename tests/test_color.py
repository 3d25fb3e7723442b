"""Unit tests for RGB colors."""


class TestColorArithmetic:
    """Tests for color arithmetic."""

    def test_components(self):
        """Test color channels are stored as floats."""
        from src.whitted.core.color import Color

        c = Color(-0.5, 0.4, 1.7)
        assert (c.r, c.g, c.b) == (-0.5, 0.4, 1.7)

    def test_add_and_subtract(self):
        """Test adding and subtracting colors."""
        from src.whitted.core.color import Color

        a = Color(0.9, 0.6, 0.75)
        b = Color(0.7, 0.1, 0.25)
        assert a + b == Color(1.6, 0.7, 1.0)
        assert a - b == Color(0.2, 0.5, 0.5)

    def test_scalar_multiply(self):
        """Test scaling a color by a scalar from either side."""
        from src.whitted.core.color import Color

        c = Color(0.2, 0.3, 0.4)
        assert c * 2 == Color(0.4, 0.6, 0.8)
        assert 2.0 * c == Color(0.4, 0.6, 0.8)
        assert c / 2.0 == Color(0.1, 0.15, 0.2)

    def test_hadamard_product(self):
        """Test multiplying two colors channel by channel."""
        from src.whitted.core.color import Color

        assert Color(1.0, 0.2, 0.4) * Color(0.9, 1.0, 0.1) == Color(0.9, 0.2, 0.04)

    def test_unclamped(self):
        """Test arithmetic does not clamp channels."""
        from src.whitted.core.color import WHITE

        assert (WHITE * 3.0).r == 3.0

    def test_tolerant_equality(self):
        """Test colors within EPSILON compare equal."""
        from src.whitted.core.color import Color

        assert Color(0.38066, 0.47583, 0.2855) == Color(0.380661, 0.475832, 0.285502)
        assert Color(0.1, 0.1, 0.1) != Color(0.1, 0.1, 0.2)

    def test_constants(self):
        """Test the BLACK and WHITE constants."""
        from src.whitted.core.color import BLACK, WHITE, Color

        assert BLACK == Color(0.0, 0.0, 0.0)
        assert WHITE == Color(1.0, 1.0, 1.0)
