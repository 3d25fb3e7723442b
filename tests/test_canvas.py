"""Unit tests for the Taichi-backed canvas.

Tests cover:
- Construction and dimension validation
- Reading and writing pixels, including bounds checks
- Filling the canvas
- NumPy conversion layout and 8-bit quantization
"""

import numpy as np
import pytest


class TestCanvasCreation:
    """Tests for canvas construction."""

    def test_dimensions_and_black(self):
        """Test a new canvas has the requested size and every pixel is black."""
        from src.whitted.core.canvas import Canvas
        from src.whitted.core.color import BLACK

        canvas = Canvas(10, 20)
        assert canvas.width == 10
        assert canvas.height == 20
        assert canvas.field.shape == (10, 20)
        for x in range(10):
            for y in range(20):
                assert canvas.get_pixel(x, y) == BLACK

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-3, 5)])
    def test_invalid_dimensions(self, width, height):
        """Test non-positive dimensions are rejected."""
        from src.whitted.core.canvas import Canvas

        with pytest.raises(ValueError):
            Canvas(width, height)


class TestCanvasPixels:
    """Tests for pixel access."""

    def test_set_and_get(self):
        """Test writing a pixel and reading it back."""
        from src.whitted.core.canvas import Canvas
        from src.whitted.core.color import BLACK, Color

        canvas = Canvas(10, 20)
        red = Color(1.0, 0.0, 0.0)
        canvas.set_pixel(2, 3, red)
        assert canvas.get_pixel(2, 3) == red
        assert canvas.get_pixel(3, 2) == BLACK

    def test_values_are_unclamped(self):
        """Test the canvas keeps values outside [0, 1]."""
        from src.whitted.core.canvas import Canvas
        from src.whitted.core.color import Color

        canvas = Canvas(2, 2)
        canvas.set_pixel(0, 0, Color(1.5, -0.5, 0.25))
        assert canvas.get_pixel(0, 0) == Color(1.5, -0.5, 0.25)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
    def test_out_of_bounds(self, x, y):
        """Test pixel access outside the canvas raises IndexError."""
        from src.whitted.core.canvas import Canvas
        from src.whitted.core.color import WHITE

        canvas = Canvas(4, 3)
        with pytest.raises(IndexError):
            canvas.set_pixel(x, y, WHITE)
        with pytest.raises(IndexError):
            canvas.get_pixel(x, y)

    def test_fill(self):
        """Test filling sets every pixel."""
        from src.whitted.core.canvas import Canvas
        from src.whitted.core.color import BLACK, Color

        canvas = Canvas(3, 2)
        canvas.fill(Color(0.25, 0.5, 0.75))
        image = canvas.to_numpy()
        np.testing.assert_allclose(image, np.full((2, 3, 3), [0.25, 0.5, 0.75]), atol=1e-6)

        canvas.fill()
        assert canvas.get_pixel(2, 1) == BLACK


class TestCanvasConversion:
    """Tests for NumPy conversion."""

    def test_to_numpy_layout(self):
        """Test the array is (height, width, 3) with row 0 at the top."""
        from src.whitted.core.canvas import Canvas
        from src.whitted.core.color import Color

        canvas = Canvas(4, 2)
        canvas.set_pixel(3, 0, Color(1.0, 0.0, 0.0))
        canvas.set_pixel(0, 1, Color(0.0, 0.0, 1.0))

        image = canvas.to_numpy()
        assert image.shape == (2, 4, 3)
        assert image.dtype == np.float32
        assert image.flags["C_CONTIGUOUS"]
        np.testing.assert_array_equal(image[0, 3], [1.0, 0.0, 0.0])
        np.testing.assert_array_equal(image[1, 0], [0.0, 0.0, 1.0])

    def test_to_uint8_clamps_and_scales(self):
        """Test quantization clamps to [0, 1] and rounds to 0..255."""
        from src.whitted.core.canvas import Canvas
        from src.whitted.core.color import Color

        canvas = Canvas(3, 1)
        canvas.set_pixel(0, 0, Color(1.5, 0.0, 0.5))
        canvas.set_pixel(1, 0, Color(-0.5, 0.4, 0.6))
        canvas.set_pixel(2, 0, Color(0.0, 0.0, 1.0))

        pixels = canvas.to_uint8()
        assert pixels.dtype == np.uint8
        np.testing.assert_array_equal(
            pixels[0], [[255, 0, 128], [0, 102, 153], [0, 0, 255]]
        )


class TestFillKernel:
    """Tests for the module-level fill kernel."""

    def test_kernel_annotations_are_not_postponed(self):
        """Test the canvas module keeps real annotations for the Taichi kernel."""
        import src.whitted.core.canvas as canvas_module

        assert "annotations" not in vars(canvas_module)

    def test_kernel_compiles_and_writes_field(self):
        """Test calling the kernel directly fills every cell of the field."""
        from src.whitted.core.canvas import Canvas, _fill_field
        from src.whitted.core.color import Color

        canvas = Canvas(2, 2)
        _fill_field(canvas.field, 0.5, 0.25, 1.0)
        for x in range(2):
            for y in range(2):
                assert canvas.get_pixel(x, y) == Color(0.5, 0.25, 1.0)
