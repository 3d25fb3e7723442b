"""Canvas: the render target the camera writes pixels into.

The pixel buffer is a Taichi vector field of shape (width, height), indexed
``[x, y]`` with ``y = 0`` at the top row. Values are linear and unclamped;
clamping happens only when converting to 8-bit.

Taichi must be initialized (``ti.init``) before a Canvas is created.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.whitted.core.canvas import Canvas
    >>> from src.whitted.core.color import Color
    >>> canvas = Canvas(10, 20)
    >>> canvas.set_pixel(2, 3, Color(1.0, 0.0, 0.0))
    >>> canvas.to_numpy().shape
    (20, 10, 3)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from src.whitted.core.color import BLACK, Color


@ti.kernel
def _fill_field(field: ti.template(), r: ti.f32, g: ti.f32, b: ti.f32):
    for i, j in field:
        field[i, j] = ti.Vector([r, g, b])


class Canvas:
    """A width x height grid of RGB pixels backed by a Taichi field.

    Args:
        width: Number of columns (> 0).
        height: Number of rows (> 0).

    Raises:
        ValueError: If either dimension is not positive.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self._pixels.fill(0.0)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def field(self):
        """The underlying Taichi field, indexed ``[x, y]``."""
        return self._pixels

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Write ``color`` to pixel (x, y).

        Raises:
            IndexError: If (x, y) is outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[x, y] = color.to_tuple()

    def get_pixel(self, x: int, y: int) -> Color:
        """Read pixel (x, y) as an unclamped Color.

        Raises:
            IndexError: If (x, y) is outside the canvas.
        """
        self._check_bounds(x, y)
        value = self._pixels[x, y]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def fill(self, color: Color = BLACK) -> None:
        """Set every pixel to ``color``."""
        _fill_field(self._pixels, color.r, color.g, color.b)

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Get the pixels as a NumPy array.

        Returns:
            Linear, unclamped array of shape (height, width, 3) with dtype
            float32. Row 0 is the top row of the image.
        """
        # Transpose from (width, height, 3) to (height, width, 3) for standard image format
        image = np.transpose(self._pixels.to_numpy(), (1, 0, 2))
        return np.ascontiguousarray(image, dtype=np.float32)

    def to_uint8(self) -> npt.NDArray[np.uint8]:
        """Get the pixels as 8-bit values, clamped to [0, 1] and scaled by 255."""
        image = np.clip(self.to_numpy(), 0.0, 1.0)
        return np.round(image * 255.0).astype(np.uint8)

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
