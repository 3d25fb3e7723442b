"""Pinhole camera: primary ray generation and the render loop.

The camera sits at the origin of its own space looking down -z, with the
image plane at z = -1. Its transform (usually built by ``view_transform``)
maps world space into camera space; the inverse of that transform takes
points on the image plane back out into the world.

The image plane extent comes from the horizontal field of view and the
aspect ratio:

    half_view = tan(field_of_view / 2)
    aspect >= 1:  half_width = half_view,          half_height = half_view / aspect
    aspect <  1:  half_width = half_view * aspect, half_height = half_view

so the field of view always spans the longer side of the image. Pixel (0, 0)
is the top-left corner.

Anti-aliasing uses a fixed 2x2 stratified grid per pixel (``ANTIALIAS_OFFSETS``)
and averages the four samples, which keeps renders deterministic.

Example:
    >>> import math
    >>> from src.whitted.camera.pinhole import Camera, view_transform
    >>> from src.whitted.core.tuples import Point, Vector
    >>> camera = Camera(
    ...     160, 120, math.pi / 3,
    ...     transform=view_transform(
    ...         Point(0.0, 1.5, -5.0), Point(0.0, 1.0, 0.0), Vector(0.0, 1.0, 0.0)
    ...     ),
    ... )
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from src.whitted.core.canvas import Canvas
from src.whitted.core.color import BLACK, Color
from src.whitted.core.integrator import DEFAULT_MAX_DEPTH
from src.whitted.core.matrix import IDENTITY, Matrix, SingularTransformError, translation
from src.whitted.core.ray import Ray
from src.whitted.core.tuples import Point, Vector
from src.whitted.scene.world import World

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]

# =============================================================================
# Sampling Constants
# =============================================================================

# Sub-pixel sample positions for 2x2 stratified anti-aliasing
ANTIALIAS_OFFSETS: tuple[tuple[float, float], ...] = (
    (0.25, 0.25),
    (0.25, 0.75),
    (0.75, 0.25),
    (0.75, 0.75),
)

# Sample position when anti-aliasing is off
CENTER_OFFSET = (0.5, 0.5)


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class RenderSettings:
    """Render configuration.

    Attributes:
        width: Output image width in pixels.
        height: Output image height in pixels.
        field_of_view: Horizontal field of view in radians, in (0, pi).
        antialias: Average a 2x2 grid of samples per pixel.
        max_depth: Recursion budget for reflection and refraction rays.

    Raises:
        ValueError: If any setting is out of range.
    """

    width: int
    height: int
    field_of_view: float = math.pi / 3.0
    antialias: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        if not 0.0 < self.field_of_view < math.pi:
            raise ValueError(
                f"Field of view must be in (0, pi) radians, got {self.field_of_view}"
            )
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")


# =============================================================================
# View Transform
# =============================================================================


def view_transform(from_point: Point, to_point: Point, up: Vector) -> Matrix:
    """Build the world-to-camera transform for an eye looking at a target.

    Args:
        from_point: Eye position.
        to_point: Point the eye looks at.
        up: Approximate up direction; need not be normalized or exactly
            perpendicular to the view direction.

    Returns:
        orientation * translation(-from_point). With the default orientation
        (looking from the origin down -z, up +y) this is the identity.

    Raises:
        ValueError: If ``from_point`` and ``to_point`` coincide.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)

    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)


# =============================================================================
# Camera
# =============================================================================


class Camera:
    """A pinhole camera that maps pixels to world-space rays.

    Args:
        hsize: Image width in pixels.
        vsize: Image height in pixels.
        field_of_view: Horizontal field of view in radians.
        transform: World-to-camera transform. Defaults to identity.
        antialias: Average a 2x2 grid of samples per pixel when rendering.

    Raises:
        ValueError: If either dimension is not positive or the field of
            view is outside (0, pi).
        SingularTransformError: If ``transform`` is not invertible.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix | None = None,
        antialias: bool = False,
    ) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera dimensions must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi) radians, got {field_of_view}")

        self._hsize = hsize
        self._vsize = vsize
        self._field_of_view = field_of_view
        self.antialias = antialias

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self._half_width = half_view
            self._half_height = half_view / aspect
        else:
            self._half_width = half_view * aspect
            self._half_height = half_view
        self._pixel_size = (self._half_width * 2.0) / hsize

        self._transform = IDENTITY if transform is None else transform
        try:
            self._inverse_transform = self._transform.inverse()
        except SingularTransformError as exc:
            logger.error("Camera has a singular view transform: %r", self._transform)
            raise SingularTransformError(
                f"Camera transform is not invertible: {self._transform!r}"
            ) from exc
        self._origin = self._inverse_transform * Point.origin()

    @classmethod
    def from_settings(cls, settings: RenderSettings, transform: Matrix | None = None) -> Camera:
        """Build a camera from render settings and a view transform."""
        return cls(
            settings.width,
            settings.height,
            settings.field_of_view,
            transform=transform,
            antialias=settings.antialias,
        )

    @property
    def hsize(self) -> int:
        return self._hsize

    @property
    def vsize(self) -> int:
        return self._vsize

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @property
    def transform(self) -> Matrix:
        return self._transform

    @property
    def half_width(self) -> float:
        return self._half_width

    @property
    def half_height(self) -> float:
        return self._half_height

    @property
    def pixel_size(self) -> float:
        """World-space size of one pixel on the image plane at z = -1."""
        return self._pixel_size

    def ray_for_pixel(
        self, px: float, py: float, offset_x: float = 0.5, offset_y: float = 0.5
    ) -> Ray:
        """Generate the world-space ray through a point inside pixel (px, py).

        Args:
            px: Pixel column, 0 at the left.
            py: Pixel row, 0 at the top.
            offset_x: Horizontal position inside the pixel, in [0, 1].
            offset_y: Vertical position inside the pixel, in [0, 1].

        Returns:
            A ray from the camera origin with a normalized direction.
        """
        world_x = self._half_width - (px + offset_x) * self._pixel_size
        world_y = self._half_height - (py + offset_y) * self._pixel_size

        pixel = self._inverse_transform * Point(world_x, world_y, -1.0)
        direction = (pixel - self._origin).normalize()
        return Ray(self._origin, direction)

    def color_for_pixel(
        self, world: World, px: int, py: int, max_depth: int = DEFAULT_MAX_DEPTH
    ) -> Color:
        """Shade one pixel, averaging the anti-aliasing samples if enabled."""
        offsets = ANTIALIAS_OFFSETS if self.antialias else (CENTER_OFFSET,)

        total = BLACK
        for offset_x, offset_y in offsets:
            ray = self.ray_for_pixel(px, py, offset_x, offset_y)
            total = total + world.color_at(ray, max_depth)
        return total / len(offsets)

    def render_rows(
        self,
        world: World,
        canvas: Canvas,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> Iterator[tuple[int, int]]:
        """Render into ``canvas`` row by row, yielding progress after each row.

        Args:
            world: The scene to render.
            canvas: Target canvas of size hsize x vsize.
            max_depth: Recursion budget for secondary rays.

        Yields:
            (rows_done, total_rows) after each completed row.

        Raises:
            ValueError: If the canvas size does not match the camera.
        """
        if canvas.width != self._hsize or canvas.height != self._vsize:
            raise ValueError(
                f"Canvas is {canvas.width}x{canvas.height}, camera is "
                f"{self._hsize}x{self._vsize}"
            )

        for y in range(self._vsize):
            for x in range(self._hsize):
                canvas.set_pixel(x, y, self.color_for_pixel(world, x, y, max_depth))
            logger.debug("Rendered row %d/%d", y + 1, self._vsize)
            yield y + 1, self._vsize

    def render(
        self,
        world: World,
        max_depth: int = DEFAULT_MAX_DEPTH,
        canvas: Canvas | None = None,
        callback: ProgressCallback | None = None,
    ) -> Canvas:
        """Render the world into a canvas.

        Args:
            world: The scene to render.
            max_depth: Recursion budget for secondary rays.
            canvas: Optional pre-allocated target canvas. A new one is
                allocated if omitted.
            callback: Optional function called after each row with
                (rows_done, total_rows).

        Returns:
            The canvas holding the rendered image.
        """
        logger.info(
            "Rendering %dx%d (antialias=%s, max_depth=%d, shapes=%d, lights=%d)",
            self._hsize,
            self._vsize,
            self.antialias,
            max_depth,
            len(world.shapes),
            len(world.lights),
        )
        if canvas is None:
            canvas = Canvas(self._hsize, self._vsize)
        start = time.perf_counter()

        for rows_done, total_rows in self.render_rows(world, canvas, max_depth):
            if callback is not None:
                callback(rows_done, total_rows)

        logger.info("Render finished in %.2f seconds", time.perf_counter() - start)
        return canvas

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self._hsize}, vsize={self._vsize}, "
            f"field_of_view={self._field_of_view:.4f}, antialias={self.antialias})"
        )
