"""Preview module for image output.

Components:
    export: PNG export via Pillow, plain-text PPM encoding, 8-bit conversion

Example:
    >>> from src.whitted.preview import save_png
    >>> canvas = camera.render(world)
    >>> save_png(canvas, "output.png", gamma=2.2)
"""

from src.whitted.preview.export import (
    apply_gamma,
    canvas_to_ppm,
    image_to_uint8,
    save_png,
    save_png_from_array,
    save_ppm,
)

__all__ = [
    "save_png",
    "save_png_from_array",
    "save_ppm",
    "canvas_to_ppm",
    "image_to_uint8",
    "apply_gamma",
]
