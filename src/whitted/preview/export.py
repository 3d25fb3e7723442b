"""Image export utilities for rendered canvases.

This module saves canvases and NumPy images to files.

Supported formats:
    - PNG (8-bit via Pillow)
    - PPM (plain-text P3, no dependencies)

Colors are linear and unclamped on the canvas. Export clamps them to [0, 1],
optionally applies gamma encoding and scales to 0..255.

Example:
    >>> from src.whitted.preview.export import save_png, save_ppm
    >>> canvas = camera.render(world)
    >>> save_png(canvas, "output.png")
    >>> save_ppm(canvas, "output.ppm")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from src.whitted.core.canvas import Canvas

# Maximum line length of the PPM pixel data
PPM_LINE_WIDTH = 70


def apply_gamma(
    image: npt.NDArray[np.float32],
    gamma: float = 2.2,
) -> npt.NDArray[np.float32]:
    """Apply gamma encoding.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value (2.2 for sRGB-like output, 1.0 to leave as is).

    Returns:
        Gamma encoded image, clamped to [0, 1] unless gamma is 1.0.
    """
    if gamma == 1.0:
        return image

    # Clamp to [0, 1] before gamma to avoid NaN from negative values
    image = np.clip(image, 0.0, 1.0)

    # Apply gamma encoding: out = in^(1/gamma)
    result = np.power(image, 1.0 / gamma)

    return result.astype(np.float32)


def image_to_uint8(
    image: npt.NDArray[np.float32],
    gamma: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a linear float image to uint8.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value. Default 1.0 (linear).

    Returns:
        8-bit image array of shape (H, W, 3) with dtype uint8.
    """
    processed = np.clip(apply_gamma(image, gamma), 0.0, 1.0)
    return np.round(processed * 255.0).astype(np.uint8)


def save_png(canvas: Canvas, filepath: str | Path, *, gamma: float = 1.0) -> None:
    """Save a canvas as an 8-bit RGB PNG.

    Args:
        canvas: The rendered canvas.
        filepath: Output file path (should end in .png).
        gamma: Gamma value applied before quantization. Default 1.0 (linear).
    """
    save_png_from_array(canvas.to_numpy(), filepath, gamma=gamma)


def save_png_from_array(
    image: npt.NDArray[np.float32],
    filepath: str | Path,
    *,
    gamma: float = 1.0,
) -> None:
    """Save a NumPy array of shape (H, W, 3) as an 8-bit RGB PNG."""
    image_uint8 = image_to_uint8(image, gamma=gamma)

    # Save using Pillow
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(filepath)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Encode a canvas as plain-text PPM (P3).

    The header is ``P3``, ``width height`` and ``255`` on separate lines.
    Each image row then lists its clamped 0..255 channel values, wrapped so
    that no line exceeds 70 characters. The text ends with a newline.
    """
    pixels = canvas.to_uint8()
    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]

    for row in pixels:
        line = ""
        for value in row.reshape(-1):
            token = str(int(value))
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_LINE_WIDTH:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Write a canvas to ``filepath`` as plain-text PPM."""
    Path(filepath).write_text(canvas_to_ppm(canvas), encoding="ascii")
