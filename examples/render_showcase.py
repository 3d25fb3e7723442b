#!/usr/bin/env python3
"""Render the showcase scene.

This script renders the demo room: a patterned floor under a glass floor,
a mirror sphere, a glass cube and a glass sphere, lit by a single point light.

Usage:
    python -m examples.render_showcase [options]

Options:
    --width WIDTH       Image width in pixels (default: 640)
    --height HEIGHT     Image height in pixels (default: 360)
    --depth DEPTH       Reflection/refraction recursion depth (default: 5)
    --no-antialias      Render one sample per pixel instead of four
    --output OUTPUT     Output file path, .png or .ppm
                        (default: image-<timestamp>-<width>x<height>.png)
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m examples.render_showcase --width 320 --height 180 --no-antialias
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the showcase scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=640,
        help="Image width in pixels (default: 640)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=360,
        help="Image height in pixels (default: 360)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=5,
        help="Reflection/refraction recursion depth (default: 5)",
    )
    parser.add_argument(
        "--no-antialias",
        action="store_true",
        help="Render one sample per pixel instead of four",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help=(
            "Output file path, .png or .ppm "
            "(default: image-<timestamp>-<width>x<height>.png)"
        ),
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def render_showcase(
    width: int = 640,
    height: int = 360,
    max_depth: int = 5,
    antialias: bool = True,
    output_path: str | None = None,
    quiet: bool = False,
) -> Path:
    """Render the showcase scene and save to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        max_depth: Recursion budget for reflection and refraction rays.
        antialias: Average a 2x2 grid of samples per pixel.
        output_path: Output file path (PNG or PPM by extension).
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from src.whitted.camera.pinhole import Camera, RenderSettings
    from src.whitted.preview.export import save_png, save_ppm
    from src.whitted.scene.showcase import create_showcase_scene

    settings = RenderSettings(width, height, antialias=antialias, max_depth=max_depth)

    if not quiet:
        print(f"Creating showcase scene ({settings.width}x{settings.height})...")

    world, scene_camera = create_showcase_scene(settings.width, settings.height)
    camera = Camera.from_settings(settings, scene_camera.transform)

    if not quiet:
        print(f"Anti-alias {'on' if settings.antialias else 'off'}")
        print(f"{settings.width}x{settings.height} = {settings.width * settings.height} pixels")

    start_time = time.time()

    def progress_callback(rows_done: int, total_rows: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (rows_done / total_rows) * 100 if total_rows > 0 else 0
            rows_per_sec = rows_done / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {rows_done}/{total_rows} rows "
                f"({progress_pct:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    canvas = camera.render(world, max_depth=settings.max_depth, callback=progress_callback)

    total_time = time.time() - start_time
    if not quiet:
        print()  # Newline after progress
        print(f"Render took {total_time:.3f} seconds")
        print(
            f"Average {total_time * 1e6 / (settings.width * settings.height):.3f} "
            "microseconds per pixel"
        )

    if output_path is None:
        output_path = f"image-{int(time.time())}-{settings.width}x{settings.height}.png"
    output_file = Path(output_path)

    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    # The renderer runs on the CPU; Taichi only holds the pixel buffer
    ti.init(arch=ti.cpu)
    if not args.quiet:
        print("Using CPU backend")

    try:
        render_showcase(
            width=args.width,
            height=args.height,
            max_depth=args.depth,
            antialias=not args.no_antialias,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
