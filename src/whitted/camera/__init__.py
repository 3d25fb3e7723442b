"""Camera module for view and ray generation.

Components:
    pinhole: Pinhole (perspective) camera, view transform, render settings

Camera responsibilities:
    - Map pixel coordinates to world-space rays through the image plane
    - Average stratified sub-pixel samples for anti-aliasing
    - Drive the row-by-row render loop into a Canvas
"""

from .pinhole import (
    ANTIALIAS_OFFSETS,
    Camera,
    ProgressCallback,
    RenderSettings,
    view_transform,
)

__all__ = [
    "Camera",
    "RenderSettings",
    "ProgressCallback",
    "view_transform",
    "ANTIALIAS_OFFSETS",
]
