"""Ready-made scenes.

``default_world`` is the small two-sphere world used throughout the tests:

- An outer unit sphere, color (0.8, 1.0, 0.6), diffuse 0.7, specular 0.2
- An inner sphere scaled by 0.5 with the default material
- One white light at (-10, 10, -10)

``create_showcase_scene`` builds the demo room:

- A patterned floor at y = -1 and a reflective, refractive glass floor at y = 0
- A closed room of planes 15 units out on every side
- A mirror-like sphere in the back left
- A glass cube, a glass sphere with a gradient pattern and a small striped
  sphere in the foreground
- One white light above and to the left of the camera

The room planes and floors do not cast shadows, so the light reaches the
interior through them.

Example:
    >>> from src.whitted.scene.showcase import create_showcase_scene
    >>> world, camera = create_showcase_scene(320, 180)
    >>> canvas = camera.render(world)
"""

import math

from src.whitted.camera.pinhole import Camera, view_transform
from src.whitted.core.color import WHITE, Color
from src.whitted.core.matrix import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    translation,
    uniform_scaling,
)
from src.whitted.core.tuples import Point, Vector
from src.whitted.geometry.cube import Cube
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.material import Material
from src.whitted.materials.pattern import GradientPattern, StripePattern
from src.whitted.scene.light import PointLight
from src.whitted.scene.world import World

# =============================================================================
# Showcase Parameters
# =============================================================================

# Distance from the origin to each wall and to the roof
ROOM_HALF_SIZE = 15.0

# Camera placement
CAMERA_FROM = Point(2.0, 1.5, -5.0)
CAMERA_TO = Point(0.0, 1.0, 0.0)
CAMERA_UP = Vector(0.0, 1.0, 0.0)
CAMERA_FIELD_OF_VIEW = math.pi / 3.0

LIGHT_POSITION = Point(-5.0, 7.5, -5.0)


def default_world() -> World:
    """Create the two concentric spheres world lit from the upper left."""
    outer = Sphere(
        material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2),
    )
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
    light = PointLight(Point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))
    return World([outer, inner], [light])


def _room(wall_material: Material) -> list[Plane]:
    """Roof and four walls around the origin."""
    quarter = math.pi / 2.0
    transforms = [
        # Roof
        translation(0.0, ROOM_HALF_SIZE, 0.0),
        # Left and right walls
        translation(-ROOM_HALF_SIZE, 0.0, 0.0) * rotation_y(-quarter) * rotation_x(quarter),
        translation(ROOM_HALF_SIZE, 0.0, 0.0) * rotation_y(quarter) * rotation_x(quarter),
        # Far and near walls
        translation(0.0, 0.0, ROOM_HALF_SIZE) * rotation_x(quarter),
        translation(0.0, 0.0, -ROOM_HALF_SIZE) * rotation_x(quarter),
    ]
    return [
        Plane(transform=transform, material=wall_material, casts_shadow=False)
        for transform in transforms
    ]


def create_showcase_scene(width: int, height: int) -> tuple[World, Camera]:
    """Create the demo room and a camera looking into it.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        A (world, camera) tuple. The camera has anti-aliasing enabled.
    """
    floor_stripes = StripePattern(
        Color(1.0, 0.25, 0.25),
        Color(0.25, 0.25, 1.0),
        transform=(
            uniform_scaling(0.125) * rotation_z(-math.pi / 4.0) * rotation_y(-math.pi / 8.0)
        ),
    )
    floor = Plane(
        transform=translation(0.0, -1.0, 0.0),
        material=Material(color=Color(1.0, 0.9, 0.9), specular=0.0, pattern=floor_stripes),
        casts_shadow=False,
    )

    glass_floor = Plane(
        material=Material(
            color=Color(0.0, 0.0, 0.25),
            ambient=0.0,
            diffuse=0.1,
            specular=1.0,
            reflective=1.0,
            transparency=1.0,
            refractive_index=1.3,
        ),
        casts_shadow=False,
    )

    walls = _room(Material(color=Color(1.0, 0.9, 0.9), specular=0.0))

    mirror_sphere = Sphere(
        transform=translation(-7.5, 2.0, 5.0),
        material=Material(
            color=Color(0.373, 0.404, 0.55),
            ambient=0.0,
            diffuse=0.2,
            specular=1.0,
            shininess=200.0,
            reflective=0.7,
        ),
    )

    glass_cube = Cube(
        transform=(
            translation(-0.75, 1.25, 0.5)
            * rotation_x(math.pi / 4.0)
            * rotation_y(math.pi / 5.0)
            * uniform_scaling(0.666)
        ),
        material=Material(
            color=Color(0.0, 0.0, 0.0),
            ambient=0.0,
            diffuse=0.0,
            specular=1.0,
            shininess=300.0,
            reflective=1.0,
            transparency=1.0,
            refractive_index=1.5,
        ),
    )

    gradient = GradientPattern(
        Color(1.0, 0.0, 0.0),
        Color(0.0, 1.0, 0.0),
        transform=(
            rotation_z(math.pi / 4.0) * translation(1.0, 0.0, 0.0) * uniform_scaling(2.0)
        ),
    )
    glass_sphere = Sphere(
        transform=translation(1.1, 0.5, -0.5) * uniform_scaling(0.5),
        material=Material(
            color=Color(0.5, 1.0, 0.1),
            diffuse=0.01,
            specular=1.0,
            shininess=300.0,
            pattern=gradient,
            reflective=1.0,
            transparency=1.0,
            refractive_index=1.5,
        ),
    )

    small_stripes = StripePattern(
        Color(1.0, 1.0, 0.0),
        Color(0.0, 1.0, 0.0),
        transform=uniform_scaling(0.25) * rotation_x(math.pi / 4.0),
    )
    striped_sphere = Sphere(
        transform=translation(-1.5, 0.33, -1.0) * uniform_scaling(0.33),
        material=Material(
            color=Color(1.0, 0.8, 0.1),
            diffuse=0.7,
            specular=0.3,
            pattern=small_stripes,
        ),
    )

    world = World(
        [
            floor,
            glass_floor,
            *walls,
            mirror_sphere,
            glass_sphere,
            striped_sphere,
            glass_cube,
        ],
        [PointLight(LIGHT_POSITION, WHITE)],
    )

    camera = Camera(
        width,
        height,
        CAMERA_FIELD_OF_VIEW,
        transform=view_transform(CAMERA_FROM, CAMERA_TO, CAMERA_UP),
        antialias=True,
    )
    return world, camera
