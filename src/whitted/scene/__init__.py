"""Scene module for lights, intersections and the world container.

Components:
    light: Point light source
    intersection: Intersection records, hit selection, shading computations
    world: Shape and light container with shadow queries
    showcase: Ready-made scenes (default test world, demo room)

Rays are resolved against the world in three steps: ``World.intersect``
collects every intersection sorted by time, ``hit`` picks the visible one and
``Intersection.prepare_computations_with_intersections`` derives the shading
state, including refractive indices from the containment stack.
"""

from .intersection import Computations, Intersection, hit, shadow_hit
from .light import PointLight

# Note: world and showcase are NOT imported here to avoid circular imports
# with src.whitted.core.integrator. Import them directly:
#   from src.whitted.scene.world import World
#   from src.whitted.scene.showcase import create_showcase_scene, default_world

__all__ = [
    "PointLight",
    "Intersection",
    "Computations",
    "hit",
    "shadow_hit",
]
