"""Whitted-style recursive ray tracer.

This package renders scenes of spheres, planes and cubes with Phong lighting,
hard shadows, mirror reflection and refraction through transparent
materials, with Fresnel blending via Schlick's approximation.

Subpackages:
    core: Tuples, colors, matrices, rays, the canvas and the integrator
    geometry: Shape primitives and intersection algorithms
    materials: Phong materials and procedural patterns
    scene: Lights, intersections, the world container and ready-made scenes
    camera: Pinhole camera, ray generation and the render loop
    preview: Image export (PNG, PPM)
"""

__version__ = "0.1.0"
