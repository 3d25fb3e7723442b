"""Materials module for surface appearance.

Components:
    material: Phong material with reflection and refraction parameters
    pattern: Procedural two-color patterns (stripe, gradient)

Each shape carries one Material. Direct lighting is evaluated with
``Material.lighting``; the reflective, transparency and refractive_index
fields drive the recursive terms in the integrator.
"""

from .material import Material
from .pattern import GradientPattern, Pattern, StripePattern

__all__ = [
    "Material",
    "Pattern",
    "StripePattern",
    "GradientPattern",
]
