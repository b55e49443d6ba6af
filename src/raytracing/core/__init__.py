"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Vec3 / Point / Color algebra and random sampling
    ray: Ray data structure
    integrator: Recursive diffuse radiance estimator (ray_color)
    image: Per-pixel color accumulation buffer
    settings: Render configuration
    renderer: Per-pixel sample loop with progress reporting
"""

from .image import Image
from .ray import Ray, ray_at
from .settings import RenderSettings
from .vector import (
    Color,
    Point,
    RandomSource,
    Vec3,
    clamp,
    cross,
    dot,
    get_rng,
    random,
    random_in_unit_sphere,
    random_range,
    random_unit_vector,
    seed,
    unit_vector,
)

# Note: integrator and renderer are NOT imported here to avoid circular imports.
# Import directly from src.raytracing.core.integrator or src.raytracing.core.renderer.

__all__ = [
    "Vec3",
    "Point",
    "Color",
    "RandomSource",
    "dot",
    "cross",
    "unit_vector",
    "clamp",
    "seed",
    "get_rng",
    "random",
    "random_range",
    "random_in_unit_sphere",
    "random_unit_vector",
    "Ray",
    "ray_at",
    "Image",
    "RenderSettings",
]
