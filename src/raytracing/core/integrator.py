"""Recursive Monte Carlo estimator for diffuse light transport.

``ray_color`` turns a ray, a scene and a remaining bounce budget into a
radiance estimate:

- depth <= 0: black. Unterminated paths lose their energy (a small, accepted
  bias that bounds recursion).
- hit: scatter a new ray from the hit point along normal + random_unit_vector()
  and recurse with depth - 1, scaling the result by ALBEDO.
- miss: a vertical white-to-sky-blue gradient.

The scatter formula is the simple "normal plus random unit vector" rule, not a
cosine-weighted BRDF sample; the reference images depend on it.

Example:
    >>> from src.raytracing.core.integrator import ray_color
    >>> from src.raytracing.core.ray import Ray
    >>> from src.raytracing.core.vector import Vec3
    >>> from src.raytracing.scene.world import World
    >>> ray_color(Ray(Vec3.zero(), Vec3(0.0, 1.0, 0.0)), World(), depth=1)
    Vec3(x=0.5, y=0.7, z=1.0)
"""

from __future__ import annotations

import math

from src.raytracing.core.ray import Ray
from src.raytracing.core.vector import Color, RandomSource, random_unit_vector
from src.raytracing.geometry.hittable import HitRecord, Hittable

# =============================================================================
# Rendering Constants
# =============================================================================

# Fraction of light reflected per diffuse bounce
ALBEDO = 0.5

# t range for scene queries; the positive lower bound skips self-intersection
# of a scattered ray with the surface it leaves
T_MIN = 0.001
T_MAX = math.inf

# Background gradient endpoints (straight down -> straight up)
SKY_BOTTOM_COLOR = Color(1.0, 1.0, 1.0)
SKY_TOP_COLOR = Color(0.5, 0.7, 1.0)


def background_color(ray: Ray) -> Color:
    """Sky color for a ray that escapes the scene.

    Linearly interpolates between SKY_BOTTOM_COLOR and SKY_TOP_COLOR using
    t = 0.5 * (unit_direction.y + 1).
    """
    unit_direction = ray.direction.unit_vector()
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * SKY_BOTTOM_COLOR + t * SKY_TOP_COLOR


def scatter_diffuse(rec: HitRecord, rng: RandomSource | None = None) -> Ray:
    """Spawn the diffuse bounce ray leaving a hit point.

    Args:
        rec: The surface hit.
        rng: Optional generator for the random unit vector.

    Returns:
        A ray from rec.point along rec.normal + random_unit_vector().
    """
    target = rec.point + rec.normal + random_unit_vector(rng)
    return Ray(rec.point, target - rec.point)


def ray_color(ray: Ray, world: Hittable, depth: int, rng: RandomSource | None = None) -> Color:
    """Estimate the radiance arriving along a ray.

    Args:
        ray: The ray to trace.
        world: The scene to intersect.
        depth: Remaining bounce budget.
        rng: Optional generator; no randomness is drawn when the ray misses.

    Returns:
        The radiance estimate as a Color.
    """
    if depth <= 0:
        return Color.zero()

    rec = world.hit(ray, T_MIN, T_MAX)
    if rec is not None:
        scattered = scatter_diffuse(rec, rng)
        return ALBEDO * ray_color(scattered, world, depth - 1, rng)

    return background_color(ray)
