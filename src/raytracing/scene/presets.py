"""Ready-made scenes.

The two-sphere scene is a small sphere resting on a very large sphere that
acts as the ground, viewed by the default pinhole camera.

Example:
    >>> from src.raytracing.scene.presets import create_two_sphere_scene
    >>> world, camera = create_two_sphere_scene(aspect_ratio=16.0 / 9.0)
    >>> len(world)
    2
"""

from __future__ import annotations

from src.raytracing.camera.pinhole import PinholeCamera
from src.raytracing.core.settings import DEFAULT_ASPECT_RATIO
from src.raytracing.core.vector import Point
from src.raytracing.geometry.sphere import Sphere
from src.raytracing.scene.world import World

# Small sphere in front of the camera
CENTER_SPHERE_CENTER = Point(0.0, 0.0, -1.0)
CENTER_SPHERE_RADIUS = 0.5

# Ground sphere; its top sits slightly above the bottom of the small sphere
GROUND_SPHERE_CENTER = Point(0.0, -100.4, -1.0)
GROUND_SPHERE_RADIUS = 100.0


def create_two_sphere_world() -> World:
    """Build the small-sphere-on-ground scene."""
    world = World()
    world.add(Sphere(CENTER_SPHERE_CENTER, CENTER_SPHERE_RADIUS))
    world.add(Sphere(GROUND_SPHERE_CENTER, GROUND_SPHERE_RADIUS))
    return world


def create_two_sphere_scene(
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> tuple[World, PinholeCamera]:
    """Build the two-sphere scene and a matching camera.

    Args:
        aspect_ratio: Width divided by height of the output image.

    Returns:
        Tuple of (world, camera).
    """
    return create_two_sphere_world(), PinholeCamera(aspect_ratio=aspect_ratio)
