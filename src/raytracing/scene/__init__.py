"""Scene module: the World aggregate and preset scenes."""

from .presets import create_two_sphere_scene, create_two_sphere_world
from .world import World

__all__ = [
    "World",
    "create_two_sphere_scene",
    "create_two_sphere_world",
]
