"""Ray data structure.

A ray is the parametric half-line P(t) = origin + t * direction. Rays are
created fresh for every camera sample and every diffuse bounce and are never
mutated afterwards.

Example:
    >>> from src.raytracing.core.ray import Ray
    >>> from src.raytracing.core.vector import Vec3
    >>> ray = Ray(origin=Vec3(0.0, 0.0, 0.0), direction=Vec3(0.0, 0.0, -1.0))
    >>> ray.at(5.0)  # Point 5 units along the ray
    Vec3(x=0.0, y=0.0, z=-5.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.raytracing.core.vector import Point, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be unit
            length, but must never be the zero vector.
    """

    origin: Point
    direction: Vec3

    def at(self, t: float) -> Point:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + t * self.direction


def ray_at(ray: Ray, t: float) -> Point:
    """Functional form of Ray.at."""
    return ray.at(t)
