"""Sphere primitive with ray-sphere intersection.

The ray P(t) = origin + t * direction meets the sphere |P - center| = radius
where

    a*t^2 + 2*h*t + c = 0

with
    oc = origin - center
    a  = |direction|^2
    h  = dot(direction, oc)   (half of the traditional 'b')
    c  = |oc|^2 - radius^2

The discriminant in half-b form is h^2 - a*c.

Example:
    >>> from src.raytracing.core.ray import Ray
    >>> from src.raytracing.core.vector import Vec3
    >>> from src.raytracing.geometry.sphere import Sphere
    >>> sphere = Sphere(center=Vec3(0.0, 0.0, -1.0), radius=0.5)
    >>> rec = sphere.hit(Ray(Vec3.zero(), Vec3(0.0, 0.0, -1.0)), 0.0, float("inf"))
    >>> rec.t
    0.5
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.raytracing.core.ray import Ray
from src.raytracing.core.vector import Point, dot
from src.raytracing.geometry.hittable import HitRecord, Hittable


@dataclass(frozen=True)
class Sphere(Hittable):
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
    """

    center: Point
    radius: float

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Test for ray-sphere intersection.

        The smaller root is preferred; if it falls outside [t_min, t_max] the
        larger root is tried. A tangent ray (discriminant == 0) yields a single
        root and is accepted. The ray direction must be non-zero.

        Args:
            ray: The ray to test (direction need not be normalized).
            t_min: Minimum accepted t (inclusive).
            t_max: Maximum accepted t (inclusive).

        Returns:
            A HitRecord whose normal opposes the ray, or None on a miss.
        """
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = dot(ray.direction, oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0.0:
            return None

        sqrt_d = math.sqrt(discriminant)

        # Nearest root in the range [t_min, t_max]
        root = (-half_b - sqrt_d) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_d) / a
            if root < t_min or root > t_max:
                return None

        rec = HitRecord(t=root, point=ray.at(root))
        outward_normal = (rec.point - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        return rec
