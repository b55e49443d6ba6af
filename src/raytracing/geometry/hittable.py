"""Hit record and the Hittable protocol shared by all intersectable shapes.

Every primitive implements ``hit(ray, t_min, t_max)`` and returns either a
HitRecord for the closest intersection with t in [t_min, t_max] or None.
New shapes are added by subclassing Hittable; the scene query in
``src.raytracing.scene.world`` never needs to change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from src.raytracing.core.ray import Ray
from src.raytracing.core.vector import Point, Vec3, dot


@dataclass
class HitRecord:
    """Record of a ray-surface intersection.

    Attributes:
        point: The 3D point where the ray met the surface.
        normal: The unit surface normal, always oriented against the
            incoming ray (see set_face_normal).
        t: The ray parameter at the intersection.
        front_face: True if the ray struck the outward-facing side.
    """

    point: Point = field(default_factory=Vec3.zero)
    normal: Vec3 = field(default_factory=Vec3.zero)
    t: float = 0.0
    front_face: bool = False

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Store the normal so that it always opposes the incoming ray.

        Args:
            ray: The ray that produced this hit.
            outward_normal: The unit normal pointing out of the surface.
        """
        self.front_face = dot(ray.direction, outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Abstract base class for anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Intersect the ray with this object.

        Args:
            ray: The ray to test.
            t_min: Smallest accepted ray parameter (inclusive).
            t_max: Largest accepted ray parameter (inclusive).

        Returns:
            The closest HitRecord with t_min <= t <= t_max, or None on a miss.
        """
        raise NotImplementedError
