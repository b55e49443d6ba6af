"""Scene-level nearest-hit query over a collection of primitives.

The World owns a list of Hittable objects and is itself Hittable. A query
performs a linear scan, narrowing the upper bound of the search interval to the
closest accepted t so far, so the result is the first visible surface along
the ray regardless of insertion order.

Example:
    >>> from src.raytracing.core.vector import Vec3
    >>> from src.raytracing.geometry.sphere import Sphere
    >>> from src.raytracing.scene.world import World
    >>> world = World()
    >>> world.add(Sphere(Vec3(0.0, 0.0, -1.0), 0.5))
    >>> world.add(Sphere(Vec3(0.0, -100.5, -1.0), 100.0))
    >>> len(world)
    2
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from src.raytracing.core.ray import Ray
from src.raytracing.geometry.hittable import HitRecord, Hittable


class World(Hittable):
    """An aggregate of Hittable primitives.

    Primitives are shared read-only; nothing is mutated after construction.

    Attributes:
        objects: The primitives in insertion order.
    """

    def __init__(self, objects: Iterable[Hittable] | None = None) -> None:
        self.objects: list[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable) -> None:
        """Add a primitive to the scene."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove all primitives from the scene."""
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Test the ray against every primitive and keep the closest hit.

        Args:
            ray: The ray to test.
            t_min: Minimum accepted t (inclusive).
            t_max: Maximum accepted t (inclusive).

        Returns:
            The closest HitRecord among all primitives, or None if nothing
            was hit.
        """
        closest_hit = t_max
        result = None

        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_hit)
            if rec is not None:
                closest_hit = rec.t
                result = rec

        return result

    def __repr__(self) -> str:
        return f"World(objects={len(self.objects)})"
