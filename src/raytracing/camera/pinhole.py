"""Pinhole camera model for perspective projection ray generation.

The camera sits at a fixed origin and looks down the negative z axis. A
virtual viewport of height ``viewport_height`` and width
``aspect_ratio * viewport_height`` is placed ``focal_length`` in front of the
eye. Normalized image coordinates map onto it as:

- u = 0: left edge, u = 1: right edge
- v = 0: bottom edge, v = 1: top edge

There is no lens model (zero depth of field) and no rotation.

Example:
    >>> from src.raytracing.camera.pinhole import PinholeCamera
    >>> camera = PinholeCamera(aspect_ratio=16.0 / 9.0)
    >>> ray = camera.cast_ray(0.5, 0.5)  # Ray through image center
    >>> ray.direction
    Vec3(x=0.0, y=0.0, z=-1.0)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.raytracing.core.ray import Ray
from src.raytracing.core.vector import Point, RandomSource, Vec3, random

# =============================================================================
# Camera Data Structures
# =============================================================================


@dataclass(frozen=True)
class PinholeCamera:
    """A fixed pinhole (perspective) camera.

    The viewport geometry is derived once at construction and never changes.

    Attributes:
        aspect_ratio: Width divided by height of the output image.
        viewport_height: Height of the virtual image plane in world units.
        focal_length: Distance from the eye to the image plane.
        origin: Eye position in world space.
        horizontal: Full-width span of the viewport (derived).
        vertical: Full-height span of the viewport (derived).
        lower_left_corner: Lower-left corner of the viewport (derived).
    """

    aspect_ratio: float = 16.0 / 9.0
    viewport_height: float = 2.0
    focal_length: float = 1.0
    origin: Point = field(default_factory=Vec3.zero)

    horizontal: Vec3 = field(init=False)
    vertical: Vec3 = field(init=False)
    lower_left_corner: Point = field(init=False)

    def __post_init__(self) -> None:
        viewport_width = self.aspect_ratio * self.viewport_height

        horizontal = Vec3(viewport_width, 0.0, 0.0)
        vertical = Vec3(0.0, self.viewport_height, 0.0)

        # Origin - horizontal/2 (left) - vertical/2 (down) - focal (forward along -z)
        lower_left = (
            self.origin - horizontal / 2.0 - vertical / 2.0 - Vec3(0.0, 0.0, self.focal_length)
        )

        object.__setattr__(self, "horizontal", horizontal)
        object.__setattr__(self, "vertical", vertical)
        object.__setattr__(self, "lower_left_corner", lower_left)

    @property
    def viewport_width(self) -> float:
        """Width of the virtual image plane in world units."""
        return self.aspect_ratio * self.viewport_height

    # =========================================================================
    # Ray Generation
    # =========================================================================

    def cast_ray(self, u: float, v: float) -> Ray:
        """Generate a ray through normalized image coordinates (u, v).

        Values slightly outside [0, 1] are allowed (supersampling jitter).

        Args:
            u: Horizontal coordinate (left to right).
            v: Vertical coordinate (bottom to top).

        Returns:
            A Ray from the camera origin toward the point on the viewport.
            The direction is not normalized.
        """
        point_on_viewport = self.lower_left_corner + u * self.horizontal + v * self.vertical
        return Ray(self.origin, point_on_viewport - self.origin)

    def get_ray_jittered(
        self,
        pixel_x: int,
        pixel_y: int,
        width: int,
        height: int,
        rng: RandomSource | None = None,
    ) -> Ray:
        """Generate a jittered ray for anti-aliasing.

        Adds a random offset in [0, 1) to the pixel coordinates and maps them
        with u = (x + jitter) / (width - 1), v = (y + jitter) / (height - 1).

        Args:
            pixel_x: Pixel x-coordinate (0 = left).
            pixel_y: Pixel y-coordinate (0 = bottom).
            width: Image width in pixels (must be > 1).
            height: Image height in pixels (must be > 1).
            rng: Optional generator for the jitter.

        Returns:
            A Ray with a random sub-pixel offset.
        """
        u = (pixel_x + random(rng)) / (width - 1.0)
        v = (pixel_y + random(rng)) / (height - 1.0)
        return self.cast_ray(u, v)

    # =========================================================================
    # Utility Functions
    # =========================================================================

    def get_camera_info(self) -> dict[str, tuple[float, float, float]]:
        """Get the derived camera state for debugging.

        Returns:
            Dictionary with origin, horizontal, vertical and lower_left.
        """
        return {
            "origin": tuple(self.origin),
            "horizontal": tuple(self.horizontal),
            "vertical": tuple(self.vertical),
            "lower_left": tuple(self.lower_left_corner),
        }
