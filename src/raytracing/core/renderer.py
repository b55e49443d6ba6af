"""Renderer driving the per-pixel sample loop.

For every pixel the renderer draws ``samples_per_pixel`` jittered camera rays,
traces each with ray_color and sums the estimates into an Image. Scanlines are
processed top to bottom (y descending) and progress can be observed through a
callback or by iterating render_progressive().

Example:
    >>> from src.raytracing.camera.pinhole import PinholeCamera
    >>> from src.raytracing.core.renderer import Renderer
    >>> from src.raytracing.core.settings import RenderSettings
    >>> from src.raytracing.scene.world import World
    >>>
    >>> settings = RenderSettings(image_width=8, image_height=4, samples_per_pixel=2)
    >>> renderer = Renderer(World(), PinholeCamera(aspect_ratio=2.0), settings)
    >>> image = renderer.render()
    >>> image.write_ppm(settings.samples_per_pixel)  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Generator

from src.raytracing.camera.pinhole import PinholeCamera
from src.raytracing.core.image import Image
from src.raytracing.core.integrator import ray_color
from src.raytracing.core.settings import RenderSettings
from src.raytracing.core.vector import Color, RandomSource
from src.raytracing.geometry.hittable import Hittable

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (scanlines_done, total_scanlines)
ProgressCallback = Callable[[int, int], None]


class Renderer:
    """Renders a scene through a camera into an accumulation Image.

    The scene and camera are read-only for the whole render.

    Attributes:
        world: The scene to render.
        camera: The camera generating primary rays.
        settings: Image size, samples per pixel and bounce depth.
    """

    def __init__(
        self,
        world: Hittable,
        camera: PinholeCamera,
        settings: RenderSettings,
        rng: RandomSource | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            world: The scene to render.
            camera: The camera generating primary rays.
            settings: Render parameters.
            rng: Optional generator for jitter and scattering. Defaults to the
                process-wide generator.

        Raises:
            ValueError: If the image is a single pixel wide or tall (the
                jitter mapping divides by width - 1 and height - 1).
        """
        if settings.image_width < 2 or settings.image_height < 2:
            raise ValueError(
                "Renderer needs at least 2x2 pixels, got "
                f"{settings.image_width}x{settings.image_height}"
            )
        self.world = world
        self.camera = camera
        self.settings = settings
        self._rng = rng
        self._image = Image(settings.image_width, settings.image_height)

    @property
    def width(self) -> int:
        """Get the image width."""
        return self.settings.image_width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self.settings.image_height

    @property
    def image(self) -> Image:
        """The accumulation buffer."""
        return self._image

    def reset(self) -> None:
        """Clear the accumulation buffer for a fresh render."""
        self._image.clear()

    def render_pixel(self, x: int, y: int) -> Color:
        """Sum samples_per_pixel radiance estimates for pixel (x, y).

        Args:
            x: Pixel column (0 = left).
            y: Pixel row (0 = bottom).

        Returns:
            The unnormalized color sum.
        """
        pixel_color = Color.zero()
        for _ in range(self.settings.samples_per_pixel):
            ray = self.camera.get_ray_jittered(x, y, self.width, self.height, self._rng)
            pixel_color = pixel_color + ray_color(ray, self.world, self.settings.max_depth, self._rng)
        return pixel_color

    def render_scanline(self, y: int) -> None:
        """Render every pixel of row y into the image."""
        for x in range(self.width):
            self._image.set_pixel(x, y, self.render_pixel(x, y))

    def render_progressive(self) -> Generator[tuple[int, int], None, None]:
        """Render scanline by scanline, yielding progress after each one.

        Yields:
            Tuple of (scanlines_done, total_scanlines).
        """
        total = self.height
        for done, y in enumerate(reversed(range(total)), start=1):
            logger.debug("Scanline remaining: %d", y)
            self.render_scanline(y)
            yield (done, total)

    def render(self, callback: ProgressCallback | None = None) -> Image:
        """Render the whole image.

        Args:
            callback: Optional function called after each scanline with
                (scanlines_done, total_scanlines).

        Returns:
            The accumulated Image (color sums, not yet averaged).
        """
        logger.info(
            "Rendering %dx%d at %d spp, max depth %d",
            self.width,
            self.height,
            self.settings.samples_per_pixel,
            self.settings.max_depth,
        )
        start_time = time.perf_counter()

        for done, total in self.render_progressive():
            if callback is not None:
                callback(done, total)

        logger.info("Done in %.2fs", time.perf_counter() - start_time)
        return self._image

    def __repr__(self) -> str:
        return (
            f"Renderer(width={self.width}, height={self.height}, "
            f"samples={self.settings.samples_per_pixel}, max_depth={self.settings.max_depth})"
        )


def render_image(
    world: Hittable,
    camera: PinholeCamera,
    settings: RenderSettings,
    rng: RandomSource | None = None,
) -> Image:
    """Render a scene in one call.

    Args:
        world: The scene to render.
        camera: The camera generating primary rays.
        settings: Render parameters.
        rng: Optional generator for jitter and scattering.

    Returns:
        The accumulated Image.
    """
    return Renderer(world, camera, settings, rng).render()
