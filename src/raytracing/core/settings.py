"""Render configuration.

RenderSettings carries the fixed parameters a render needs: image size,
samples per pixel and the maximum bounce depth. Values are validated once at
construction so the numerical core can assume well-formed inputs.

Example:
    >>> from src.raytracing.core.settings import RenderSettings
    >>> settings = RenderSettings.from_aspect_ratio(400, 16.0 / 9.0)
    >>> (settings.image_width, settings.image_height)
    (400, 225)
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ASPECT_RATIO = 16.0 / 9.0
DEFAULT_IMAGE_WIDTH = 400
DEFAULT_SAMPLES_PER_PIXEL = 100
DEFAULT_MAX_DEPTH = 50


@dataclass(frozen=True)
class RenderSettings:
    """Fixed parameters of a render.

    Attributes:
        image_width: Image width in pixels (> 0).
        image_height: Image height in pixels (> 0).
        samples_per_pixel: Jittered samples averaged per pixel (> 0).
        max_depth: Maximum number of diffuse bounces (>= 0).
    """

    image_width: int = DEFAULT_IMAGE_WIDTH
    image_height: int = int(DEFAULT_IMAGE_WIDTH / DEFAULT_ASPECT_RATIO)
    samples_per_pixel: int = DEFAULT_SAMPLES_PER_PIXEL
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.image_width <= 0 or self.image_height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.image_width}x{self.image_height}"
            )
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

    @classmethod
    def from_aspect_ratio(
        cls,
        image_width: int = DEFAULT_IMAGE_WIDTH,
        aspect_ratio: float = DEFAULT_ASPECT_RATIO,
        samples_per_pixel: int = DEFAULT_SAMPLES_PER_PIXEL,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> RenderSettings:
        """Build settings whose height is int(image_width / aspect_ratio)."""
        return cls(
            image_width=image_width,
            image_height=int(image_width / aspect_ratio),
            samples_per_pixel=samples_per_pixel,
            max_depth=max_depth,
        )

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.image_width / self.image_height
