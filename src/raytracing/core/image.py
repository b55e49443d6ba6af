"""Image accumulation buffer.

The buffer stores one accumulated (unnormalized) color sum per pixel. Storage
is row-major with y = 0 at the bottom of the image: pixel (x, y) lives at flat
index ``y * width + x``, which is ``pixels[y, x]`` in the underlying
``(height, width, 3)`` NumPy array.

Example:
    >>> from src.raytracing.core.image import Image
    >>> from src.raytracing.core.vector import Color
    >>> image = Image(2, 2)
    >>> image.add_sample(0, 1, Color(1.0, 0.5, 0.25))
    >>> image.get_pixel(0, 1)
    Vec3(x=1.0, y=0.5, z=0.25)
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

import numpy as np
import numpy.typing as npt

from src.raytracing.core.vector import Color


class Image:
    """Per-pixel color sums for a width x height raster.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create a black image.

        Args:
            width: Image width in pixels (> 0).
            height: Image height in pixels (> 0).

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @property
    def width(self) -> int:
        """Get the image width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self._height

    @property
    def pixels(self) -> npt.NDArray[np.float64]:
        """The (height, width, 3) accumulation array, bottom row first."""
        return self._pixels

    def index(self, x: int, y: int) -> int:
        """Flat row-major index of pixel (x, y)."""
        return y * self._width + x

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the accumulated color of pixel (x, y)."""
        r, g, b = self._pixels[y, x]
        return Color(float(r), float(g), float(b))

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Overwrite the accumulated color of pixel (x, y)."""
        self._pixels[y, x] = (color.x, color.y, color.z)

    def add_sample(self, x: int, y: int, color: Color) -> None:
        """Add one sample's radiance to pixel (x, y)."""
        self._pixels[y, x] += (color.x, color.y, color.z)

    def set_data(self, pixel_data: Sequence[Color]) -> None:
        """Replace the whole buffer from a flat row-major color list.

        Args:
            pixel_data: width * height colors, index y * width + x.

        Raises:
            ValueError: If the number of colors does not match the image size.
        """
        expected = self._width * self._height
        if len(pixel_data) != expected:
            raise ValueError(f"Expected {expected} pixels, got {len(pixel_data)}")
        flat = np.array([(c.x, c.y, c.z) for c in pixel_data], dtype=np.float64)
        self._pixels = flat.reshape(self._height, self._width, 3)

    def clear(self) -> None:
        """Reset every pixel to black."""
        self._pixels.fill(0.0)

    def write_ppm(self, samples_per_pixel: int, stream: TextIO | None = None) -> None:
        """Encode the image as a plain-text PPM (P3) document.

        See src.raytracing.output.export.write_ppm.
        """
        from src.raytracing.output.export import write_ppm

        write_ppm(self, samples_per_pixel, stream if stream is not None else sys.stdout)

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height})"
