"""Image export utilities for rendered images.

Supported formats:
    - PPM, plain-text "P3" variant (the primary output, written to stdout)
    - PNG (8-bit via Pillow)

Both formats share the tone mapping in src.raytracing.output.tonemap and emit
rows top to bottom, even though the accumulation buffer stores the bottom row
first.

Example:
    >>> from src.raytracing.core.image import Image
    >>> from src.raytracing.output.export import encode_ppm
    >>> print(encode_ppm(Image(1, 1), samples_per_pixel=1), end="")
    P3
    1 1
    255
    0 0 0
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.raytracing.output.tonemap import tone_map

if TYPE_CHECKING:
    from src.raytracing.core.image import Image

# Maximum channel value declared in the PPM header
PPM_MAX_VALUE = 255


def image_to_uint8(image: Image, samples_per_pixel: int) -> npt.NDArray[np.uint8]:
    """Tone map an accumulation buffer into display order.

    Args:
        image: The accumulated image.
        samples_per_pixel: Number of samples summed into each pixel.

    Returns:
        uint8 array of shape (H, W, 3) with the top row first.
    """
    return np.flipud(tone_map(image.pixels, samples_per_pixel))


def encode_ppm(image: Image, samples_per_pixel: int) -> str:
    """Encode the image as a plain-text PPM document.

    The document is the header ``P3``, ``width height``, ``255`` followed by
    one ``R G B`` line per pixel in top-to-bottom, left-to-right order.

    Args:
        image: The accumulated image.
        samples_per_pixel: Number of samples summed into each pixel.

    Returns:
        The full PPM document, newline terminated.
    """
    rows = image_to_uint8(image, samples_per_pixel)
    lines = ["P3", f"{image.width} {image.height}", str(PPM_MAX_VALUE)]
    lines.extend(f"{r} {g} {b}" for r, g, b in rows.reshape(-1, 3).tolist())
    return "\n".join(lines) + "\n"


def write_ppm(image: Image, samples_per_pixel: int, stream: TextIO | None = None) -> None:
    """Write the PPM document to a text stream.

    Args:
        image: The accumulated image.
        samples_per_pixel: Number of samples summed into each pixel.
        stream: Destination stream (default: standard output).
    """
    out = stream if stream is not None else sys.stdout
    out.write(encode_ppm(image, samples_per_pixel))
    out.flush()


def save_png(image: Image, filepath: str, samples_per_pixel: int) -> None:
    """Save the tone mapped image as a PNG file.

    Args:
        image: The accumulated image.
        filepath: Output file path (should end in .png).
        samples_per_pixel: Number of samples summed into each pixel.
    """
    image_uint8 = np.ascontiguousarray(image_to_uint8(image, samples_per_pixel))

    # Save using Pillow
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(filepath)
