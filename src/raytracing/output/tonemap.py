"""Sample averaging, gamma correction and quantization.

Turns accumulated radiance sums into display-ready 8-bit channels:

1. Divide by the number of samples per pixel (Monte Carlo mean).
2. Gamma-correct (square root by default, i.e. gamma 2.0).
3. Clamp to [0, 0.999], scale by 256 and floor into [0, 255].

A channel that received full radiance (1.0) on every sample therefore maps to
255, the maximum representable value.

Example:
    >>> import numpy as np
    >>> from src.raytracing.output.tonemap import tone_map
    >>> tone_map(np.full((1, 1, 3), 4.0), samples_per_pixel=4)
    array([[[255, 255, 255]]], dtype=uint8)
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

# Largest channel value before quantization
MAX_CHANNEL = 0.999

# Quantization scale (values floor into 0..255)
QUANTIZE_SCALE = 256.0


def average_samples(
    accumulated: npt.NDArray[np.float64],
    samples_per_pixel: int,
) -> npt.NDArray[np.float64]:
    """Divide accumulated color sums by the sample count.

    Args:
        accumulated: Array of summed radiance, shape (H, W, 3).
        samples_per_pixel: Number of samples summed into each pixel.

    Returns:
        The per-pixel mean radiance.
    """
    scale = 1.0 / samples_per_pixel
    return accumulated * scale


def apply_gamma(
    image: npt.NDArray[np.float64],
    gamma: float = 2.0,
) -> npt.NDArray[np.float64]:
    """Apply gamma encoding out = in^(1/gamma).

    Gamma 2.0 uses an exact square root.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value (default 2.0).

    Returns:
        Gamma corrected image.
    """
    if gamma == 1.0:
        return image
    if gamma == 2.0:
        return np.sqrt(image)
    return np.power(image, 1.0 / gamma)


def quantize(image: npt.NDArray[np.float64]) -> npt.NDArray[np.uint8]:
    """Clamp to [0, MAX_CHANNEL], scale by 256 and floor to 8-bit integers.

    Args:
        image: Gamma-encoded image array of shape (H, W, 3).

    Returns:
        uint8 array of the same shape.
    """
    clamped = np.clip(image, 0.0, MAX_CHANNEL)
    return np.floor(QUANTIZE_SCALE * clamped).astype(np.uint8)


def tone_map(
    accumulated: npt.NDArray[np.float64],
    samples_per_pixel: int,
    gamma: float = 2.0,
) -> npt.NDArray[np.uint8]:
    """Run the full averaging, gamma and quantization pipeline.

    Args:
        accumulated: Array of summed radiance, shape (H, W, 3).
        samples_per_pixel: Number of samples summed into each pixel (> 0).
        gamma: Gamma value (default 2.0).

    Returns:
        uint8 array of shape (H, W, 3).
    """
    mean = average_samples(accumulated, samples_per_pixel)
    return quantize(apply_gamma(mean, gamma))
