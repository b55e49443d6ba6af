"""Output module: tone mapping and image encoders.

Components:
    tonemap: Sample averaging, gamma correction and 8-bit quantization
    export: PPM (P3) text encoder and PNG export via Pillow
"""

from .export import encode_ppm, image_to_uint8, save_png, write_ppm
from .tonemap import apply_gamma, average_samples, quantize, tone_map

__all__ = [
    "average_samples",
    "apply_gamma",
    "quantize",
    "tone_map",
    "encode_ppm",
    "write_ppm",
    "save_png",
    "image_to_uint8",
]
