#!/usr/bin/env python3
"""Render the two-sphere scene.

This script demonstrates end-to-end rendering: it builds the preset scene and
camera, renders with jittered supersampling and writes a plain-text PPM image
to standard output. Progress goes to standard error.

Usage:
    python -m examples.render_spheres [options] > image.ppm

Options:
    --width WIDTH           Image width in pixels (default: 400)
    --aspect-ratio RATIO    Width / height (default: 1.7778)
    --samples SAMPLES       Number of samples per pixel (default: 100)
    --max-depth DEPTH       Maximum diffuse bounces (default: 50)
    --seed SEED             Seed for reproducible output
    --png PATH              Also save a PNG copy
    --quiet                 Suppress progress output

Example:
    python -m examples.render_spheres --width 200 --samples 20 > spheres.ppm
"""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger("render_spheres")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the two-sphere scene as a PPM image on stdout.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--aspect-ratio",
        type=float,
        default=16.0 / 9.0,
        help="Image width divided by height (default: 16/9)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=100,
        help="Number of samples per pixel (default: 100)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=50,
        help="Maximum diffuse bounces (default: 50)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output",
    )
    parser.add_argument(
        "--png",
        type=str,
        default=None,
        help="Optional path for an additional PNG copy",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_spheres(
    width: int = 400,
    aspect_ratio: float = 16.0 / 9.0,
    num_samples: int = 100,
    max_depth: int = 50,
    seed: int | None = None,
    png_path: str | None = None,
) -> None:
    """Render the two-sphere scene and write the PPM document to stdout.

    Args:
        width: Image width in pixels.
        aspect_ratio: Image width divided by height.
        num_samples: Number of samples per pixel.
        max_depth: Maximum diffuse bounces.
        seed: Optional random seed.
        png_path: Optional path for an additional PNG copy.
    """
    from src.raytracing.core import vector
    from src.raytracing.core.renderer import Renderer
    from src.raytracing.core.settings import RenderSettings
    from src.raytracing.output.export import save_png, write_ppm
    from src.raytracing.scene.presets import create_two_sphere_scene

    if seed is not None:
        vector.seed(seed)

    settings = RenderSettings.from_aspect_ratio(
        image_width=width,
        aspect_ratio=aspect_ratio,
        samples_per_pixel=num_samples,
        max_depth=max_depth,
    )
    world, camera = create_two_sphere_scene(aspect_ratio=aspect_ratio)

    renderer = Renderer(world, camera, settings)

    def progress_callback(done: int, total: int) -> None:
        logger.info("Scanlines: %d/%d (%.1f%%)", done, total, 100.0 * done / total)

    image = renderer.render(callback=progress_callback)

    write_ppm(image, settings.samples_per_pixel, sys.stdout)

    if png_path is not None:
        save_png(image, png_path, settings.samples_per_pixel)
        logger.info("Saved PNG to: %s", png_path)


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Diagnostics go to stderr; stdout carries only the image
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(message)s",
    )

    try:
        render_spheres(
            width=args.width,
            aspect_ratio=args.aspect_ratio,
            num_samples=args.samples,
            max_depth=args.max_depth,
            seed=args.seed,
            png_path=args.png,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
