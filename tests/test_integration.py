"""Integration tests for the end-to-end rendering pipeline.

These tests run scene construction, rendering and PPM encoding together at
tiny resolutions. The empty-world case is fully deterministic and checked
against values computed by hand from the sky gradient.
"""

from __future__ import annotations

import io
import math

import numpy as np
import pytest

from src.raytracing.camera.pinhole import PinholeCamera
from src.raytracing.core.renderer import Renderer
from src.raytracing.core.settings import RenderSettings
from src.raytracing.output.export import encode_ppm, write_ppm
from src.raytracing.scene.presets import create_two_sphere_scene
from src.raytracing.scene.world import World


def expected_sky_channel_values(direction_y: float, length: float) -> tuple[int, int, int]:
    """8-bit values for one sky sample seen through the full pipeline."""
    t = 0.5 * (direction_y / length + 1.0)
    color = (1.0 - 0.5 * t, 1.0 - 0.3 * t, 1.0)
    return tuple(math.floor(256.0 * min(math.sqrt(c), 0.999)) for c in color)


class TestEmptyWorldEndToEnd:
    """A 2x2 render of an empty world with zero jitter."""

    def test_two_by_two_ppm(self, fixed_rng):
        """Test the exact PPM document for the four corner rays."""
        settings = RenderSettings(image_width=2, image_height=2, samples_per_pixel=1, max_depth=1)
        # Aspect 1.0 gives a 2x2 viewport with lower-left corner (-1, -1, -1);
        # zero jitter puts the four rays through the viewport corners.
        camera = PinholeCamera(aspect_ratio=1.0)
        image = Renderer(World(), camera, settings, fixed_rng(0.0)).render()

        diagonal = math.sqrt(3.0)
        top = expected_sky_channel_values(1.0, diagonal)
        bottom = expected_sky_channel_values(-1.0, diagonal)

        stream = io.StringIO()
        write_ppm(image, settings.samples_per_pixel, stream)

        expected = "P3\n2 2\n255\n" + "".join(
            f"{r} {g} {b}\n" for r, g, b in (top, top, bottom, bottom)
        )
        assert stream.getvalue() == expected

    def test_top_row_is_bluer_than_bottom(self, fixed_rng):
        """Test the sky gradient runs white at the bottom to blue at the top."""
        settings = RenderSettings(image_width=2, image_height=2, samples_per_pixel=1, max_depth=1)
        image = Renderer(World(), PinholeCamera(aspect_ratio=1.0), settings, fixed_rng(0.0)).render()
        top = image.get_pixel(0, 1)
        bottom = image.get_pixel(0, 0)
        assert top.x < bottom.x
        assert top.z == pytest.approx(1.0)
        assert bottom.z == pytest.approx(1.0)


class TestTwoSphereScene:
    """Renders of the preset scene at low resolution."""

    @pytest.fixture
    def rendered(self):
        settings = RenderSettings.from_aspect_ratio(
            image_width=16, aspect_ratio=2.0, samples_per_pixel=4, max_depth=8
        )
        world, camera = create_two_sphere_scene(aspect_ratio=settings.aspect_ratio)
        renderer = Renderer(world, camera, settings, np.random.default_rng(1234))
        return settings, renderer.render()

    def test_render_is_finite_and_bounded(self, rendered):
        """Test that every pixel sum lies in [0, spp] per channel."""
        settings, image = rendered
        assert np.all(np.isfinite(image.pixels))
        assert np.all(image.pixels >= 0.0)
        assert np.all(image.pixels <= settings.samples_per_pixel + 1e-9)

    def test_center_sphere_is_darker_than_sky(self, rendered):
        """Test the small sphere absorbs light compared to the sky above it."""
        settings, image = rendered
        # Image center sees the small sphere; top row centre sees sky
        center = image.get_pixel(image.width // 2, image.height // 2)
        sky = image.get_pixel(image.width // 2, image.height - 1)
        assert center.y < sky.y

    def test_ppm_document_shape(self, rendered):
        """Test header and pixel count of the encoded output."""
        settings, image = rendered
        lines = encode_ppm(image, settings.samples_per_pixel).splitlines()
        assert lines[:3] == ["P3", "16 8", "255"]
        assert len(lines) == 3 + 16 * 8
        for line in lines[3:]:
            values = [int(v) for v in line.split()]
            assert len(values) == 3
            assert all(0 <= v <= 255 for v in values)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
