"""Tests for the Renderer sample loop.

Tests cover:
- Scanline order and progress reporting
- Per-pixel sample accumulation
- Use of the injected random generator
- Size validation and logging
"""

import logging

import numpy as np
import pytest

from src.raytracing.camera.pinhole import PinholeCamera
from src.raytracing.core.integrator import background_color
from src.raytracing.core.renderer import Renderer, render_image
from src.raytracing.core.settings import RenderSettings
from src.raytracing.scene.presets import create_two_sphere_world
from src.raytracing.scene.world import World


def make_renderer(width=4, height=2, spp=2, depth=3, rng=None, world=None):
    settings = RenderSettings(
        image_width=width, image_height=height, samples_per_pixel=spp, max_depth=depth
    )
    camera = PinholeCamera(aspect_ratio=width / height)
    return Renderer(world if world is not None else World(), camera, settings, rng)


class TestRendererSetup:
    """Tests for construction."""

    def test_dimensions(self):
        """Test width, height and image buffer size."""
        renderer = make_renderer(width=6, height=3)
        assert renderer.width == 6
        assert renderer.height == 3
        assert renderer.image.pixels.shape == (3, 6, 3)

    @pytest.mark.parametrize("width,height", [(1, 4), (4, 1), (1, 1)])
    def test_degenerate_size_raises(self, width, height):
        """Test that images under 2x2 are rejected."""
        settings = RenderSettings(image_width=width, image_height=height)
        with pytest.raises(ValueError):
            Renderer(World(), PinholeCamera(), settings)

    def test_repr(self):
        """Test the summary string."""
        assert "samples=2" in repr(make_renderer(spp=2))


class TestRenderLoop:
    """Tests for pixel and scanline rendering."""

    def test_render_pixel_sums_samples(self, fixed_rng):
        """Test that a pixel is the sum of spp identical estimates."""
        renderer = make_renderer(spp=5, rng=fixed_rng(0.0))
        camera = renderer.camera
        expected = background_color(camera.get_ray_jittered(1, 1, 4, 2, fixed_rng(0.0)))

        result = renderer.render_pixel(1, 1)

        assert abs(result.x - 5 * expected.x) < 1e-9
        assert abs(result.y - 5 * expected.y) < 1e-9
        assert abs(result.z - 5 * expected.z) < 1e-9

    def test_jitter_draws_two_values_per_sample(self, fixed_rng):
        """Test the injected generator supplies the jitter (misses scatter nothing)."""
        source = fixed_rng(0.5)
        renderer = make_renderer(width=2, height=2, spp=3, rng=source)
        renderer.render()
        assert source.calls == 2 * 2 * 3 * 2

    def test_progressive_yields_each_scanline(self):
        """Test one progress tuple per row with a constant total."""
        renderer = make_renderer(width=3, height=4, spp=1)
        progress = list(renderer.render_progressive())
        assert progress == [(1, 4), (2, 4), (3, 4), (4, 4)]

    def test_scanlines_rendered_top_to_bottom(self):
        """Test that after the first step only the top row is filled."""
        renderer = make_renderer(width=3, height=4, spp=1)
        steps = renderer.render_progressive()
        next(steps)
        pixels = renderer.image.pixels
        assert np.all(pixels[3] > 0.0)
        assert np.all(pixels[:3] == 0.0)

    def test_callback_receives_progress(self):
        """Test the callback sees every scanline."""
        calls = []
        renderer = make_renderer(width=2, height=3, spp=1)
        image = renderer.render(callback=lambda done, total: calls.append((done, total)))
        assert calls == [(1, 3), (2, 3), (3, 3)]
        assert image is renderer.image

    def test_depth_zero_renders_black(self):
        """Test that with no bounce budget every pixel is black."""
        renderer = make_renderer(depth=0, world=create_two_sphere_world())
        image = renderer.render()
        assert np.all(image.pixels == 0.0)

    def test_reset_clears_image(self):
        """Test reset zeroes the accumulation buffer."""
        renderer = make_renderer(spp=1)
        renderer.render()
        renderer.reset()
        assert np.all(renderer.image.pixels == 0.0)

    def test_same_seed_same_image(self):
        """Test that equal seeds give bit-identical images."""
        world = create_two_sphere_world()
        first = make_renderer(world=world, rng=np.random.default_rng(7)).render()
        second = make_renderer(world=world, rng=np.random.default_rng(7)).render()
        assert np.array_equal(first.pixels, second.pixels)

    def test_render_image_matches_renderer(self):
        """Test the one-call helper produces the same sums."""
        world = create_two_sphere_world()
        settings = RenderSettings(image_width=4, image_height=2, samples_per_pixel=2, max_depth=3)
        camera = PinholeCamera(aspect_ratio=2.0)

        direct = Renderer(world, camera, settings, np.random.default_rng(3)).render()
        helper = render_image(world, camera, settings, np.random.default_rng(3))

        assert np.array_equal(direct.pixels, helper.pixels)


class TestRendererLogging:
    """Tests for log output."""

    def test_logs_start_and_finish(self, caplog):
        """Test info messages around the render."""
        caplog.set_level(logging.INFO, logger="src.raytracing.core.renderer")
        make_renderer(spp=1).render()
        messages = [record.getMessage() for record in caplog.records]
        assert any(message.startswith("Rendering 4x2 at 1 spp") for message in messages)
        assert any(message.startswith("Done in") for message in messages)

    def test_logs_remaining_scanlines_at_debug(self, caplog):
        """Test the per-scanline countdown."""
        caplog.set_level(logging.DEBUG, logger="src.raytracing.core.renderer")
        make_renderer(width=2, height=3, spp=1).render()
        remaining = [
            record.getMessage()
            for record in caplog.records
            if record.getMessage().startswith("Scanline remaining")
        ]
        assert remaining == [
            "Scanline remaining: 2",
            "Scanline remaining: 1",
            "Scanline remaining: 0",
        ]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
