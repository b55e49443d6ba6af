"""Unit tests for render configuration."""

import pytest

from src.raytracing.core.settings import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_SAMPLES_PER_PIXEL,
    RenderSettings,
)


class TestRenderSettings:
    """Tests for RenderSettings defaults and validation."""

    def test_defaults(self):
        """Test the 400x225 default at 100 spp and depth 50."""
        settings = RenderSettings()
        assert settings.image_width == 400
        assert settings.image_height == 225
        assert settings.samples_per_pixel == DEFAULT_SAMPLES_PER_PIXEL == 100
        assert settings.max_depth == DEFAULT_MAX_DEPTH == 50

    def test_from_aspect_ratio_truncates_height(self):
        """Test height = int(width / aspect_ratio)."""
        settings = RenderSettings.from_aspect_ratio(image_width=100, aspect_ratio=16.0 / 9.0)
        assert settings.image_height == 56

    def test_aspect_ratio_property(self):
        """Test width / height."""
        assert RenderSettings(image_width=8, image_height=4).aspect_ratio == 2.0

    def test_settings_are_frozen(self):
        """Test that settings cannot be modified after construction."""
        settings = RenderSettings()
        with pytest.raises(AttributeError):
            settings.max_depth = 3  # type: ignore[misc]

    def test_zero_depth_allowed(self):
        """Test that max_depth = 0 is accepted (every path returns black)."""
        assert RenderSettings(max_depth=0).max_depth == 0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"image_width": 0},
            {"image_height": -1},
            {"samples_per_pixel": 0},
            {"max_depth": -1},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        """Test that out-of-range parameters are rejected."""
        with pytest.raises(ValueError):
            RenderSettings(**kwargs)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
