"""
Unit tests for configuration dataclasses
"""
import math

import pytest

from circlelayout.config import LayoutConfig, PlotConfig
from circlelayout.exceptions import ConfigurationError
from circlelayout.layout import Direction, LayoutStrategy, RadiusMode


class TestLayoutConfig:
    """Tests for LayoutConfig.to_params"""

    def test_defaults(self):
        params = LayoutConfig().to_params()
        assert params.angle == 0
        assert params.radius_mode is RadiusMode.FITS_LARGEST_CHILD
        assert params.direction is Direction.COUNTER_CLOCKWISE
        assert params.strategy is LayoutStrategy.CIRCULAR

    def test_degrees_converted(self):
        params = LayoutConfig(angle_deg=60, angle_offset_deg=-90).to_params()
        assert params.angle == pytest.approx(math.pi / 3)
        assert params.angle_offset == pytest.approx(-math.pi / 2)

    def test_radius_selects_fixed_mode(self):
        params = LayoutConfig(radius=42, radius_mode='fits_smallest_child').to_params()
        assert params.radius_mode is RadiusMode.FIXED
        assert params.fixed_radius == 42

    def test_invalid_value(self):
        with pytest.raises(ConfigurationError):
            LayoutConfig(direction='up').to_params()


class TestPlotConfigPresets:
    """Tests for PlotConfig presets"""

    def test_presets_are_independent(self):
        presentation = PlotConfig.presentation()
        presentation.layout.angle_deg = 10
        assert PlotConfig().layout.angle_deg == 0

    def test_presentation_is_larger(self):
        assert PlotConfig.presentation().figure_size > PlotConfig().figure_size

    def test_debug_shows_order(self):
        assert PlotConfig.debug().show_order
        assert PlotConfig().figsize == (8.0, 8.0)
