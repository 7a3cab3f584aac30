"""
Unit tests for layout value objects
"""
import math

import pytest

from circlelayout.exceptions import ConfigurationError
from circlelayout.layout import (
    Child,
    Direction,
    DisplayArea,
    LayoutParams,
    LayoutStrategy,
    Placement,
    RadiusMode,
    Visibility,
)
from circlelayout.layout.types import coerce_enum


class TestCoerceEnum:
    """Tests for coerce_enum"""

    @pytest.mark.parametrize("value", ['counterclockwise', 'COUNTER_CLOCKWISE', 'counter-clockwise', 1])
    def test_counter_clockwise_spellings(self, value):
        assert coerce_enum(Direction, value) is Direction.COUNTER_CLOCKWISE

    @pytest.mark.parametrize("value", ['clockwise', -1, Direction.CLOCKWISE])
    def test_clockwise_spellings(self, value):
        assert coerce_enum(Direction, value) is Direction.CLOCKWISE

    @pytest.mark.parametrize("value, expected", [
        ('-1', Direction.CLOCKWISE),
        (' -1 ', Direction.CLOCKWISE),
        ('1', Direction.COUNTER_CLOCKWISE),
    ])
    def test_direction_value_strings_keep_sign(self, value, expected):
        """'-1' is the clockwise value, not '1' with a separator"""
        assert coerce_enum(Direction, value) is expected

    def test_signed_string_through_params_and_config(self):
        from circlelayout.config import LayoutConfig
        assert LayoutParams(direction='-1').direction is Direction.CLOCKWISE
        assert LayoutConfig(direction='-1').to_params().direction is Direction.CLOCKWISE

    def test_radius_mode_by_value(self):
        assert coerce_enum(RadiusMode, 'fits_smallest_child') is RadiusMode.FITS_SMALLEST_CHILD

    @pytest.mark.parametrize("value", ['sideways', 0, 2, True, None])
    def test_invalid_direction(self, value):
        with pytest.raises(ConfigurationError):
            coerce_enum(Direction, value)


class TestDisplayArea:
    """Tests for DisplayArea"""

    def test_center_and_outer_radius(self):
        area = DisplayArea(0, 0, 300, 200)
        assert area.center == (150, 100)
        assert area.outer_radius == 100

    def test_uniform_padding(self):
        area = DisplayArea.from_container(220, 220, 10)
        assert (area.left, area.top, area.width, area.height) == (10, 10, 200, 200)
        assert area.center == (110, 110)

    def test_per_side_padding(self):
        """The vertical center uses the top padding"""
        area = DisplayArea.from_container(220, 240, (10, 30, 10, 10))
        assert area.center == (110, 130)
        assert area.outer_radius == 100

    def test_padding_larger_than_container_clamps(self):
        area = DisplayArea.from_container(10, 10, 20)
        assert area.width == 0
        assert area.outer_radius == 0

    def test_padding_needs_one_or_four_values(self):
        with pytest.raises(ConfigurationError):
            DisplayArea.from_container(100, 100, (1, 2))


class TestChild:
    """Tests for Child"""

    def test_defaults_to_visible(self):
        child = Child('a', 10, 30)
        assert child.visibility is Visibility.VISIBLE
        assert child.is_laid_out
        assert child.effective_radius == 15

    def test_invisible_is_laid_out_gone_is_not(self):
        assert Child('a', 1, 1, 'invisible').is_laid_out
        assert not Child('a', 1, 1, 'gone').is_laid_out

    def test_negative_size_rejected(self):
        with pytest.raises(ConfigurationError):
            Child('a', -1, 10)

    def test_unknown_visibility_rejected(self):
        with pytest.raises(ConfigurationError):
            Child('a', 1, 1, 'hidden')


class TestLayoutParams:
    """Tests for LayoutParams"""

    def test_defaults(self):
        params = LayoutParams()
        assert params.uses_equal_split
        assert params.radius_mode is RadiusMode.FITS_LARGEST_CHILD
        assert params.direction is Direction.COUNTER_CLOCKWISE
        assert params.strategy is LayoutStrategy.CIRCULAR
        assert params.center_id is None

    def test_from_degrees(self):
        params = LayoutParams.from_degrees(angle=90, angle_offset=180, direction='clockwise')
        assert params.angle == pytest.approx(math.pi / 2)
        assert params.angle_offset == pytest.approx(math.pi)
        assert params.direction is Direction.CLOCKWISE

    def test_strings_are_coerced(self):
        params = LayoutParams(radius_mode='fixed', fixed_radius=5, strategy='oval')
        assert params.radius_mode is RadiusMode.FIXED
        assert params.strategy is LayoutStrategy.OVAL

    def test_negative_fixed_radius_rejected(self):
        with pytest.raises(ConfigurationError):
            LayoutParams(radius_mode='fixed', fixed_radius=-10)

    @pytest.mark.parametrize("field", ['angle', 'angle_offset'])
    def test_non_finite_angle_rejected(self, field):
        with pytest.raises(ConfigurationError):
            LayoutParams(**{field: float('nan')})

    def test_invalid_direction_rejected(self):
        with pytest.raises(ConfigurationError):
            LayoutParams(direction=0)


class TestPlacement:
    """Tests for Placement bounds"""

    def test_rect_is_centered(self):
        placement = Placement('a', 0, x=190, y=100, width=20, height=10)
        assert placement.rect() == (180, 95, 20, 10)
        assert (placement.left, placement.top, placement.right, placement.bottom) == (180, 95, 200, 105)

    def test_snapped_keeps_size(self):
        placement = Placement('a', 0, x=100.0000001, y=10.0000001, width=21, height=21)
        assert placement.snapped() == (90, 0, 111, 21)

    def test_center_has_no_angle(self):
        assert Placement('hub', 0, 50, 50, 10, 10, is_center=True).angle_deg is None
