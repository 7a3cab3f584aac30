"""
Layout types for circlelayout
Value objects consumed and produced by the layout engine

Parameters and placements are immutable (frozen) so a layout pass can never
mutate its inputs and results can be compared between passes.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, TypeVar, Union
import math
import pandas as pd

from ..exceptions import ConfigurationError
from . import geometry

E = TypeVar('E', bound=Enum)

Padding = Union[float, Sequence[float]]
"""Uniform padding, or (left, top, right, bottom)"""


class RadiusMode(str, Enum):
    """How the placement radius is derived"""
    FITS_LARGEST_CHILD = 'fits_largest_child'
    FITS_SMALLEST_CHILD = 'fits_smallest_child'
    FIXED = 'fixed'


class Direction(IntEnum):
    """Rotation direction, only the sign is used"""
    COUNTER_CLOCKWISE = 1
    CLOCKWISE = -1


class LayoutStrategy(str, Enum):
    """Constant-radius circle or per-child oval radius"""
    CIRCULAR = 'circular'
    OVAL = 'oval'


class Visibility(str, Enum):
    """
    Child visibility

    INVISIBLE children keep their slot on the circle, GONE children are
    removed from the layout entirely.
    """
    VISIBLE = 'visible'
    INVISIBLE = 'invisible'
    GONE = 'gone'


def coerce_enum(enum_cls: Type[E], value: Any) -> E:
    """
    Resolve an enum member from a member, its value or its name

    Names are matched case-insensitively, ignoring '-' and '_', so
    'counterclockwise', 'COUNTER_CLOCKWISE' and 'counter-clockwise' are
    all accepted for Direction.COUNTER_CLOCKWISE.

    Raises:
        ConfigurationError: if nothing matches
    """
    if isinstance(value, enum_cls):
        return value

    if isinstance(value, str):
        raw = value.strip().lower()
        for member in enum_cls:
            if raw == str(member.value).lower():
                return member
        # Separators are only ignored in names, '-1' is a value
        key = raw.replace('-', '').replace('_', '')
        for member in enum_cls:
            if key == member.name.lower().replace('_', ''):
                return member
    elif not isinstance(value, bool):
        try:
            return enum_cls(value)
        except ValueError:
            pass

    choices = ', '.join(m.name.lower() for m in enum_cls)
    raise ConfigurationError(f"Invalid {enum_cls.__name__} value {value!r} (expected one of: {choices})")


def _require_finite(name: str, value: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ConfigurationError(f"{name} must be finite, got {value!r}")
    return number


@dataclass(frozen=True)
class DisplayArea:
    """
    Content rectangle of the container after padding is removed

    Attributes:
        left: Left edge in parent coordinates
        top: Top edge in parent coordinates
        width: Content width
        height: Content height
    """
    left: float
    top: float
    width: float
    height: float

    @classmethod
    def from_container(cls, width: float, height: float, padding: Padding = 0) -> 'DisplayArea':
        """
        Build the display area of a container

        Args:
            width: Container width
            height: Container height
            padding: One value for all sides or (left, top, right, bottom)

        Returns:
            DisplayArea with sizes clamped at zero
        """
        pad_left, pad_top, pad_right, pad_bottom = cls.normalize_padding(padding)
        return cls(
            left=pad_left,
            top=pad_top,
            width=max(float(width) - pad_left - pad_right, 0.0),
            height=max(float(height) - pad_top - pad_bottom, 0.0),
        )

    @staticmethod
    def normalize_padding(padding: Padding) -> Tuple[float, float, float, float]:
        """Expand padding to a (left, top, right, bottom) tuple"""
        if isinstance(padding, (int, float)):
            value = _require_finite('padding', padding)
            return (value, value, value, value)

        values = tuple(_require_finite('padding', p) for p in padding)
        if len(values) != 4:
            raise ConfigurationError(f"Padding needs 1 or 4 values, got {len(values)}")
        return values  # type: ignore[return-value]

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @property
    def center_y(self) -> float:
        return self.top + self.height / 2

    @property
    def center(self) -> Tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def outer_radius(self) -> float:
        """Radius of the largest circle inscribed in the area"""
        return min(self.width, self.height) / 2


@dataclass(frozen=True)
class Child:
    """
    A measured child element

    Attributes:
        child_id: Identifier, None if the child has none (never the center)
        width: Measured width
        height: Measured height
        visibility: VISIBLE, INVISIBLE or GONE
    """
    child_id: Optional[str]
    width: float
    height: float
    visibility: Visibility = Visibility.VISIBLE

    def __post_init__(self) -> None:
        for name in ('width', 'height'):
            value = _require_finite(name, getattr(self, name))
            if value < 0:
                raise ConfigurationError(f"Child {self.child_id!r} has negative {name}: {value}")
            object.__setattr__(self, name, value)
        object.__setattr__(self, 'visibility', coerce_enum(Visibility, self.visibility))

    @property
    def is_laid_out(self) -> bool:
        """Whether the child takes part in layout (anything but GONE)"""
        return self.visibility is not Visibility.GONE

    @property
    def effective_radius(self) -> float:
        """Bounding-circle proxy: half of the larger dimension"""
        return geometry.effective_radius(self.width, self.height)


@dataclass(frozen=True)
class LayoutParams:
    """
    Layout parameters for a single pass

    Angles are in radians. Use LayoutParams.from_degrees() for the
    degree-based values found in configuration and on the command line.

    Attributes:
        angle: Fixed increment between consecutive children, 0 for equal split
        angle_offset: Starting angle from the positive horizontal axis
        radius_mode: How the placement radius is derived
        fixed_radius: Radius used with RadiusMode.FIXED (non-negative)
        direction: COUNTER_CLOCKWISE (+1) or CLOCKWISE (-1)
        center_id: Identifier of the child placed at the center
        strategy: CIRCULAR or OVAL
    """
    angle: float = 0.0
    angle_offset: float = 0.0
    radius_mode: RadiusMode = RadiusMode.FITS_LARGEST_CHILD
    fixed_radius: float = 0.0
    direction: Direction = Direction.COUNTER_CLOCKWISE
    center_id: Optional[str] = None
    strategy: LayoutStrategy = LayoutStrategy.CIRCULAR

    def __post_init__(self) -> None:
        object.__setattr__(self, 'angle', _require_finite('angle', self.angle))
        object.__setattr__(self, 'angle_offset', _require_finite('angle_offset', self.angle_offset))

        fixed_radius = _require_finite('fixed_radius', self.fixed_radius)
        if fixed_radius < 0:
            raise ConfigurationError(f"Fixed radius must be non-negative, got {fixed_radius}")
        object.__setattr__(self, 'fixed_radius', fixed_radius)

        object.__setattr__(self, 'radius_mode', coerce_enum(RadiusMode, self.radius_mode))
        object.__setattr__(self, 'direction', coerce_enum(Direction, self.direction))
        object.__setattr__(self, 'strategy', coerce_enum(LayoutStrategy, self.strategy))

    @classmethod
    def from_degrees(
        cls,
        angle: float = 0.0,
        angle_offset: float = 0.0,
        **kwargs: Any
    ) -> 'LayoutParams':
        """
        Build parameters from angles expressed in degrees

        Example:
            >>> LayoutParams.from_degrees(angle=45, angle_offset=90).angle
            0.7853981633974483
        """
        return cls(
            angle=math.radians(_require_finite('angle', angle)),
            angle_offset=math.radians(_require_finite('angle_offset', angle_offset)),
            **kwargs
        )

    @property
    def uses_equal_split(self) -> bool:
        """Whether the increment is derived from the child count"""
        return self.angle == 0


@dataclass(frozen=True)
class Placement:
    """
    Computed placement of one child

    Attributes:
        child_id: Identifier of the child
        index: Position of the child in the input list
        x: Center X in parent coordinates
        y: Center Y in parent coordinates (Y grows downward)
        width: Child width
        height: Child height
        angle: Polar angle in radians, None for the center child
        radius: Distance between the child center and the layout center
        is_center: Whether this is the designated center child
    """
    child_id: Optional[str]
    index: int
    x: float
    y: float
    width: float
    height: float
    angle: Optional[float] = None
    radius: float = 0.0
    is_center: bool = False

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def angle_deg(self) -> Optional[float]:
        return None if self.angle is None else math.degrees(self.angle)

    def rect(self) -> Tuple[float, float, float, float]:
        """Bounding rectangle as (left, top, width, height)"""
        return geometry.rect_from_center(self.x, self.y, self.width, self.height)

    def snapped(self) -> Tuple[int, int, int, int]:
        """Bounds rounded to whole pixels as (left, top, right, bottom)"""
        left = geometry.round_half_up(self.left)
        top = geometry.round_half_up(self.top)
        return (
            left,
            top,
            left + geometry.round_half_up(self.width),
            top + geometry.round_half_up(self.height),
        )


@dataclass
class LayoutResult:
    """
    Complete layout solution for one pass

    Placements are ordered with the center child first (if any), then the
    circle children in the order they were distributed.

    Attributes:
        placements: All computed placements
        display_area: Area the layout was computed for
        strategy: Strategy that produced the placements
        angle_increment: Signed step between consecutive children (radians)
        layout_radius: Constant circle radius, None for the oval strategy
        min_child_radius: Smallest effective radius on the circle
        max_child_radius: Largest effective radius on the circle
        layout_stats: Extra diagnostics
    """
    placements: List[Placement]
    display_area: DisplayArea
    strategy: LayoutStrategy
    angle_increment: float
    layout_radius: Optional[float]
    min_child_radius: float
    max_child_radius: float
    layout_stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def outer_radius(self) -> float:
        return self.display_area.outer_radius

    @property
    def center(self) -> Tuple[float, float]:
        return self.display_area.center

    @property
    def center_placement(self) -> Optional[Placement]:
        """Placement of the center child, if one was laid out"""
        for placement in self.placements:
            if placement.is_center:
                return placement
        return None

    @property
    def circle_placements(self) -> List[Placement]:
        """Placements distributed on the circle, in order"""
        return [p for p in self.placements if not p.is_center]

    @property
    def is_empty(self) -> bool:
        return not self.placements

    def get(self, child_id: str) -> Optional[Placement]:
        """Look up a placement by child identifier"""
        for placement in self.placements:
            if placement.child_id == child_id:
                return placement
        return None

    def to_frame(self) -> pd.DataFrame:
        """
        Export placements as a DataFrame

        Returns:
            One row per placement with center, bounds, angle and radius
        """
        columns = ['index', 'id', 'x', 'y', 'left', 'top', 'right', 'bottom',
                   'width', 'height', 'angle_deg', 'radius', 'is_center']
        rows = [
            {
                'index': p.index,
                'id': p.child_id,
                'x': p.x,
                'y': p.y,
                'left': p.left,
                'top': p.top,
                'right': p.right,
                'bottom': p.bottom,
                'width': p.width,
                'height': p.height,
                'angle_deg': p.angle_deg,
                'radius': p.radius,
                'is_center': p.is_center,
            }
            for p in self.placements
        ]
        return pd.DataFrame(rows, columns=columns)
