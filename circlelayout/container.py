"""
Circle container

Host-side adapter around compute_layout(). The container owns its
children, its size and padding, and the current LayoutParams. Every
accepted change rebuilds the parameters, runs a new layout pass and
notifies listeners. Rejected changes raise ConfigurationError and leave
the previous state in effect.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union
import logging
import math

from .exceptions import ConfigurationError
from .layout import (
    Child,
    Direction,
    DisplayArea,
    LayoutParams,
    LayoutResult,
    LayoutStrategy,
    RadiusMode,
    Visibility,
    compute_layout,
)
from .layout.types import Padding, coerce_enum

logger = logging.getLogger(__name__)

LayoutListener = Callable[[LayoutResult], None]


class CircleContainer:
    """
    Container that lays out its children in a circle

    Example:
        >>> container = CircleContainer(200, 200)
        >>> for name in 'abcd':
        ...     container.add_child(Child(name, 20, 20))
        >>> container.last_result.get('a').x
        190.0
        >>> container.set_direction('clockwise')
    """

    def __init__(
        self,
        width: float,
        height: float,
        padding: Padding = 0,
        params: Optional[LayoutParams] = None,
        children: Optional[Iterable[Child]] = None
    ) -> None:
        """
        Initialize container

        Args:
            width: Container width
            height: Container height
            padding: One value for all sides or (left, top, right, bottom)
            params: Initial layout parameters
            children: Initial children, in layout order
        """
        self._width = _require_size('width', width)
        self._height = _require_size('height', height)
        self._padding: Tuple[float, float, float, float] = DisplayArea.normalize_padding(padding)
        self._children: List[Child] = []
        self._params: LayoutParams = params or LayoutParams()
        self._listeners: List[LayoutListener] = []
        self._last_result: Optional[LayoutResult] = None

        for child in children or ():
            self._check_new_child(child)
            self._children.append(child)
        self._check_center(self._params.center_id)

        self.request_layout()

    # ============================================================
    # STATE
    # ============================================================

    @property
    def params(self) -> LayoutParams:
        return self._params

    @property
    def children(self) -> Tuple[Child, ...]:
        return tuple(self._children)

    @property
    def size(self) -> Tuple[float, float]:
        return (self._width, self._height)

    @property
    def padding(self) -> Tuple[float, float, float, float]:
        return self._padding

    @property
    def display_area(self) -> DisplayArea:
        return DisplayArea.from_container(self._width, self._height, self._padding)

    @property
    def last_result(self) -> Optional[LayoutResult]:
        """Result of the most recent layout pass"""
        return self._last_result

    # ============================================================
    # LAYOUT
    # ============================================================

    def add_layout_listener(self, listener: LayoutListener) -> None:
        """Register a callback invoked with every new LayoutResult"""
        self._listeners.append(listener)

    def remove_layout_listener(self, listener: LayoutListener) -> None:
        self._listeners.remove(listener)

    def request_layout(self) -> LayoutResult:
        """
        Run a layout pass with the current state

        Returns:
            The new LayoutResult, also stored in last_result
        """
        result = compute_layout(self.display_area, self._children, self._params)
        self._last_result = result
        for listener in list(self._listeners):
            listener(result)
        return result

    # ============================================================
    # CHILDREN
    # ============================================================

    def add_child(self, child: Child, index: Optional[int] = None) -> None:
        """
        Add a child at the end, or at `index`

        Raises:
            ConfigurationError: if another child already uses the identifier
        """
        self._check_new_child(child)
        if index is None:
            self._children.append(child)
        else:
            self._children.insert(index, child)
        self.request_layout()

    def remove_child(self, child_id: str) -> Child:
        """
        Remove a child by identifier

        Removing the center child also clears the center designation.

        Raises:
            KeyError: if no child has this identifier
        """
        index = self._index_of(child_id)
        child = self._children.pop(index)
        if self._params.center_id == child_id:
            self._params = replace(self._params, center_id=None)
        self.request_layout()
        return child

    def set_child_visibility(self, child_id: str, visibility: Union[Visibility, str]) -> None:
        visibility = coerce_enum(Visibility, visibility)
        self._replace_child(child_id, visibility=visibility)

    def resize_child(self, child_id: str, width: float, height: float) -> None:
        """Update the measured size of a child"""
        self._replace_child(child_id, width=width, height=height)

    # ============================================================
    # GEOMETRY
    # ============================================================

    def resize(self, width: float, height: float) -> None:
        """
        Change the container size

        Raises:
            ConfigurationError: if a size is not a finite, non-negative number
        """
        width = _require_size('width', width)
        height = _require_size('height', height)
        self._width = width
        self._height = height
        self.request_layout()

    def set_padding(self, padding: Padding) -> None:
        self._padding = DisplayArea.normalize_padding(padding)
        self.request_layout()

    # ============================================================
    # PARAMETERS
    # ============================================================

    def set_angle(self, degrees: float) -> None:
        """Fixed angle between children in degrees, 0 for equal split"""
        self.update(angle=degrees)

    def set_angle_offset(self, degrees: float) -> None:
        """Starting angle in degrees from the positive horizontal axis"""
        self.update(angle_offset=degrees)

    def set_radius(self, radius: float) -> None:
        """Use a fixed radius (switches the radius mode to FIXED)"""
        self.update(radius=radius)

    def set_radius_mode(self, mode: Union[RadiusMode, str]) -> None:
        self.update(radius_mode=mode)

    def set_direction(self, direction: Union[Direction, str, int]) -> None:
        self.update(direction=direction)

    def set_center_element(self, child_id: Optional[str]) -> None:
        """
        Designate the child placed at the center, None to clear

        Raises:
            ConfigurationError: if no child carries this identifier
        """
        self.update(center_id=child_id)

    def set_strategy(self, strategy: Union[LayoutStrategy, str]) -> None:
        self.update(strategy=strategy)

    def update(self, **changes: Any) -> LayoutParams:
        """
        Apply several parameter changes in one layout pass

        Accepts angle and angle_offset in degrees, radius (switches to
        FIXED), radius_mode, direction, center_id and strategy. Either all
        changes are applied or none is.

        Returns:
            The new parameters
        """
        unknown = set(changes) - {'angle', 'angle_offset', 'radius', 'radius_mode',
                                  'direction', 'center_id', 'strategy'}
        if unknown:
            raise ConfigurationError(f"Unknown layout parameter(s): {', '.join(sorted(unknown))}")

        fields: Dict[str, Any] = {}
        for name in ('angle', 'angle_offset'):
            if name in changes:
                fields[name] = _degrees_to_radians(name, changes[name])
        if 'radius' in changes:
            fields['fixed_radius'] = changes['radius']
            fields['radius_mode'] = RadiusMode.FIXED
        for name in ('radius_mode', 'direction', 'strategy'):
            if name in changes:
                fields[name] = changes[name]
        if 'center_id' in changes:
            self._check_center(changes['center_id'])
            fields['center_id'] = changes['center_id']

        params = replace(self._params, **fields)
        if params == self._params:
            return params

        logger.debug(f"Layout parameters changed: {', '.join(sorted(changes))}")
        self._params = params
        self.request_layout()
        return params

    # ============================================================
    # HELPERS
    # ============================================================

    def _index_of(self, child_id: str) -> int:
        for i, child in enumerate(self._children):
            if child.child_id is not None and child.child_id == child_id:
                return i
        raise KeyError(child_id)

    def _replace_child(self, child_id: str, **changes: Any) -> None:
        index = self._index_of(child_id)
        self._children[index] = replace(self._children[index], **changes)
        self.request_layout()

    def _check_new_child(self, child: Child) -> None:
        if child.child_id is None:
            return
        if any(c.child_id == child.child_id for c in self._children):
            raise ConfigurationError(f"Duplicate child identifier: {child.child_id!r}")

    def _check_center(self, child_id: Optional[str]) -> None:
        if child_id is None:
            return
        try:
            self._index_of(child_id)
        except KeyError:
            raise ConfigurationError(f"Center element {child_id!r} is not a child of this container") from None


def _degrees_to_radians(name: str, degrees: float) -> float:
    try:
        value = float(degrees)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number, got {degrees!r}") from None
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {degrees!r}")
    return math.radians(value)


def _require_size(name: str, value: float) -> float:
    try:
        size = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Container {name} must be a number, got {value!r}") from None
    if not math.isfinite(size) or size < 0:
        raise ConfigurationError(f"Container {name} must be a non-negative number, got {value!r}")
    return size
