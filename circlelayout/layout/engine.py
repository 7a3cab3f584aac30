"""
Layout Engine for circlelayout
Pure placement of children along a circle

Algorithm:
1. Derive center and outer radius from the display area
2. Place the designated center child (if laid out) at the center
3. Collect the remaining non-GONE children into the working set
4. Resolve the angular increment (fixed, or equal split of a full turn)
5. Resolve the radius (fixed, fits largest child, fits smallest child),
   or compute a per-child oval radius
6. Walk the working set from the angle offset, converting polar
   coordinates to screen coordinates (Y grows downward)
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import logging
import numpy as np

from .geometry import equal_angle, oval_radius_at_angle, polar_to_cartesian
from .types import (
    Child,
    DisplayArea,
    LayoutParams,
    LayoutResult,
    LayoutStrategy,
    Placement,
    RadiusMode,
)

logger = logging.getLogger(__name__)


def compute_layout(
    display_area: DisplayArea,
    children: Sequence[Child],
    params: Optional[LayoutParams] = None
) -> LayoutResult:
    """
    Compute the placement of every laid-out child

    The function is pure: inputs are never modified and the same inputs
    always give the same result.

    Args:
        display_area: Content rectangle of the container
        children: Measured children in container order
        params: Layout parameters (defaults to LayoutParams())

    Returns:
        LayoutResult with one placement per non-GONE child
    """
    params = params or LayoutParams()
    cx, cy = display_area.center
    outer_radius = display_area.outer_radius

    placements: List[Placement] = []

    center_index = _find_center(children, params.center_id)
    if center_index is not None and children[center_index].is_laid_out:
        center_child = children[center_index]
        placements.append(Placement(
            child_id=center_child.child_id,
            index=center_index,
            x=cx,
            y=cy,
            width=center_child.width,
            height=center_child.height,
            is_center=True,
        ))

    working: List[Tuple[int, Child]] = [
        (i, child) for i, child in enumerate(children)
        if i != center_index and child.is_laid_out
    ]
    n = len(working)

    if n:
        child_radii = np.array([child.effective_radius for _, child in working])
        max_child_radius = float(child_radii.max())
        min_child_radius = float(child_radii.min())
    else:
        max_child_radius = 0.0
        min_child_radius = outer_radius

    increment = equal_angle(n) if params.uses_equal_split else params.angle
    step = increment * int(params.direction)
    angles = params.angle_offset + step * np.arange(n)

    layout_radius: Optional[float] = None
    if params.strategy is LayoutStrategy.OVAL:
        radii = _oval_radii(working, outer_radius, angles)
    else:
        layout_radius = resolve_radius(params, outer_radius, min_child_radius, max_child_radius)
        radii = np.full(n, layout_radius)

    dx, dy = polar_to_cartesian(radii, angles)
    for k, (index, child) in enumerate(working):
        placements.append(Placement(
            child_id=child.child_id,
            index=index,
            x=float(cx + dx[k]),
            y=float(cy - dy[k]),
            width=child.width,
            height=child.height,
            angle=float(angles[k]),
            radius=float(radii[k]),
        ))

    logger.debug(
        f"Layout pass: {n} on circle, center={'yes' if len(placements) > n else 'no'}, "
        f"strategy={params.strategy.value}, increment={np.degrees(step):.2f} deg, "
        f"radius={'oval' if layout_radius is None else f'{layout_radius:.2f}'}"
    )

    return LayoutResult(
        placements=placements,
        display_area=display_area,
        strategy=params.strategy,
        angle_increment=step,
        layout_radius=layout_radius,
        min_child_radius=min_child_radius,
        max_child_radius=max_child_radius,
        layout_stats={
            'n_children': len(children),
            'n_on_circle': n,
            'n_gone': sum(1 for c in children if not c.is_laid_out),
            'has_center': len(placements) > n,
            'radius_mode': params.radius_mode.value,
        }
    )


def resolve_radius(
    params: LayoutParams,
    outer_radius: float,
    min_child_radius: float,
    max_child_radius: float
) -> float:
    """
    Pick the constant radius of the circular strategy

    A FIXED mode with a zero radius behaves like FITS_LARGEST_CHILD.
    With FITS_SMALLEST_CHILD larger children may overflow the display area.
    """
    if params.radius_mode is RadiusMode.FIXED and params.fixed_radius != 0:
        return params.fixed_radius
    if params.radius_mode is RadiusMode.FITS_SMALLEST_CHILD:
        return outer_radius - min_child_radius
    return outer_radius - max_child_radius


def _find_center(children: Sequence[Child], center_id: Optional[str]) -> Optional[int]:
    """Index of the first child carrying `center_id`"""
    if center_id is None:
        return None
    for i, child in enumerate(children):
        if child.child_id is not None and child.child_id == center_id:
            return i
    logger.debug(f"Center element {center_id!r} is not a child, nothing placed at center")
    return None


def _oval_radii(
    working: Sequence[Tuple[int, Child]],
    outer_radius: float,
    angles: np.ndarray
) -> np.ndarray:
    """
    Per-child radius on an ellipse shrunk by the child's half sizes

    The smaller inner extent becomes the horizontal semi-axis and the larger
    one the vertical semi-axis. Children are not balanced against each other.
    """
    if not working:
        return np.zeros(0)
    widths = np.array([child.width for _, child in working])
    heights = np.array([child.height for _, child in working])
    inner_width = outer_radius - widths / 2
    inner_height = outer_radius - heights / 2
    semi_x = np.minimum(inner_width, inner_height)
    semi_y = np.maximum(inner_width, inner_height)
    return np.asarray(oval_radius_at_angle(semi_x, semi_y, angles), dtype=float)


class LayoutEngine:
    """
    Layout engine bound to default parameters

    Thin wrapper over compute_layout() for callers that lay out several
    child sets with the same parameters.

    Example:
        >>> engine = LayoutEngine(LayoutParams.from_degrees(angle_offset=90))
        >>> result = engine.calculate_layout(DisplayArea(0, 0, 200, 200), children)
    """

    def __init__(self, params: Optional[LayoutParams] = None) -> None:
        """
        Initialize layout engine

        Args:
            params: Default parameters, LayoutParams() if None
        """
        self.params: LayoutParams = params or LayoutParams()
        logger.debug(f"LayoutEngine initialized ({self.params.strategy.value})")

    def calculate_layout(
        self,
        display_area: DisplayArea,
        children: Sequence[Child],
        params: Optional[LayoutParams] = None
    ) -> LayoutResult:
        """
        Calculate layout for all children

        Args:
            display_area: Content rectangle of the container
            children: Measured children in container order
            params: Overrides the engine's default parameters for this pass

        Returns:
            LayoutResult with all positions calculated
        """
        logger.info(f"Calculating layout for {len(children)} children in "
                    f"{display_area.width:g}x{display_area.height:g} area")
        result = compute_layout(display_area, children, params or self.params)
        logger.info(f"Placed {len(result.placements)} children "
                    f"({result.layout_stats['n_gone']} gone)")
        return result
