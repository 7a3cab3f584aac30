"""
Layout Module for circlelayout
Placement of children along a circle or an oval

Public API:
    - compute_layout: Pure layout function
    - LayoutEngine: Engine bound to default parameters
    - LayoutParams: Parameters of a layout pass
    - LayoutResult: Complete layout solution
    - Placement: Placement of a single child
"""

from .engine import LayoutEngine, compute_layout, resolve_radius
from .types import (
    Child,
    Direction,
    DisplayArea,
    LayoutParams,
    LayoutResult,
    LayoutStrategy,
    Placement,
    RadiusMode,
    Visibility,
)

__all__ = [
    'compute_layout',
    'resolve_radius',
    'LayoutEngine',
    'Child',
    'Direction',
    'DisplayArea',
    'LayoutParams',
    'LayoutResult',
    'LayoutStrategy',
    'Placement',
    'RadiusMode',
    'Visibility',
]
