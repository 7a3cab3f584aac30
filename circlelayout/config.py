"""
circlelayout Configuration
User-facing defaults for layout and preview rendering

Angles are given in degrees here; LayoutConfig.to_params() converts them
to the radians used by the engine.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .layout import LayoutParams


@dataclass
class LayoutConfig:
    """
    Layout parameters as they appear in configuration and on the command line
    """

    # ============================================================
    # ANGLES
    # ============================================================
    angle_deg: float = 0.0
    """Fixed angle between consecutive children (degrees), 0 for equal split"""

    angle_offset_deg: float = 0.0
    """Starting angle from the positive horizontal axis (degrees)"""

    direction: str = 'counterclockwise'
    """Rotation direction: 'counterclockwise' or 'clockwise'"""

    # ============================================================
    # RADIUS
    # ============================================================
    radius: float = 0.0
    """Fixed radius (px), 0 to derive it from radius_mode"""

    radius_mode: str = 'fits_largest_child'
    """'fits_largest_child' or 'fits_smallest_child'"""

    # ============================================================
    # DISTRIBUTION
    # ============================================================
    strategy: str = 'circular'
    """'circular' (constant radius) or 'oval' (per-child radius)"""

    center_id: Optional[str] = None
    """Identifier of the child placed at the center"""

    def to_params(self) -> LayoutParams:
        """
        Build engine parameters

        A non-zero radius selects the fixed radius mode.

        Raises:
            ConfigurationError: if any value is invalid
        """
        radius_mode = 'fixed' if self.radius else self.radius_mode
        return LayoutParams.from_degrees(
            angle=self.angle_deg,
            angle_offset=self.angle_offset_deg,
            radius_mode=radius_mode,
            fixed_radius=self.radius,
            direction=self.direction,
            center_id=self.center_id,
            strategy=self.strategy,
        )


@dataclass
class PlotConfig:
    """
    Preview rendering configuration
    """

    # ============================================================
    # SUB-CONFIGURATIONS
    # ============================================================
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    """Layout configuration"""

    # ============================================================
    # FIGURE SETTINGS
    # ============================================================
    figure_size: float = 8.0
    """Figure size in inches (square plot)"""

    dpi: int = 150
    """DPI for saved figures"""

    title_fontsize: int = 12
    """Font size for the title"""

    label_fontsize: int = 8
    """Font size for child labels"""

    # ============================================================
    # COLORS & LINES
    # ============================================================
    child_facecolor: str = '#9ecae1'
    """Fill color of circle children"""

    center_facecolor: str = '#fdae6b'
    """Fill color of the center child"""

    invisible_alpha: float = 0.25
    """Alpha for INVISIBLE children (they keep their slot)"""

    child_alpha: float = 0.85
    """Alpha for visible children"""

    edge_linewidth: float = 1.0
    """Line width of child outlines"""

    guide_color: str = '#888888'
    """Color of container, display area and circle guides"""

    guide_linewidth: float = 0.8
    """Line width of guides"""

    # ============================================================
    # GUIDES
    # ============================================================
    show_guides: bool = True
    """Draw container bounds, display area and layout circle"""

    show_labels: bool = True
    """Label children with their identifiers"""

    show_order: bool = False
    """Prefix labels with the placement order on the circle"""

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def presentation(cls) -> 'PlotConfig':
        """
        Settings for slides

        - Larger figure and fonts
        - Thicker outlines

        Example:
            >>> config = PlotConfig.presentation()
            >>> plotter = LayoutPlotter(config)
        """
        config = cls()
        config.figure_size = 10.0
        config.title_fontsize = 16
        config.label_fontsize = 11
        config.edge_linewidth = 2.0
        config.guide_linewidth = 1.5
        return config

    @classmethod
    def debug(cls) -> 'PlotConfig':
        """
        Settings for debugging layouts

        - Placement order shown in labels
        - Invisible children drawn almost opaque
        """
        config = cls()
        config.show_order = True
        config.invisible_alpha = 0.6
        config.dpi = 100
        return config

    @property
    def figsize(self) -> Tuple[float, float]:
        return (self.figure_size, self.figure_size)
