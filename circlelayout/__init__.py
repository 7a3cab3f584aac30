"""circlelayout: Arrange elements evenly along a circle"""

from .config import LayoutConfig, PlotConfig
from .container import CircleContainer
from .exceptions import ConfigurationError
from .layout import (
    Child,
    Direction,
    DisplayArea,
    LayoutEngine,
    LayoutParams,
    LayoutResult,
    LayoutStrategy,
    Placement,
    RadiusMode,
    Visibility,
    compute_layout,
)
from .visualizer import LayoutPlotter

__version__ = "0.1.0"
__all__ = [
    "compute_layout", "LayoutEngine", "CircleContainer", "LayoutPlotter",
    "Child", "Direction", "DisplayArea", "LayoutParams", "LayoutResult",
    "LayoutStrategy", "Placement", "RadiusMode", "Visibility",
    "LayoutConfig", "PlotConfig", "ConfigurationError",
]
