"""
Layout visualizer

Renders a LayoutResult as a PNG preview: container bounds, display area,
layout circle and one rectangle per placed child. The Y axis is inverted
so the picture matches screen coordinates.
"""

from __future__ import annotations
from typing import Optional, Sequence, Tuple
from pathlib import Path
import logging
import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .config import PlotConfig
from .layout import Child, LayoutResult, LayoutStrategy, Visibility
from .types import PathLike

logger = logging.getLogger(__name__)


class LayoutPlotter:
    """
    Draws computed layouts with matplotlib
    """

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize LayoutPlotter

        Args:
            config: Rendering configuration. If None, uses default settings.

        Example:
            >>> plotter = LayoutPlotter()
            >>> plotter = LayoutPlotter(PlotConfig.presentation())
        """
        self.config: PlotConfig = config or PlotConfig()

    def plot(
        self,
        result: LayoutResult,
        children: Optional[Sequence[Child]] = None,
        container_size: Optional[Tuple[float, float]] = None,
        output_file: Optional[PathLike] = None,
        title: Optional[str] = None,
        show: bool = False
    ) -> Figure:
        """
        Generate a layout preview

        Args:
            result: Layout to draw
            children: Children the layout was computed from, used to fade
                INVISIBLE children. Optional.
            container_size: (width, height) of the container, drawn as the
                outer frame. Defaults to the display area bounds.
            output_file: Path to save the figure, nothing saved if None
            title: Plot title (auto-generated if None)
            show: Whether to display the plot

        Returns:
            matplotlib Figure object
        """
        cfg = self.config
        area = result.display_area
        fig, ax = plt.subplots(figsize=cfg.figsize)

        if container_size is None:
            container_size = (area.left + area.width, area.top + area.height)
        width, height = container_size

        if cfg.show_guides:
            self._draw_guides(ax, result, width, height)

        order = 0
        for placement in result.placements:
            visibility = Visibility.VISIBLE
            if children is not None and placement.index < len(children):
                visibility = children[placement.index].visibility

            alpha = cfg.invisible_alpha if visibility is Visibility.INVISIBLE else cfg.child_alpha
            facecolor = cfg.center_facecolor if placement.is_center else cfg.child_facecolor
            left, top, w, h = placement.rect()
            ax.add_patch(patches.Rectangle(
                (left, top), w, h,
                facecolor=facecolor, edgecolor='black', linewidth=cfg.edge_linewidth, alpha=alpha
            ))

            if cfg.show_labels:
                label = placement.child_id if placement.child_id is not None else f"#{placement.index}"
                if cfg.show_order and not placement.is_center:
                    label = f"{order}: {label}"
                ax.text(placement.x, placement.y, label, ha='center', va='center', fontsize=cfg.label_fontsize)

            if not placement.is_center:
                order += 1

        ax.plot([area.center_x], [area.center_y], marker='+', color=cfg.guide_color, markersize=8)

        margin = 0.05 * max(width, height, 1.0)
        xs = [0.0, width] + [p.left for p in result.placements] + [p.right for p in result.placements]
        ys = [0.0, height] + [p.top for p in result.placements] + [p.bottom for p in result.placements]
        ax.set_xlim(min(xs) - margin, max(xs) + margin)
        ax.set_ylim(min(ys) - margin, max(ys) + margin)
        ax.set_aspect('equal')
        ax.invert_yaxis()

        if title is None:
            if result.layout_radius is None:
                radius_text = 'oval'
            else:
                radius_text = f"R={result.layout_radius:g}"
            title = (f"{len(result.circle_placements)} children, {result.strategy.value}, "
                     f"{radius_text}, step={np.degrees(result.angle_increment):.1f}°")
        ax.set_title(title, fontsize=cfg.title_fontsize)

        plt.tight_layout()

        if output_file is not None:
            Path(output_file).parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(output_file, dpi=cfg.dpi, bbox_inches='tight',
                        facecolor='white', edgecolor='none')
            logger.info(f"Plot saved to {output_file}")

        if show:
            plt.show()

        return fig

    def _draw_guides(self, ax: Axes, result: LayoutResult, width: float, height: float) -> None:
        """Container frame, display area, inscribed circle and layout path"""
        cfg = self.config
        area = result.display_area
        style = dict(fill=False, edgecolor=cfg.guide_color, linewidth=cfg.guide_linewidth)

        ax.add_patch(patches.Rectangle((0, 0), width, height, **style))
        ax.add_patch(patches.Rectangle((area.left, area.top), area.width, area.height,
                                       linestyle='--', **style))
        ax.add_patch(patches.Circle(area.center, area.outer_radius, linestyle=':', **style))

        if result.strategy is LayoutStrategy.CIRCULAR:
            if result.layout_radius:
                ax.add_patch(patches.Circle(area.center, abs(result.layout_radius),
                                            linestyle='-.', **style))
        elif result.circle_placements:
            # Path through the child centers in placement order
            xs = [p.x for p in result.circle_placements]
            ys = [p.y for p in result.circle_placements]
            ax.plot(xs + xs[:1], ys + ys[:1], linestyle='-.', color=cfg.guide_color,
                    linewidth=cfg.guide_linewidth)
