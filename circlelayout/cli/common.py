"""Arguments and setup shared by the layout and plot subcommands"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace
from typing import List, Optional, Tuple
import logging

from ..config import LayoutConfig
from ..container import CircleContainer
from ..io import read_children
from ..layout import Child

logger = logging.getLogger(__name__)


def add_layout_arguments(parser: ArgumentParser) -> None:
    """
    Add child table, container and layout parameter arguments

    Args:
        parser: Subcommand parser to extend
    """
    # Input
    parser.add_argument('--children', required=True, metavar='TSV',
                        help='Child table (columns: id, width, height, optional visibility)')

    # Container
    parser.add_argument('--width', type=float, required=True,
                        help='Container width (px)')
    parser.add_argument('--height', type=float, required=True,
                        help='Container height (px)')
    parser.add_argument('--padding', type=float, nargs='+', default=[0.0], metavar='PX',
                        help='Padding: one value, or left top right bottom (default: 0)')

    # Layout parameters
    parser.add_argument('--angle', type=float, default=0.0,
                        help='Angle between children in degrees, 0 for equal split (default: 0)')
    parser.add_argument('--angle-offset', type=float, default=0.0,
                        help='Starting angle in degrees from the positive X axis (default: 0)')
    parser.add_argument('--radius', type=float, default=0.0,
                        help='Fixed radius (px), 0 to derive it from --radius-mode (default: 0)')
    parser.add_argument('--radius-mode', choices=['fits_largest_child', 'fits_smallest_child'],
                        default='fits_largest_child',
                        help='Radius policy when no fixed radius is given (default: fits_largest_child)')
    parser.add_argument('--direction', choices=['counterclockwise', 'clockwise'],
                        default='counterclockwise',
                        help='Rotation direction (default: counterclockwise)')
    parser.add_argument('--center', metavar='ID',
                        help='Identifier of the child placed at the center')
    parser.add_argument('--strategy', choices=['circular', 'oval'], default='circular',
                        help='Distribution strategy (default: circular)')

    # Debug flag
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def configure_logging(args: Namespace) -> None:
    """Configure logging for a subcommand run"""
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def layout_config_from_args(args: Namespace) -> LayoutConfig:
    return LayoutConfig(
        angle_deg=args.angle,
        angle_offset_deg=args.angle_offset,
        direction=args.direction,
        radius=args.radius,
        radius_mode=args.radius_mode,
        strategy=args.strategy,
        center_id=args.center,
    )


def build_container(
    args: Namespace,
    layout_config: Optional[LayoutConfig] = None
) -> Tuple[CircleContainer, List[Child]]:
    """
    Read the child table and lay it out in a container

    Args:
        args: Parsed command-line arguments (input, size and padding)
        layout_config: Layout parameters, built from args if None

    Returns:
        (container after its first layout pass, children in file order)

    Raises:
        FileNotFoundError: if the child table does not exist
        ConfigurationError: if a parameter is invalid or --center names no child
    """
    children = read_children(args.children)
    logger.info(f"Loaded {len(children)} children from {args.children}")

    params = (layout_config or layout_config_from_args(args)).to_params()
    padding = args.padding[0] if len(args.padding) == 1 else tuple(args.padding)
    container = CircleContainer(args.width, args.height, padding=padding,
                                params=params, children=children)
    return container, children
