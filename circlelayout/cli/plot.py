"""Plot subcommand - layout preview"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path
import logging
import matplotlib.pyplot as plt

from ..config import PlotConfig
from ..visualizer import LayoutPlotter
from .common import add_layout_arguments, build_container, configure_logging, layout_config_from_args

logger = logging.getLogger(__name__)

PRESETS = {
    'default': PlotConfig,
    'presentation': PlotConfig.presentation,
    'debug': PlotConfig.debug,
}


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add plot subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for plot subcommand
    """
    parser = subparsers.add_parser(
        'plot',
        help='Render a PNG preview of the layout'
    )
    add_layout_arguments(parser)
    parser.add_argument('--output', metavar='PNG',
                        help='Output image (default: <children>.layout.png next to the input)')
    parser.add_argument('--preset', choices=sorted(PRESETS), default='default',
                        help='Rendering preset (default: default)')
    parser.add_argument('--dpi', type=int,
                        help='Override preset DPI')
    parser.add_argument('--title', help='Plot title (auto-generated if omitted)')
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> Path:
    """
    Execute plot subcommand

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        Path of the saved image
    """
    configure_logging(args)

    children_file = Path(args.children)
    plot_file = Path(args.output) if args.output else children_file.with_suffix('.layout.png')

    logger.info(f"Input: {children_file}")
    logger.info(f"Output: {plot_file}")
    logger.info(f"Preset: {args.preset}")

    config = PRESETS[args.preset]()
    config.layout = layout_config_from_args(args)
    if args.dpi:
        config.dpi = args.dpi

    container, children = build_container(args, config.layout)
    result = container.last_result

    logger.info("Generating plot...")
    fig = LayoutPlotter(config).plot(
        result,
        children=children,
        container_size=container.size,
        output_file=plot_file,
        title=args.title,
    )
    plt.close(fig)

    logger.info(f"Plot saved: {plot_file}")
    return plot_file
