"""Layout subcommand - compute placements"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path
import logging

from ..io import write_placements
from .common import add_layout_arguments, build_container, configure_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add layout subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for layout subcommand
    """
    parser = subparsers.add_parser(
        'layout',
        help='Compute child placements and write them as TSV'
    )
    add_layout_arguments(parser)
    parser.add_argument('--output', metavar='TSV',
                        help='Placement table (default: <children>.placements.tsv next to the input)')
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> Path:
    """
    Execute layout subcommand

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        Path of the placement table
    """
    configure_logging(args)

    children_file = Path(args.children)
    output_file = Path(args.output) if args.output else children_file.with_suffix('.placements.tsv')

    logger.info(f"Input: {children_file}")
    logger.info(f"Output: {output_file}")
    logger.info(f"Container: {args.width:g}x{args.height:g}, padding {args.padding}")

    container, _ = build_container(args)
    result = container.last_result

    if result.layout_radius is not None:
        logger.info(f"Layout radius: {result.layout_radius:.2f} px (outer radius {result.outer_radius:.2f} px)")

    return write_placements(result, output_file)
