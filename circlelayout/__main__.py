"""
circlelayout CLI

Command-line interface with subcommands for computing and previewing layouts.
"""

import argparse
import sys
from .cli import layout, plot


def main():
    parser = argparse.ArgumentParser(
        prog='circlelayout',
        description='circlelayout: arrange elements along a circle'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    layout.add_parser(subparsers)
    plot.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    if args.command == 'layout':
        layout.run(args)
    elif args.command == 'plot':
        plot.run(args)


if __name__ == "__main__":
    main()
