#!/usr/bin/env python3
# load-dispatch/main.py
"""
Command-Line Interface for the greedy load dispatcher.

Reads a load file, assigns the loads to drivers and prints one line per
driver with the ids of its loads in service order.

Usage:
    python main.py loads.txt                  # Print driver manifests
    python main.py loads.txt --summary        # Also print costs per driver
    python main.py loads.txt --driver-cost 300 --max-working-time 600
    python main.py loads.txt --verbose        # Log every assignment decision

Exit Codes:
    0: Success
    1: Input error (missing argument, unreadable or malformed file, bad option)
    2: No loads to assign
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from typing import List, Optional

from loaddispatch import scoring
from loaddispatch.config import DispatchConfig
from loaddispatch.dispatch import DispatchEngine
from loaddispatch.errors import InputFormatError, InputIOError
from loaddispatch.loader import read_loads
from loaddispatch.models import Assigned


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="load-dispatch",
        description="Assign pickup/drop-off loads to drivers with a greedy heuristic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  load-dispatch loads.txt                  # One line of load ids per driver
  load-dispatch loads.txt --summary        # Add route distance and cost table
        """
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="Input file: header line, then 'label (px,py) (dx,dy)' per load"
    )

    parser.add_argument(
        "--summary", "-s",
        action="store_true",
        help="Print a per-driver cost table and the total cost"
    )

    parser.add_argument(
        "--driver-cost",
        type=float,
        default=None,
        help="Fixed cost per driver (default: 500)"
    )

    parser.add_argument(
        "--max-working-time",
        type=float,
        default=None,
        help="Working-time budget per driver (default: 720)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every assignment decision"
    )
    return parser


def print_summary(drivers, config: DispatchConfig) -> None:
    """Print the per-driver table and the total cost of the run."""
    summary = scoring.build_summary(drivers, config)
    print()
    print(summary.to_string(index=False))
    print(f"\nTotal cost: {scoring.total_cost(drivers, config):.2f}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.path is None:
        print("ERROR: No file path provided. Please provide the file path as an argument.")
        parser.print_usage(sys.stdout)
        return 1

    try:
        config = DispatchConfig().with_overrides(
            fixed_driver_cost=args.driver_cost,
            max_working_time=args.max_working_time,
        )
    except ValueError as e:
        print(f"ERROR: Invalid configuration: {e}")
        return 1

    try:
        loads = read_loads(args.path)
    except InputIOError as e:
        print(f"ERROR: Failed to read file: {e}")
        traceback.print_exc()
        return 1
    except InputFormatError as e:
        print(f"ERROR: Malformed input: {e}")
        traceback.print_exc()
        return 1

    result = DispatchEngine(config).assign(loads)
    if not isinstance(result, Assigned):
        print(f"ERROR: {result.reason} in {args.path}")
        return 2

    for driver in result.drivers:
        print(scoring.format_manifest(driver))

    if args.summary:
        print_summary(result.drivers, config)

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
