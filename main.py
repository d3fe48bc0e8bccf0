#!/usr/bin/env python3
"""
Burrow Solver

Computes the minimum total energy needed to organize every agent of a burrow
puzzle into its home room.
"""

import argparse
import sys

from src.burrow.reader import read_puzzle_lines
from src.search.config import STRATEGY_NAMES, SolverConfig
from src.search.solver import BurrowSolver, UnsolvableBurrowError
from src.util.logger import configure_logging, logger


def run(args) -> int:
    """Solve the puzzle described by the parsed arguments and print its cost."""
    log = logger.bind(component="cli")

    config = SolverConfig(
        strategy=args.strategy,
        prune=not args.no_prune,
        show_progress=args.progress,
    )

    try:
        lines = read_puzzle_lines(args.input)
        result = BurrowSolver(config).solve_lines(lines, extended=args.extended)
    except FileNotFoundError as e:
        log.error(str(e))
        return 1
    except ValueError as e:
        log.error(f"Invalid burrow: {e}")
        return 1
    except UnsolvableBurrowError as e:
        log.error(str(e))
        return 1

    print(result.min_cost)
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Minimum-cost burrow organizer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py puzzles/example.txt                       # Two-deep burrow
  python main.py puzzles/example.txt --extended            # Unfolded four-deep burrow
  python main.py - --strategy branch-and-bound < input.txt # Read from stdin
        """,
    )

    parser.add_argument(
        "input", nargs="?", default=None, help="Puzzle file ('-' or omitted for stdin)"
    )
    parser.add_argument(
        "--extended", action="store_true", help="Splice in the two extra room rows"
    )
    parser.add_argument(
        "--strategy",
        choices=STRATEGY_NAMES,
        default="astar",
        help="Search strategy",
    )
    parser.add_argument(
        "--no-prune",
        action="store_true",
        help="Disable best-total pruning in branch-and-bound",
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar on stderr"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args()
    configure_logging(verbose=args.verbose)

    sys.exit(run(args))


if __name__ == "__main__":
    main()
