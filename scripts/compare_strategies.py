#!/usr/bin/env python3
"""
Benchmark script - runs every search strategy on one burrow and compares them.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path to import src modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.burrow.layout import unfold_lines
from src.burrow.reader import read_puzzle_lines
from src.burrow.state import BurrowState
from src.search.config import STRATEGY_NAMES, SolverConfig
from src.search.heuristic import lower_bound
from src.search.solver import BurrowSolver, UnsolvableBurrowError
from src.util.logger import configure_logging


def main():
    """Run both strategies and report cost, states explored and time."""
    parser = argparse.ArgumentParser(description="Compare burrow search strategies")
    parser.add_argument("input", help="Puzzle file ('-' for stdin)")
    parser.add_argument(
        "--extended", action="store_true", help="Splice in the two extra room rows"
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show progress bars on stderr"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args()
    configure_logging(verbose=args.verbose)

    lines = read_puzzle_lines(args.input)
    if args.extended:
        lines = unfold_lines(lines)
    state = BurrowState.parse(lines)

    print(f"=== Burrow Strategy Comparison ===")
    print(f"Agents: {len(state)}")
    print(f"Room depth: {state.layout.depth}")
    print(f"Initial lower bound: {lower_bound(state)}")
    print()

    costs = {}
    for strategy in STRATEGY_NAMES:
        solver = BurrowSolver(
            SolverConfig(strategy=strategy, show_progress=args.progress)
        )
        try:
            result = solver.solve(state)
        except UnsolvableBurrowError as e:
            print(f"{strategy:<18} unsolvable ({e})")
            costs[strategy] = None
            continue

        costs[strategy] = result.min_cost
        print(
            f"{strategy:<18} cost {result.min_cost:>8}  "
            f"states {result.states_explored:>9}  "
            f"time {result.time_taken_ms:>10.1f}ms"
        )

    print()
    if len(set(costs.values())) == 1:
        print("Strategies agree")
    else:
        print(f"Strategies DISAGREE: {costs}")
        sys.exit(1)


if __name__ == "__main__":
    main()
