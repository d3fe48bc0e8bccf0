"""
Minimum-cost solver for burrow puzzles.

Dispatches to one of the interchangeable search strategies and packages the
outcome.
"""

import time
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Type

from ..burrow.layout import unfold_lines
from ..burrow.state import BurrowState
from ..util.logger import logger
from .astar import AStarSearch
from .base import SearchStrategy
from .branch_and_bound import BranchAndBoundSearch
from .config import SolverConfig
from .heuristic import is_dead_end

STRATEGIES: Dict[str, Type[SearchStrategy]] = {
    "astar": AStarSearch,
    "branch-and-bound": BranchAndBoundSearch,
}


class UnsolvableBurrowError(RuntimeError):
    """Raised when no goal state is reachable from the initial burrow."""


@dataclass
class SolveResult:
    """Result of a burrow search."""

    min_cost: int
    states_explored: int
    time_taken_ms: float
    strategy: str


class BurrowSolver:
    """Finds the minimum total energy needed to organize a burrow."""

    def __init__(self, config: Optional[SolverConfig] = None):
        """Initialize burrow solver.

        Args:
            config: Search configuration; defaults to A* with no progress bar
        """
        self.config = config or SolverConfig()
        self.logger = logger.bind(component="solver")

    def solve(self, state: BurrowState) -> SolveResult:
        """Search from the given state to the cheapest goal state.

        Args:
            state: Initial burrow configuration

        Returns:
            SolveResult with the minimum total cost

        Raises:
            UnsolvableBurrowError: If no goal state can be reached
        """
        if is_dead_end(state):
            raise UnsolvableBurrowError("A settled agent seals a room that can never be completed")

        start_time = time.time()

        # A fresh strategy per call keeps caches scoped to this search
        search = STRATEGIES[self.config.strategy](self.config)
        min_cost = search.search(state)

        elapsed_ms = (time.time() - start_time) * 1000
        if min_cost is None:
            raise UnsolvableBurrowError(
                f"No organized burrow reachable after exploring "
                f"{search.states_explored} states"
            )

        self.logger.info(
            f"{self.config.strategy}: cost {min_cost}, "
            f"{search.states_explored} states in {elapsed_ms:.1f}ms"
        )
        return SolveResult(
            min_cost=min_cost,
            states_explored=search.states_explored,
            time_taken_ms=elapsed_ms,
            strategy=self.config.strategy,
        )

    def solve_lines(self, lines: Sequence[str], extended: bool = False) -> SolveResult:
        """Parse a textual burrow, optionally unfolded, and solve it."""
        if extended:
            lines = unfold_lines(lines)
        return self.solve(BurrowState.parse(lines))
