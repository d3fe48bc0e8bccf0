"""
Minimum-cost search for burrow puzzles.

Finds the cheapest sequence of moves that organizes every agent into its home room.
"""

from .astar import AStarSearch
from .branch_and_bound import BranchAndBoundSearch
from .config import SolverConfig
from .solver import BurrowSolver, SolveResult, UnsolvableBurrowError

__all__ = [
    "AStarSearch",
    "BranchAndBoundSearch",
    "BurrowSolver",
    "SolveResult",
    "SolverConfig",
    "UnsolvableBurrowError",
]
