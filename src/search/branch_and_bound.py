"""
Memoized branch-and-bound recursion over burrow states.
"""

import math
from typing import Dict, Optional, Tuple

from tqdm import tqdm

from ..burrow.state import BurrowState
from .base import SearchStrategy
from .heuristic import lower_bound


class BranchAndBoundSearch(SearchStrategy):
    """Depth-first search with a memo of remaining cost per state.

    Memo entries are (remaining cost, exact). A subtree explored without any
    pruning yields an exact minimum; a subtree where branches were cut against
    the best total only yields a lower bound, which is reused to cut again but
    never returned as an answer. Every agent moves at most twice, so the
    recursion depth is bounded by twice the number of agents.
    """

    name = "branch_and_bound"

    def __init__(self, config):
        super().__init__(config)
        self.memo: Dict[BurrowState, Tuple[float, bool]] = {}
        self.best_total: float = math.inf
        self._progress: Optional[tqdm] = None

    def search(self, initial: BurrowState) -> Optional[int]:
        with tqdm(
            desc="branch-and-bound",
            unit=" states",
            disable=not self.config.show_progress,
        ) as progress:
            self._progress = progress
            self._search(initial, 0, lower_bound(initial))
            self._progress = None

        if math.isinf(self.best_total):
            return None
        return int(self.best_total)

    def _record(self, total: float) -> None:
        if total < self.best_total:
            self.best_total = total
            self.logger.debug(
                f"New best total {int(total)} after {self.states_explored} states"
            )

    def _is_hopeless(self, bound: float) -> bool:
        return self.config.prune and bound >= self.best_total

    def _search(
        self, state: BurrowState, accumulated: int, bound: int
    ) -> Tuple[float, bool]:
        """Return (remaining cost from state, whether that cost is exact)."""
        cached = self.memo.get(state)
        if cached is not None:
            remaining, exact = cached
            if exact:
                self._record(accumulated + remaining)
                return cached
            if self._is_hopeless(accumulated + remaining):
                return cached

        self._count_state(self.best_total)
        if self._progress is not None:
            self._progress.update(1)

        if state.is_goal():
            self.memo[state] = (0, True)
            self._record(accumulated)
            return 0, True

        # Promising branches first so the best total tightens early
        children = sorted(
            (
                (step_cost + child_bound, step_cost, successor, child_bound)
                for successor, step_cost, child_bound in self.expand(state, bound)
            ),
            key=lambda child: child[0],
        )

        lowest = math.inf
        exact = True
        for estimate, step_cost, successor, child_bound in children:
            if self._is_hopeless(accumulated + estimate):
                lowest = min(lowest, estimate)
                exact = False
                continue

            remaining, sub_exact = self._search(
                successor, accumulated + step_cost, child_bound
            )
            lowest = min(lowest, step_cost + remaining)
            exact = exact and sub_exact

        self.memo[state] = (lowest, exact)
        return lowest, exact
