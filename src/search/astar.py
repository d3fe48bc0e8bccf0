"""
Best-first (A*) search over burrow states.
"""

import heapq
import itertools
from typing import List, Optional, Set, Tuple

from tqdm import tqdm

from ..burrow.state import BurrowState
from .base import SearchStrategy
from .heuristic import lower_bound


class AStarSearch(SearchStrategy):
    """Priority-ordered search keyed by accumulated cost plus lower bound.

    The frontier may hold several entries for one state; only the first one
    popped is expanded. The search keeps draining the frontier after the first
    goal so the reported cost is the minimum over every goal reached.
    """

    name = "astar"

    def search(self, initial: BurrowState) -> Optional[int]:
        counter = itertools.count()
        frontier: List[Tuple[int, int, int, BurrowState]] = [
            (lower_bound(initial), next(counter), 0, initial)
        ]
        visited: Set[BurrowState] = set()
        best: Optional[int] = None

        with tqdm(
            desc="astar", unit=" states", disable=not self.config.show_progress
        ) as progress:
            while frontier:
                priority, _, cost, state = heapq.heappop(frontier)

                if state in visited:
                    continue
                visited.add(state)
                self._count_state(best)
                progress.update(1)

                if best is not None and priority > best:
                    continue

                if state.is_goal():
                    if best is None or cost < best:
                        best = cost
                        self.logger.debug(
                            f"Goal reached with cost {best} after {self.states_explored} states"
                        )
                    continue

                for successor, step_cost, bound in self.expand(state, priority - cost):
                    if successor in visited:
                        continue
                    total = cost + step_cost
                    estimate = total + bound
                    if best is not None and estimate > best:
                        continue
                    heapq.heappush(frontier, (estimate, next(counter), total, successor))

        return best
