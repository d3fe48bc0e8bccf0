from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

from ..burrow.movement import MoveGenerator
from ..burrow.state import BurrowState
from ..util.logger import logger
from .config import SolverConfig
from .heuristic import agent_lower_bound, move_cost, seals_room


class SearchStrategy(ABC):
    """Exhaustive minimum-cost search over burrow states.

    A strategy instance owns all of its bookkeeping (frontier, visited set,
    memo) and serves exactly one search.
    """

    name = "search"

    def __init__(self, config: SolverConfig):
        self.config = config
        self.states_explored = 0
        self.moves: Optional[MoveGenerator] = None
        self.logger = logger.bind(component=self.name)

    @abstractmethod
    def search(self, initial: BurrowState) -> Optional[int]:
        """Return the minimum total cost to a goal state, or None if none is reachable."""

    def expand(self, state: BurrowState, bound: int) -> Iterator[Tuple[BurrowState, int, int]]:
        """Yield (successor, move cost, successor lower bound) for every promising move.

        Args:
            state: State to expand; assumed not to be a dead end itself
            bound: lower_bound(state), updated per move for the one agent that moves
        """
        if self.moves is None or self.moves.layout is not state.layout:
            self.moves = MoveGenerator(state.layout)
        layout = state.layout

        for index, goal in self.moves.legal_moves(state):
            agent = state.agents[index]
            successor = state.move_agent(index, goal)
            moved = successor.agents[index]
            # Only the agent that just moved can have sealed a room
            if seals_room(successor, moved):
                continue
            successor_bound = (
                bound - agent_lower_bound(layout, agent) + agent_lower_bound(layout, moved)
            )
            yield successor, move_cost(agent, goal), successor_bound

    def _count_state(self, best: Optional[float]) -> None:
        self.states_explored += 1
        if self.states_explored % self.config.log_interval == 0:
            self.logger.debug(f"{self.states_explored} states explored, best so far {best}")
