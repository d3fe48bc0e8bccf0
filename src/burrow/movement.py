from typing import Iterator, List, Tuple

from .agents import Agent, Position
from .layout import Layout
from .state import BurrowState


class MoveGenerator:
    """Enumerates legal moves for agents in a burrow.

    Every legal move is a single L-shaped (or straight) corridor between a room
    cell and a hallway stop, so paths are computed in closed form rather than
    searched for.
    """

    def __init__(self, layout: Layout):
        self.layout = layout

    def path(self, start: Position, goal: Position) -> List[Position]:
        """Cells traversed from start to goal in travel order.

        The start cell is excluded and the goal cell included. Leaving a room
        climbs the start column before walking the hallway; entering a room
        walks the hallway before descending the goal column.
        """
        hallway_row = self.layout.hallway_row
        step = 1 if goal.col > start.col else -1
        horizontal = [
            Position(hallway_row, col)
            for col in range(start.col + step, goal.col + step, step)
        ]

        if start.row > goal.row:
            vertical = [
                Position(row, start.col) for row in range(start.row - 1, goal.row - 1, -1)
            ]
            return vertical + horizontal

        vertical = [Position(row, goal.col) for row in range(start.row + 1, goal.row + 1)]
        return horizontal + vertical

    def path_is_open(self, state: BurrowState, start: Position, goal: Position) -> bool:
        occupied = state.occupied
        return not any(cell in occupied for cell in self.path(start, goal))

    def candidate_destinations(self, agent: Agent) -> List[Position]:
        """Destinations allowed by the movement rules, ignoring other agents."""
        if self.layout.is_hallway(agent.position):
            # Only the agent's own room may be entered
            return self.layout.room_cells(agent.agent_type)
        if not agent.has_moved:
            return self.layout.hallway_stops()
        return []

    def destinations(self, state: BurrowState, index: int) -> List[Position]:
        agent = state.agents[index]
        start = agent.position
        if not self.layout.is_hallway(start):
            # Every exit shares the climb to the hallway; a blocked climb rules out all of them
            above = Position(start.row - 1, start.col)
            if above.row > self.layout.hallway_row and state.is_occupied(above):
                return []
        return [
            goal
            for goal in self.candidate_destinations(agent)
            if self.path_is_open(state, agent.position, goal)
        ]

    def legal_moves(self, state: BurrowState) -> Iterator[Tuple[int, Position]]:
        for index in range(len(state.agents)):
            for goal in self.destinations(state, index):
                yield index, goal
