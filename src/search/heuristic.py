"""
Cost model and admissible lower bound for burrow searches.
"""

from ..burrow.agents import Agent, Position
from ..burrow.layout import Layout
from ..burrow.state import BurrowState


def move_cost(agent: Agent, destination: Position) -> int:
    """Energy spent moving an agent along its corridor to destination."""
    return agent.position.distance(destination) * agent.step_cost


def agent_lower_bound(layout: Layout, agent: Agent) -> int:
    """Cheapest possible cost for one agent to reach any cell of its home room.

    Other agents are ignored, as is any later need to leave the room again, so
    the estimate never exceeds the true cost.
    """
    position = agent.position
    home = layout.home_column(agent.agent_type)
    if position.col == home and layout.is_room_row(position.row):
        return 0

    hallway_row = layout.hallway_row
    steps = (
        (position.row - hallway_row)
        + abs(position.col - home)
        + (layout.room_rows[0] - hallway_row)
    )
    return steps * agent.step_cost


def lower_bound(state: BurrowState) -> int:
    return sum(agent_lower_bound(state.layout, agent) for agent in state.agents)


def seals_room(state: BurrowState, agent: Agent) -> bool:
    """True when a settled agent sits above an empty or foreign cell of its room.

    An agent that has already moved and sits in a room never moves again, so
    every cell beneath it must already hold an agent of its type.
    """
    if not agent.has_moved or state.layout.is_hallway(agent.position):
        return False

    col = agent.position.col
    for row in range(agent.position.row + 1, state.layout.room_rows[-1] + 1):
        below = Position(row, col)
        if not state.is_occupied(below):
            return True
        if state.agent_at(below).agent_type != agent.agent_type:
            return True
    return False


def is_dead_end(state: BurrowState) -> bool:
    """True when some settled agent seals a room that can never be completed."""
    return any(seals_room(state, agent) for agent in state.agents)
