from collections import Counter
from typing import Dict, FrozenSet, Iterator, Optional, Sequence, Tuple

from .agents import Agent, AgentType, Position
from .layout import Layout


class BurrowState:
    """One configuration of every agent in the burrow.

    Agents live in a fixed-size tuple. Identity is the set of agents, so two
    states holding the same agents in different slots compare equal and hash
    identically.
    """

    def __init__(self, layout: Layout, agents: Sequence[Agent]):
        self.layout = layout
        self.agents: Tuple[Agent, ...] = tuple(agents)
        self._key: FrozenSet[Agent] = frozenset(self.agents)
        self._hash = hash(self._key)
        self._occupied: FrozenSet[Position] = frozenset(
            agent.position for agent in self.agents
        )
        self._by_position: Optional[Dict[Position, Agent]] = None

    @classmethod
    def parse(cls, lines: Sequence[str]) -> "BurrowState":
        """Build the layout and the initial agents from the textual burrow.

        Raises:
            ValueError: If the agents do not fill the burrow's rooms exactly,
                or the outline itself is malformed
        """
        layout = Layout.from_lines(lines)
        agents = [
            Agent(AgentType.from_marker(char), Position(row, col))
            for row, line in enumerate(lines)
            for col, char in enumerate(line)
            if AgentType.is_marker(char)
        ]
        state = cls(layout, agents)
        state.validate()
        return state

    def validate(self) -> None:
        """Check the invariants every search relies on."""
        if len(self.agents) != self.layout.capacity:
            raise ValueError(
                f"Burrow with {len(self.layout.room_columns)} rooms of depth "
                f"{self.layout.depth} needs {self.layout.capacity} agents, "
                f"found {len(self.agents)}"
            )

        counts = Counter(agent.agent_type for agent in self.agents)
        for agent_type in AgentType:
            if counts[agent_type] != self.layout.depth:
                raise ValueError(
                    f"Expected {self.layout.depth} agents of type {agent_type.marker}, "
                    f"found {counts[agent_type]}"
                )

        if len(self._occupied) != len(self.agents):
            raise ValueError("Two agents occupy the same cell")

        for agent in self.agents:
            if not self.layout.is_open(agent.position):
                raise ValueError(f"Agent {agent} is not on an open cell")

    @property
    def occupied(self) -> FrozenSet[Position]:
        return self._occupied

    def is_occupied(self, position: Position) -> bool:
        return position in self._occupied

    def is_home(self, agent: Agent) -> bool:
        return agent.position.col == self.layout.home_column(
            agent.agent_type
        ) and self.layout.is_room_row(agent.position.row)

    def is_goal(self) -> bool:
        return all(self.is_home(agent) for agent in self.agents)

    def agent_at(self, position: Position) -> Agent:
        if self._by_position is None:
            self._by_position = {agent.position: agent for agent in self.agents}
        try:
            return self._by_position[position]
        except KeyError:
            raise KeyError(f"No agent at {position}") from None

    def move_agent(self, index: int, destination: Position) -> "BurrowState":
        """Return the state reached by moving one agent; this state is untouched."""
        agents = list(self.agents)
        agents[index] = agents[index].moved_to(destination)
        return BurrowState(self.layout, agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(self.agents)

    def __len__(self) -> int:
        return len(self.agents)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BurrowState):
            return NotImplemented
        return self._hash == other._hash and self._key == other._key

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        agents = ", ".join(str(agent) for agent in self.agents)
        return f"BurrowState([{agents}])"
