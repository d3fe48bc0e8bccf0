from enum import Enum
from typing import NamedTuple


class AgentType(Enum):
    AMBER = 0
    BRONZE = 1
    COPPER = 2
    DESERT = 3

    @property
    def marker(self) -> str:
        return "ABCD"[self.value]

    @property
    def step_cost(self) -> int:
        return 10**self.value

    @classmethod
    def from_marker(cls, marker: str) -> "AgentType":
        for agent_type in cls:
            if agent_type.marker == marker:
                return agent_type
        raise ValueError(f"Unknown agent marker: {marker!r}")

    @classmethod
    def is_marker(cls, char: str) -> bool:
        return any(agent_type.marker == char for agent_type in cls)


class Position(NamedTuple):
    row: int
    col: int

    def distance(self, other: "Position") -> int:
        """Manhattan distance, which is also the corridor length of a legal move."""
        return abs(self.row - other.row) + abs(self.col - other.col)


class Agent(NamedTuple):
    agent_type: AgentType
    position: Position
    has_moved: bool = False

    def moved_to(self, destination: Position) -> "Agent":
        return Agent(self.agent_type, destination, True)

    @property
    def step_cost(self) -> int:
        return self.agent_type.step_cost

    def __str__(self) -> str:
        flag = "*" if self.has_moved else ""
        return f"{self.agent_type.marker}{flag}@({self.position.row},{self.position.col})"
