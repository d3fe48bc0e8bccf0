from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..util.logger import logger
from .agents import AgentType, Position

# Rows spliced into the burrow for the unfolded (four-deep) variant
EXTENSION_ROWS = ("  #D#C#B#A#", "  #D#B#A#C#")


class CellType(Enum):
    OUTSIDE = 0
    WALL = 1
    HALLWAY = 2
    ROOM = 3


def unfold_lines(lines: Sequence[str]) -> List[str]:
    """Insert the extension rows immediately before the last two outline lines.

    Trailing blank lines are dropped first so the rows always land above the
    bottom room row and the closing wall.
    """
    lines = list(lines)
    while lines and not lines[-1].strip():
        lines.pop()
    if len(lines) < 2:
        raise ValueError("Burrow needs at least two lines to be unfolded")
    return lines[:-2] + list(EXTENSION_ROWS) + lines[-2:]


class Layout:
    """Static topology of a burrow: one hallway row above one room per agent type.

    The layout never changes during a search and is shared by every state
    derived from the same puzzle.
    """

    def __init__(self, grid: np.ndarray):
        self.grid = grid
        self.height, self.width = grid.shape

        hallway = self.find_cells_by_type(CellType.HALLWAY)
        if not hallway:
            raise ValueError("Burrow has no hallway cells")
        rows = set(cell.row for cell in hallway)
        if len(rows) != 1:
            raise ValueError(f"Hallway cells must share a single row, found rows {sorted(rows)}")
        self.hallway_row = rows.pop()
        hallway_columns = sorted(cell.col for cell in hallway)

        rooms = self.find_cells_by_type(CellType.ROOM)
        self.room_columns: Tuple[int, ...] = tuple(sorted(set(cell.col for cell in rooms)))
        if len(self.room_columns) != len(AgentType):
            raise ValueError(
                f"Burrow must have {len(AgentType)} rooms, found {len(self.room_columns)}"
            )

        depth = sum(1 for cell in rooms if cell.col == self.room_columns[0])
        self.room_rows: Tuple[int, ...] = tuple(
            range(self.hallway_row + 1, self.hallway_row + 1 + depth)
        )
        for col in self.room_columns:
            room_rows = sorted(cell.row for cell in rooms if cell.col == col)
            if tuple(room_rows) != self.room_rows:
                raise ValueError(
                    f"Room in column {col} must span rows {list(self.room_rows)}, "
                    f"found {room_rows}"
                )
            if col not in hallway_columns:
                raise ValueError(f"Room in column {col} has no hallway cell above it")

        # Agents may never stop directly above a room entrance
        self.stop_columns: Tuple[int, ...] = tuple(
            col for col in hallway_columns if col not in self.room_columns
        )
        self._home_columns: Dict[AgentType, int] = {
            agent_type: self.room_columns[agent_type.value] for agent_type in AgentType
        }

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Layout":
        """Build the cell grid from the textual burrow.

        The first row holding open cells is the hallway; open cells below it
        are rooms. Agent markers stand on open cells. Unknown characters are
        skipped with a warning.
        """
        log = logger.bind(component="layout")
        height = len(lines)
        width = max((len(line) for line in lines), default=0)
        grid = np.zeros((height, width), dtype=int)

        hallway_row: Optional[int] = None
        for row, line in enumerate(lines):
            for col, char in enumerate(line):
                if char == "#":
                    grid[row, col] = CellType.WALL.value
                elif char == "." or AgentType.is_marker(char):
                    if hallway_row is None:
                        hallway_row = row
                    cell_type = CellType.HALLWAY if row == hallway_row else CellType.ROOM
                    grid[row, col] = cell_type.value
                elif char != " ":
                    log.warning(f"Skipping unknown character {char!r} at ({row}, {col})")

        return cls(grid)

    @property
    def depth(self) -> int:
        return len(self.room_rows)

    @property
    def capacity(self) -> int:
        """Number of agents the burrow holds: one per room cell."""
        return self.depth * len(self.room_columns)

    def is_valid_position(self, position: Position) -> bool:
        return 0 <= position.row < self.height and 0 <= position.col < self.width

    def get_cell_type(self, position: Position) -> Optional[CellType]:
        if not self.is_valid_position(position):
            return None
        return CellType(self.grid[position.row, position.col])

    def is_open(self, position: Position) -> bool:
        cell_type = self.get_cell_type(position)
        return cell_type == CellType.HALLWAY or cell_type == CellType.ROOM

    def is_hallway(self, position: Position) -> bool:
        return position.row == self.hallway_row

    def is_room_row(self, row: int) -> bool:
        return self.room_rows[0] <= row <= self.room_rows[-1]

    def home_column(self, agent_type: AgentType) -> int:
        return self._home_columns[agent_type]

    def room_cells(self, agent_type: AgentType) -> List[Position]:
        """Cells of the agent type's home room, top to bottom."""
        col = self.home_column(agent_type)
        return [Position(row, col) for row in self.room_rows]

    def hallway_stops(self) -> List[Position]:
        return [Position(self.hallway_row, col) for col in self.stop_columns]

    def find_cells_by_type(self, cell_type: CellType) -> List[Position]:
        return [
            Position(int(row), int(col))
            for row, col in np.argwhere(self.grid == cell_type.value)
        ]
