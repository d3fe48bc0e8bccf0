from src.burrow.agents import Agent, AgentType, Position
from src.burrow.movement import MoveGenerator
from src.burrow.state import BurrowState

EXAMPLE = [
    "#############",
    "#...........#",
    "###B#C#B#D###",
    "  #A#D#C#A#",
    "  #########",
]

ORGANIZED = [
    "#############",
    "#...........#",
    "###A#B#C#D###",
    "  #A#B#C#D#",
    "  #########",
]

# Room B is empty; both bronze agents wait at the right end of the hallway
BRONZE_WAITING = [
    "#############",
    "#.........BB#",
    "###A#.#C#D###",
    "  #A#.#C#D#",
    "  #########",
]


def state_with(lines, *moves):
    """Parse a burrow and apply (agent index, destination) moves in order."""
    state = BurrowState.parse(lines)
    for index, destination in moves:
        state = state.move_agent(index, destination)
    return state


class TestPath:
    def setup_method(self):
        self.moves = MoveGenerator(BurrowState.parse(EXAMPLE).layout)

    def test_same_start_and_goal_is_empty(self):
        assert self.moves.path(Position(1, 1), Position(1, 1)) == []

    def test_single_step_along_hallway(self):
        assert self.moves.path(Position(1, 1), Position(1, 2)) == [Position(1, 2)]
        assert self.moves.path(Position(1, 2), Position(1, 1)) == [Position(1, 1)]

    def test_single_step_into_and_out_of_room(self):
        assert self.moves.path(Position(1, 3), Position(2, 3)) == [Position(2, 3)]
        assert self.moves.path(Position(2, 3), Position(1, 3)) == [Position(1, 3)]

    def test_up_up_then_left(self):
        # #############
        # #.Gx........#
        # ###x#.#.#.###
        #   #S#.#.#.#
        path = self.moves.path(Position(3, 3), Position(1, 2))
        assert path == [Position(2, 3), Position(1, 3), Position(1, 2)]

    def test_left_left_then_down_down(self):
        # #############
        # #........xxS#
        # ###.#.#.#x###
        #   #.#.#.#G#
        path = self.moves.path(Position(1, 11), Position(3, 9))
        assert path == [Position(1, 10), Position(1, 9), Position(2, 9), Position(3, 9)]

    def test_path_length_matches_distance(self):
        layout = BurrowState.parse(EXAMPLE).layout
        for start in layout.room_cells(AgentType.BRONZE):
            for goal in layout.hallway_stops():
                assert len(self.moves.path(start, goal)) == start.distance(goal)
                assert len(self.moves.path(goal, start)) == start.distance(goal)


class TestPathIsOpen:
    def test_open_path(self):
        # #############
        # #Sxxxx..B..B#
        # ###A#x#C#D###
        #   #A#G#C#D#
        state = state_with(BRONZE_WAITING, (0, Position(1, 8)))
        moves = MoveGenerator(state.layout)

        assert moves.path_is_open(state, Position(1, 1), Position(3, 5))

    def test_blocked_path(self):
        # #############
        # #SxxBx.....B#
        # ###A#x#C#D###
        #   #A#G#C#D#
        state = state_with(BRONZE_WAITING, (0, Position(1, 4)))
        moves = MoveGenerator(state.layout)

        assert not moves.path_is_open(state, Position(1, 1), Position(3, 5))

    def test_destination_itself_must_be_free(self):
        state = BurrowState.parse(EXAMPLE)
        moves = MoveGenerator(state.layout)

        assert not moves.path_is_open(state, Position(1, 1), Position(2, 3))

    def test_openness_is_symmetric_between_free_endpoints(self):
        state = state_with(BRONZE_WAITING, (1, Position(1, 4)))
        moves = MoveGenerator(state.layout)
        free = [p for p in state.layout.hallway_stops() if not state.is_occupied(p)]
        free += [Position(2, 5), Position(3, 5)]

        for a in free:
            for b in free:
                assert moves.path_is_open(state, a, b) == moves.path_is_open(state, b, a)


class TestCandidates:
    def test_room_agent_may_stop_anywhere_in_hallway(self):
        state = BurrowState.parse(EXAMPLE)
        moves = MoveGenerator(state.layout)

        candidates = moves.candidate_destinations(state.agents[0])
        assert candidates == [Position(1, col) for col in (1, 2, 4, 6, 8, 10, 11)]

    def test_hallway_agent_may_only_enter_own_room(self):
        state = state_with(EXAMPLE, (0, Position(1, 4)))
        moves = MoveGenerator(state.layout)

        # A bronze agent only targets column 5
        assert moves.candidate_destinations(state.agents[0]) == [
            Position(2, 5),
            Position(3, 5),
        ]

    def test_agent_that_returned_home_is_immobile(self):
        agent = Agent(AgentType.AMBER, Position(3, 3), has_moved=True)
        moves = MoveGenerator(BurrowState.parse(EXAMPLE).layout)

        assert moves.candidate_destinations(agent) == []


class TestDestinations:
    def test_initial_moves_only_from_top_row(self):
        state = BurrowState.parse(EXAMPLE)
        moves = MoveGenerator(state.layout)

        for index in range(4):
            assert len(moves.destinations(state, index)) == 7
        for index in range(4, 8):
            assert moves.destinations(state, index) == []

    def test_hallway_agent_blocks_both_directions(self):
        state = state_with(EXAMPLE, (1, Position(1, 6)))
        moves = MoveGenerator(state.layout)

        # Bronze agent at room A's top can only reach 1, 2 and 4
        assert moves.destinations(state, 0) == [
            Position(1, 1),
            Position(1, 2),
            Position(1, 4),
        ]

    def test_entry_requires_open_room(self):
        state = state_with(EXAMPLE, (2, Position(1, 4)))
        moves = MoveGenerator(state.layout)

        # Room B still holds C on top, so the waiting bronze agent cannot enter
        assert moves.destinations(state, 2) == []

    def test_entry_into_empty_room(self):
        state = BurrowState.parse(BRONZE_WAITING)
        moves = MoveGenerator(state.layout)

        assert moves.destinations(state, 0) == [Position(2, 5), Position(3, 5)]
        # The second bronze agent is stuck behind the first one
        assert moves.destinations(state, 1) == []

    def test_legal_moves_cover_every_agent(self):
        state = BurrowState.parse(EXAMPLE)
        moves = MoveGenerator(state.layout)

        legal = list(moves.legal_moves(state))
        assert len(legal) == 28
        assert {index for index, _ in legal} == {0, 1, 2, 3}

    def test_never_enters_foreign_room(self):
        state = state_with(ORGANIZED, (0, Position(1, 1)), (1, Position(1, 4)))
        moves = MoveGenerator(state.layout)

        for index, goal in moves.legal_moves(state):
            agent = state.agents[index]
            if state.layout.is_hallway(agent.position):
                assert goal.col == state.layout.home_column(agent.agent_type)
