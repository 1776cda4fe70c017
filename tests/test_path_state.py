# tests/test_path_state.py
from remixconnect.engine.path_state import MoveResult, PathState
from remixconnect.grid import snake_path
from remixconnect.levelgen.generator import LevelGenerator, assemble_level
from remixconnect.levelgen.walls import HORIZONTAL, Wall, WallSegment

# 5x6 snake with R E M I X at path indices 4, 9, 14, 19, 29:
#   . . . . R
#   E . . . .
#   . . . . M
#   I . . . .
#   . . . . .
#   X . . . .
REMIX_INDICES = [4, 9, 14, 19, 29]


def remix_level(walls=None):
    path = snake_path(5, 6)
    return assemble_level("REMIX", 5, 6, path, REMIX_INDICES, walls or [], difficulty=1)


def blocking_wall():
    # Blocks (0,1)-(1,1) and (1,1)-(2,1); neither is on the snake.
    return Wall([
        WallSegment((0, 1), (1, 1), HORIZONTAL),
        WallSegment((1, 1), (2, 1), HORIZONTAL),
    ])


def walk(state, cells):
    return [state.activate(p) for p in cells]


def test_start_cell_is_auto_connected():
    st = PathState(remix_level())
    assert st.cells == [(0, 0)]
    assert st.is_connected((0, 0))
    assert st.connected_count == 1
    assert st.next_expected_letter == 1
    assert not st.won


def test_full_snake_wins_on_last_step():
    level = remix_level()
    st = PathState(level)
    results = walk(st, level.path[1:-1])
    assert all(r is MoveResult.ACCEPTED for r in results)
    assert not st.won
    assert st.activate(level.path[-1]) is MoveResult.ACCEPTED
    assert st.won
    assert st.next_expected_letter == 6
    assert st.letters_lit == 5
    assert not st.used_undo


def test_letter_out_of_order_is_rejected():
    st = PathState(remix_level())
    # (1,0) holds E; R has not been connected yet.
    assert st.activate((1, 0)) is MoveResult.WRONG_ORDER
    assert st.connected_count == 1 and not st.is_connected((1, 0))
    assert st.next_expected_letter == 1


def test_reaching_m_before_e_is_rejected():
    st = PathState(remix_level())
    walk(st, [(0, 1), (0, 2), (0, 3), (0, 4), (1, 4)])
    assert st.letters_lit == 1
    before = st.cells
    # (2,4) is M; drop down the right edge skipping the row of E.
    assert st.activate((2, 4)) is MoveResult.WRONG_ORDER
    assert st.cells == before


def test_non_adjacent_targets_are_rejected():
    st = PathState(remix_level())
    assert st.activate((2, 2)) is MoveResult.NOT_ADJACENT
    assert st.activate((1, 1)) is MoveResult.NOT_ADJACENT  # diagonal
    assert st.activate((9, 9)) is MoveResult.NOT_ADJACENT
    assert st.connected_count == 1


def test_walls_block_movement_but_not_the_solution():
    level = remix_level([blocking_wall()])
    st = PathState(level)
    assert not st.is_adjacent((0, 1), (1, 1))
    assert st.is_adjacent((1, 1), (1, 2))
    assert st.activate((0, 1)) is MoveResult.ACCEPTED
    assert st.activate((1, 1)) is MoveResult.BLOCKED_BY_WALL
    assert st.connected_count == 2
    assert all(r is MoveResult.ACCEPTED for r in walk(st, level.path[2:]))
    assert st.won


def test_final_letter_waits_for_full_coverage():
    # 3x2 snake, word AB: A at (0,1), B pinned to (1,0).
    level = assemble_level("AB", 3, 2, snake_path(3, 2), [1, 5], [], difficulty=1)
    st = PathState(level)
    assert st.activate((0, 1)) is MoveResult.ACCEPTED
    assert st.activate((1, 1)) is MoveResult.ACCEPTED
    assert st.activate((1, 0)) is MoveResult.PREMATURE_FINISH
    assert MoveResult.PREMATURE_FINISH.rejected
    assert st.connected_count == 3 and st.next_expected_letter == 2
    assert not st.won


def test_undo_restores_counters():
    level = remix_level([blocking_wall()])
    st = PathState(level)
    walk(st, level.path[1:4])
    count, nxt, blocked = st.connected_count, st.next_expected_letter, set(st.blocked)
    assert st.activate((0, 4)) is MoveResult.ACCEPTED  # R
    assert st.next_expected_letter == nxt + 1
    assert st.deactivate((0, 4)) is MoveResult.UNDONE
    assert st.connected_count == count
    assert st.next_expected_letter == nxt
    assert st.blocked == blocked
    assert not st.is_connected((0, 4))
    assert st.used_undo


def test_only_the_tail_can_be_removed():
    st = PathState(remix_level())
    assert st.deactivate((0, 0)) is MoveResult.IGNORED
    walk(st, [(0, 1), (0, 2)])
    assert st.deactivate((0, 1)) is MoveResult.IGNORED
    assert st.deactivate((0, 0)) is MoveResult.IGNORED
    assert st.connected_count == 3


def test_drag_back_onto_predecessor_undoes():
    st = PathState(remix_level())
    walk(st, [(0, 1), (0, 2), (0, 3)])
    assert st.move_to((0, 3)) is MoveResult.IGNORED
    assert st.move_to((0, 2)) is MoveResult.UNDONE
    assert st.current == (0, 2)
    # Connected, but not the predecessor: nothing happens.
    assert st.move_to((0, 0)) is MoveResult.IGNORED
    assert st.press((0, 1)) is MoveResult.UNDONE
    assert st.cells == [(0, 0), (0, 1)]
    assert st.move_to((0, 2)) is MoveResult.ACCEPTED


def test_reset_returns_to_start():
    level = remix_level()
    st = PathState(level)
    assert st.reset() is False
    walk(st, level.path[1:11])
    assert st.next_expected_letter == 3
    assert st.reset() is True
    assert st.cells == [(0, 0)]
    assert st.next_expected_letter == 1
    assert sum(st.connected) == 1


def test_moves_after_win_are_noops():
    level = remix_level()
    st = PathState(level)
    walk(st, level.path[1:])
    assert st.won
    assert st.activate((0, 1)) is MoveResult.ALREADY_WON
    assert st.deactivate(level.path[-1]) is MoveResult.ALREADY_WON
    assert st.move_to(level.path[-2]) is MoveResult.ALREADY_WON
    assert st.reset() is False
    assert st.connected_count == 30


def test_generated_solutions_are_playable():
    for seed in range(5):
        for d in (1, 5, 8, 11, 16):
            level = LevelGenerator(seed).generate(d)
            st = PathState(level)
            results = walk(st, level.path[1:])
            assert all(r is MoveResult.ACCEPTED for r in results), (seed, d, results)
            assert st.won


def force_connect(state, cells):
    for p in cells:
        state._connect(state._idx(p))


def test_full_cover_ending_off_the_last_letter_is_not_a_win():
    # X sits at path index 25; the path ends on an empty cell.
    level = assemble_level("REMIX", 5, 6, snake_path(5, 6), [4, 9, 14, 19, 25], [], difficulty=1)
    st = PathState(level)
    force_connect(st, level.path[1:])
    st.next_expected_letter = 6
    assert st.connected_count == level.total_cells
    assert level.letter_at(st.current) is None
    assert st.check_win() is False


def test_full_cover_needs_every_letter_consumed():
    level = remix_level()
    st = PathState(level)
    force_connect(st, level.path[1:])
    st.next_expected_letter = 5
    assert st.check_win() is False
    st.next_expected_letter = 6
    assert st.check_win() is True


def test_partial_cover_is_not_a_win():
    level = remix_level()
    st = PathState(level)
    force_connect(st, level.path[1:20])
    st.next_expected_letter = 6
    assert st.check_win() is False
