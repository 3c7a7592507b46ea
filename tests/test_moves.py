# tests/test_moves.py
import pytest

from netgame.engine.moves import (
    LEFT_BUTTON, MIDDLE_BUTTON, RIGHT_BUTTON,
    apply_lock_toggle, apply_rotate, make_move,
)
from netgame.engine.state import Rotation, duplicate
from netgame.errors import RejectedMove
from netgame.grid import rotate
from netgame.mapgen.generator import generate, generate_board, unshuffle
from netgame.params import GameParams


def fresh():
    return generate(GameParams(5, 5, False, 0.0), "42")


def nearly_solved():
    # Solution with the corner tile turned one quarter anticlockwise.
    board = generate_board(GameParams(5, 5, False, 0.0), "42")
    st = duplicate(board.state)
    st.tiles = unshuffle(st.tiles, board.rotations)
    st.tiles[0][0] = rotate(st.tiles[0][0], 1)
    st.completed = False
    return st


def test_rotate_changes_only_that_tile():
    st = fresh()
    ret = apply_rotate(st, 1, 2, Rotation.ANTICLOCKWISE)
    assert ret is not st
    assert ret.mask(1, 2) == rotate(st.mask(1, 2), 1)
    for x, y in st.cells():
        if (x, y) != (1, 2):
            assert ret.tile(x, y) == st.tile(x, y)
    assert ret.barriers == st.barriers


def test_rotate_does_not_mutate_input():
    st = fresh()
    before = duplicate(st)
    apply_rotate(st, 0, 0, Rotation.CLOCKWISE)
    assert st == before


def test_four_turns_return_to_start():
    for direction in (Rotation.ANTICLOCKWISE, Rotation.CLOCKWISE):
        st = fresh()
        cur = st
        for _ in range(4):
            cur = apply_rotate(cur, 3, 1, direction)
        assert cur.tiles == st.tiles
        assert cur.last_rotate_direction == direction


def test_clockwise_undoes_anticlockwise():
    st = fresh()
    ret = apply_rotate(apply_rotate(st, 2, 2, Rotation.ANTICLOCKWISE), 2, 2, Rotation.CLOCKWISE)
    assert ret.tiles == st.tiles


def test_locked_tile_rejects_rotation():
    st = apply_lock_toggle(fresh(), 2, 3)
    assert st.locked(2, 3)
    with pytest.raises(RejectedMove):
        apply_rotate(st, 2, 3, Rotation.CLOCKWISE)
    before = duplicate(st)
    assert make_move(st, 2, 3, LEFT_BUTTON) is None
    assert st == before


def test_unlock_allows_rotation_again():
    st = apply_lock_toggle(apply_lock_toggle(fresh(), 2, 3), 2, 3)
    assert not st.locked(2, 3)
    apply_rotate(st, 2, 3, Rotation.CLOCKWISE)


def test_lock_keeps_mask():
    st = fresh()
    ret = apply_lock_toggle(st, 4, 4)
    assert ret.mask(4, 4) == st.mask(4, 4)
    assert ret.completed == st.completed


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 5)])
def test_off_grid_rejected(x, y):
    st = fresh()
    with pytest.raises(RejectedMove):
        apply_rotate(st, x, y, Rotation.ANTICLOCKWISE)
    with pytest.raises(RejectedMove):
        apply_lock_toggle(st, x, y)
    for button in (LEFT_BUTTON, MIDDLE_BUTTON, RIGHT_BUTTON):
        assert make_move(st, x, y, button) is None


@pytest.mark.parametrize("direction", [0, 2, -2, 4])
def test_bad_direction_rejected(direction):
    st = fresh()
    before = duplicate(st)
    with pytest.raises(RejectedMove, match="bad direction"):
        apply_rotate(st, 1, 1, direction)
    # checked before the cell, so an off-grid move still reports the direction
    with pytest.raises(RejectedMove, match="bad direction"):
        apply_rotate(st, -1, 0, direction)
    assert st == before


def test_completion_can_be_made_and_broken():
    st = nearly_solved()
    done = apply_rotate(st, 0, 0, Rotation.CLOCKWISE)
    assert done.completed
    undone = apply_rotate(done, 0, 0, Rotation.CLOCKWISE)
    assert not undone.completed


def test_make_move_buttons():
    st = fresh()
    left = make_move(st, 1, 1, LEFT_BUTTON)
    right = make_move(st, 1, 1, RIGHT_BUTTON)
    middle = make_move(st, 1, 1, MIDDLE_BUTTON)
    assert left.mask(1, 1) == rotate(st.mask(1, 1), 1)
    assert left.last_rotate_direction == Rotation.ANTICLOCKWISE
    assert right.mask(1, 1) == rotate(st.mask(1, 1), -1)
    assert right.last_rotate_direction == Rotation.CLOCKWISE
    assert middle.locked(1, 1)
    assert make_move(st, 1, 1, "wheel") is None
