# tests/test_grid.py
import pytest

from netgame.grid import (
    ALL_DIRS, DIRECTIONS, Direction, anticlockwise, clockwise, count_bits,
    delta, flip, iter_dirs, neighbour, on_border, rotate, rotate_step,
)
from netgame.tiles import LOCKED

R, U, L, D = Direction.R, Direction.U, Direction.L, Direction.D


def test_direction_bits_are_distinct_single_bits():
    assert [int(d) for d in DIRECTIONS] == [1, 2, 4, 8]
    assert R | U | L | D == ALL_DIRS


def test_rotate_step_goes_anticlockwise():
    assert rotate_step(R) == U
    assert rotate_step(U) == L
    assert rotate_step(L) == D
    assert rotate_step(D) == R
    assert anticlockwise(R) == U
    assert clockwise(R) == D
    assert clockwise(anticlockwise(L)) == L


def test_flip_is_opposite():
    assert flip(R) == L and flip(L) == R
    assert flip(U) == D and flip(D) == U


def test_rotate_mask_quarter_turns():
    assert rotate(R | U, 0) == R | U
    assert rotate(R | U, 1) == U | L
    assert rotate(R | U, 2) == L | D
    assert rotate(R | U, 3) == D | R
    assert rotate(R | U, -1) == rotate(R | U, 3)
    # straight piece flips onto itself
    assert rotate(R | L, 2) == R | L


def test_rotate_keeps_flag_bits():
    assert rotate(LOCKED | R, 1) == LOCKED | U


def test_four_quarter_turns_is_identity_for_every_mask():
    for mask in range(16):
        m = mask
        for _ in range(4):
            m = rotate(m, 1)
        assert m == mask
        assert count_bits(rotate(mask, 1)) == count_bits(mask)


def test_delta_unit_vectors():
    assert delta(R) == (1, 0)
    assert delta(U) == (0, -1)
    assert delta(L) == (-1, 0)
    assert delta(D) == (0, 1)


def test_neighbour_wraps_on_torus():
    assert neighbour(0, 0, L, 5, 4, True) == (4, 0)
    assert neighbour(0, 0, U, 5, 4, True) == (0, 3)
    assert neighbour(4, 3, R, 5, 4, True) == (0, 3)
    assert neighbour(4, 3, D, 5, 4, True) == (4, 0)
    assert neighbour(2, 2, R, 5, 4, False) == (3, 2)


def test_neighbour_off_flat_grid_is_a_bug():
    with pytest.raises(AssertionError):
        neighbour(0, 0, L, 5, 4, False)


def test_on_border():
    assert on_border(0, 2, L, 5, 5)
    assert on_border(4, 2, R, 5, 5)
    assert on_border(2, 0, U, 5, 5)
    assert on_border(2, 4, D, 5, 5)
    assert not on_border(2, 2, R, 5, 5)


def test_count_bits_and_iter_dirs():
    assert count_bits(0) == 0
    assert count_bits(R) == 1
    assert count_bits(R | U | D) == 3
    assert count_bits(ALL_DIRS) == 4
    assert count_bits(LOCKED | R) == 1
    assert list(iter_dirs(D | R)) == [R, D]
