from netgame.grid import Direction
from netgame.tiles import (
    DR, LD, LOCKED, RU, UL, corner_bit, corners_of, edges_of,
    is_endpoint, is_locked, is_valid_piece, mask_of,
)

R, U, L, D = Direction.R, Direction.U, Direction.L, Direction.D


def test_corner_bits_follow_their_direction():
    assert (RU, UL, LD, DR) == (0x10, 0x20, 0x40, 0x80)
    assert corner_bit(R) == RU
    assert corner_bit(D) == DR


def test_tile_byte_helpers():
    t = LOCKED | R | D
    assert mask_of(t) == R | D
    assert is_locked(t)
    assert not is_locked(R)
    assert is_endpoint(LOCKED | U)
    assert not is_endpoint(U | D)


def test_valid_pieces_have_one_to_three_arms():
    assert not is_valid_piece(0)
    assert is_valid_piece(R)
    assert is_valid_piece(R | U | L)
    assert not is_valid_piece(R | U | L | D)


def test_barrier_byte_split():
    b = R | U | RU | LD
    assert edges_of(b) == R | U
    assert corners_of(b) == R | L
