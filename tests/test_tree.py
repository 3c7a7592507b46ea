# tests/test_tree.py
import pytest

from netgame.engine.connectivity import compute_active
from netgame.engine.state import GameState
from netgame.grid import DIRECTIONS, Direction, count_bits, flip, neighbour, on_border
from netgame.mapgen.barriers import empty_barriers
from netgame.mapgen.tree import build_spanning_tree, count_edges
from netgame.rng import RandomSource

R, U, L, D = Direction.R, Direction.U, Direction.L, Direction.D

SIZES = [
    (5, 5, False), (5, 5, True), (7, 4, False), (4, 7, True),
    (2, 2, True), (3, 3, True), (2, 1, False), (1, 5, False), (1, 5, True),
    (13, 11, False), (13, 11, True),
]


def grow(w, h, wrapping, seed):
    return build_spanning_tree(w, h, w // 2, h // 2, wrapping, RandomSource.from_seed(seed))


def tree_state(tiles, wrapping):
    h, w = len(tiles), len(tiles[0])
    return GameState(width=w, height=h, cx=w // 2, cy=h // 2, wrapping=wrapping,
                     tiles=tiles, barriers=empty_barriers(w, h))


@pytest.mark.parametrize("w,h,wrapping", SIZES)
@pytest.mark.parametrize("seed", ["1", "42", "net", "999"])
def test_tree_spans_without_loops_or_crosses(w, h, wrapping, seed):
    tiles = grow(w, h, wrapping, seed)
    for y in range(h):
        for x in range(w):
            n = count_bits(tiles[y][x])
            assert 1 <= n <= 3, f"({x},{y}) has {n} arms"
    # connected with exactly n-1 edges: a spanning tree
    assert count_edges(tiles) == w * h - 1
    assert compute_active(tree_state(tiles, wrapping)).completed


@pytest.mark.parametrize("w,h,wrapping", SIZES)
def test_every_arm_is_matched_by_its_neighbour(w, h, wrapping):
    tiles = grow(w, h, wrapping, "match")
    for y in range(h):
        for x in range(w):
            for d in DIRECTIONS:
                if not tiles[y][x] & d:
                    continue
                assert wrapping or not on_border(x, y, d, w, h), "arm off a flat board"
                x2, y2 = neighbour(x, y, d, w, h, wrapping)
                assert tiles[y2][x2] & flip(d)


def test_tree_is_deterministic_in_seed():
    assert grow(9, 9, True, "same") == grow(9, 9, True, "same")


def test_two_cell_board():
    # centre is (1,0); the only possible tree is one horizontal link
    assert grow(2, 1, False, "anything") == [[R, L]]


def test_one_column_board_is_a_straight_line():
    tiles = grow(1, 4, False, "col")
    assert [row[0] for row in tiles] == [D, U | D, U | D, U]
