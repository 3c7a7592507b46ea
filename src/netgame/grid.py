# src/netgame/grid.py
# Direction algebra for the square grid (optionally toroidal).
# Directions keep their historic bit values so a tile is just an OR of them.

from enum import IntEnum
from typing import Iterator, Tuple


class Direction(IntEnum):
    R = 0x01
    U = 0x02
    L = 0x04
    D = 0x08


# Anticlockwise order; index arithmetic mod 4 is rotation.
DIRECTIONS = (Direction.R, Direction.U, Direction.L, Direction.D)
ALL_DIRS = 0x0F

_DELTAS = {
    Direction.R: (1, 0),
    Direction.U: (0, -1),
    Direction.L: (-1, 0),
    Direction.D: (0, 1),
}


def rotate_step(d: Direction, n: int = 1) -> Direction:
    """Rotate a single direction n quarter-turns anticlockwise (negative n = clockwise)."""
    return DIRECTIONS[(DIRECTIONS.index(d) + n) % 4]


def anticlockwise(d: Direction) -> Direction:
    return rotate_step(d, 1)


def clockwise(d: Direction) -> Direction:
    return rotate_step(d, -1)


def flip(d: Direction) -> Direction:
    return rotate_step(d, 2)


def rotate(mask: int, n: int) -> int:
    """
    Rotate the low four direction bits of mask by n quarter-turns anticlockwise.
    n is taken mod 4 (0 identity, 1 ACW, 2 flip, 3 CW); bits above 0x0F pass through.
    """
    out = mask & ~ALL_DIRS
    for d in DIRECTIONS:
        if mask & d:
            out |= rotate_step(d, n)
    return out


def delta(d: Direction) -> Tuple[int, int]:
    return _DELTAS[d]


def neighbour(x: int, y: int, d: Direction, width: int, height: int, wrapping: bool) -> Tuple[int, int]:
    """
    Step one cell in direction d. Coordinates always wrap modulo the grid size;
    on a non-wrapping board callers must not step off the edge (the border is
    barriered), and doing so is an assertion failure.
    """
    dx, dy = _DELTAS[d]
    if not wrapping:
        assert 0 <= x + dx < width and 0 <= y + dy < height, "stepped off a non-wrapping grid"
    return (x + dx) % width, (y + dy) % height


def on_border(x: int, y: int, d: Direction, width: int, height: int) -> bool:
    """True when moving from (x, y) in direction d would leave a non-wrapping grid."""
    dx, dy = _DELTAS[d]
    return not (0 <= x + dx < width and 0 <= y + dy < height)


def count_bits(mask: int) -> int:
    return sum(1 for d in DIRECTIONS if mask & d)


def iter_dirs(mask: int) -> Iterator[Direction]:
    for d in DIRECTIONS:
        if mask & d:
            yield d
