# src/netgame/mapgen/barriers.py
from typing import List

from ..grid import DIRECTIONS, Direction, anticlockwise, clockwise, delta, flip, neighbour
from ..rng import RandomSource
from ..tiles import corner_bit
from .candidates import CandidateSet


def empty_barriers(width: int, height: int) -> List[List[int]]:
    return [[0 for _ in range(width)] for _ in range(height)]


def add_border_barriers(barriers: List[List[int]], width: int, height: int) -> None:
    """Fence a non-wrapping board: U on row 0, D on the last row, L/R on the end columns."""
    for x in range(width):
        barriers[0][x] |= Direction.U
        barriers[height - 1][x] |= Direction.D
    for y in range(height):
        barriers[y][0] |= Direction.L
        barriers[y][width - 1] |= Direction.R


def collect_barrier_candidates(tiles: List[List[int]], wrapping: bool) -> CandidateSet:
    """
    Every edge not used by the (unshuffled) tree, named once each by its R or D
    half. Edges off a non-wrapping board are already fenced and left out.
    """
    height = len(tiles)
    width = len(tiles[0])
    cands = CandidateSet()
    for y in range(height):
        for x in range(width):
            if not (tiles[y][x] & Direction.R) and (wrapping or x < width - 1):
                cands.insert(x, y, Direction.R)
            if not (tiles[y][x] & Direction.D) and (wrapping or y < height - 1):
                cands.insert(x, y, Direction.D)
    return cands


def barrier_count(probability: float, available: int) -> int:
    n = int(probability * available)
    assert 0 <= n <= available
    return n


def place_barriers(
    barriers: List[List[int]],
    cands: CandidateSet,
    probability: float,
    rng: RandomSource,
    wrapping: bool,
) -> int:
    """
    Draw floor(probability * len(cands)) edges from cands one at a time and
    block both halves of each. Raising the probability with the same random
    stream only extends the sequence, so the result is a superset.
    """
    height = len(barriers)
    width = len(barriers[0])
    n = barrier_count(probability, cands.count())
    for _ in range(n):
        x1, y1, d1 = cands.pick_random_and_remove(rng)
        x2, y2 = neighbour(x1, y1, d1, width, height, wrapping)
        barriers[y1][x1] |= d1
        barriers[y2][x2] |= flip(d1)
    return n


def _inside(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def set_corner_flags(barriers: List[List[int]]) -> None:
    """
    Mark every grid corner where two barrier segments meet, on each tile that
    touches the corner, so the renderer can fill the joint. Neighbours are
    looked up without wrapping, also on toroidal boards.
    """
    height = len(barriers)
    width = len(barriers[0])
    for y in range(height):
        for x in range(width):
            for d in DIRECTIONS:
                if not (barriers[y][x] & d):
                    continue
                d2 = anticlockwise(d)
                dx, dy = delta(d)
                dx2, dy2 = delta(d2)
                x1, y1 = x + dx, y + dy
                x2, y2 = x + dx2, y + dy2
                x3, y3 = x + dx + dx2, y + dy + dy2

                corner = bool(barriers[y][x] & d2)
                if _inside(x1, y1, width, height) and barriers[y1][x1] & d2:
                    corner = True
                if _inside(x2, y2, width, height) and barriers[y2][x2] & d:
                    corner = True
                if not corner:
                    continue

                barriers[y][x] |= corner_bit(d)
                if _inside(x1, y1, width, height):
                    barriers[y1][x1] |= corner_bit(anticlockwise(d))
                if _inside(x2, y2, width, height):
                    barriers[y2][x2] |= corner_bit(clockwise(d))
                if _inside(x3, y3, width, height):
                    barriers[y3][x3] |= corner_bit(flip(d))


def barrier_edges(barriers: List[List[int]], wrapping: bool) -> set:
    """Set of (x, y, R|D) barrier edges, excluding the fence of a non-wrapping board."""
    height = len(barriers)
    width = len(barriers[0])
    out = set()
    for y in range(height):
        for x in range(width):
            if barriers[y][x] & Direction.R and (wrapping or x < width - 1):
                out.add((x, y, Direction.R))
            if barriers[y][x] & Direction.D and (wrapping or y < height - 1):
                out.add((x, y, Direction.D))
    return out
