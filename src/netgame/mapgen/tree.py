# src/netgame/mapgen/tree.py
# Random spanning tree grown outward from the centre cell.
#
# Starting at the centre, repeatedly pick a uniformly random candidate edge
# leading from a connected cell into an unconnected one, and connect it.
# After a cell gains its third arm its fourth candidate is dropped, so no
# full crosses (they'd have only one orientation and give the puzzle away).
#
# This never paints itself into a corner. Any region of cells left unreached
# would have to be bordered on every side by T-pieces pointing away from it,
# which makes the region a rectangle and its border a closed ring of
# connected tiles. Loop avoidance means no such ring can exist, so the
# candidate set only empties once every cell is connected.

import logging
from typing import List

from ..grid import ALL_DIRS, DIRECTIONS, Direction, count_bits, flip, neighbour, on_border
from ..rng import RandomSource
from .candidates import CandidateSet

log = logging.getLogger(__name__)


def empty_tiles(width: int, height: int) -> List[List[int]]:
    return [[0 for _ in range(width)] for _ in range(height)]


def build_spanning_tree(
    width: int,
    height: int,
    cx: int,
    cy: int,
    wrapping: bool,
    rng: RandomSource,
) -> List[List[int]]:
    """
    Return a height×width grid of connection masks forming a spanning tree
    over the board, with every cell carrying 1..3 arms.
    """
    tiles = empty_tiles(width, height)
    possibilities = CandidateSet()

    for d in DIRECTIONS:
        if not on_border(cx, cy, d, width, height):
            possibilities.insert(cx, cy, d)

    while possibilities.count() > 0:
        x1, y1, d1 = possibilities.pick_random_and_remove(rng)
        x2, y2 = neighbour(x1, y1, d1, width, height, wrapping)
        d2 = flip(d1)
        log.debug("picked (%d,%d,%s) <-> (%d,%d,%s)", x1, y1, d1.name, x2, y2, d2.name)

        # We only ever move into an untouched tile.
        tiles[y1][x1] |= d1
        assert tiles[y2][x2] == 0, f"tile ({x2},{y2}) already connected"
        tiles[y2][x2] |= d2

        # T-piece: drop its last way out.
        if count_bits(tiles[y1][x1]) == 3:
            last = Direction(ALL_DIRS ^ tiles[y1][x1])
            if possibilities.find_and_remove(x1, y1, last):
                log.debug("T-piece; removing (%d,%d,%s)", x1, y1, last.name)

        # Everything else pointing at the tile we just entered would close a loop.
        for d in DIRECTIONS:
            if not wrapping and on_border(x2, y2, d, width, height):
                continue
            x3, y3 = neighbour(x2, y2, d, width, height, wrapping)
            if possibilities.find_and_remove(x3, y3, flip(d)):
                log.debug("loop avoidance; removing (%d,%d,%s)", x3, y3, flip(d).name)

        # New frontier out of the tile we just entered.
        for d in DIRECTIONS:
            if d == d2:
                continue
            if not wrapping and on_border(x2, y2, d, width, height):
                continue
            x3, y3 = neighbour(x2, y2, d, width, height, wrapping)
            if tiles[y3][x3]:
                continue
            log.debug("new frontier; adding (%d,%d,%s)", x2, y2, d.name)
            possibilities.insert(x2, y2, d)

    assert possibilities.count() == 0
    return tiles


def count_edges(tiles: List[List[int]]) -> int:
    """Number of undirected connections (each edge sets one bit at both ends)."""
    return sum(count_bits(t) for row in tiles for t in row) // 2
