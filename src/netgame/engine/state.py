# src/netgame/engine/state.py
# GameState: the tile grid, the barrier grid and the bookkeeping around them.
# Grids are [row][col] lists of bytes (see tiles.py for the bit layout).

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

from ..tiles import corners_of, edges_of, is_locked, mask_of

XY = Tuple[int, int]


class Rotation(IntEnum):
    # Values are quarter-turn counts for grid.rotate.
    ANTICLOCKWISE = 1
    CLOCKWISE = -1


@dataclass
class GameState:
    width: int
    height: int
    cx: int
    cy: int
    wrapping: bool
    tiles: List[List[int]]
    barriers: List[List[int]]
    completed: bool = False
    last_rotate_direction: Rotation = Rotation.ANTICLOCKWISE

    @property
    def centre(self) -> XY:
        return (self.cx, self.cy)

    @property
    def size(self) -> XY:
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self):
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    # ---- per-cell queries ----
    def tile(self, x: int, y: int) -> int:
        return self.tiles[y][x]

    def mask(self, x: int, y: int) -> int:
        return mask_of(self.tiles[y][x])

    def locked(self, x: int, y: int) -> bool:
        return is_locked(self.tiles[y][x])

    def barrier(self, x: int, y: int) -> int:
        return edges_of(self.barriers[y][x])

    def corners(self, x: int, y: int) -> int:
        return corners_of(self.barriers[y][x])

    def masks(self) -> List[List[int]]:
        return [[mask_of(t) for t in row] for row in self.tiles]


def duplicate(state: GameState) -> GameState:
    """Deep copy; the two states share no mutable data."""
    return GameState(
        width=state.width,
        height=state.height,
        cx=state.cx,
        cy=state.cy,
        wrapping=state.wrapping,
        tiles=[list(row) for row in state.tiles],
        barriers=[list(row) for row in state.barriers],
        completed=state.completed,
        last_rotate_direction=state.last_rotate_direction,
    )
